"""이미지 내보내기용 줄바꿈 엔진

글자(코드 포인트) 단위의 탐욕적(greedy) 줄바꿈.
중문은 단어 사이 공백이 없으므로 단어 단위가 아니라 글자 단위로 자른다.
"""

from typing import Callable, List, Union
from zishu_counter.utils.logger import get_logger

logger = get_logger(__name__)

Measure = Callable[[str], float]


def wrap_text(text: str, max_width: Union[int, float], measure: Measure) -> List[str]:
    """텍스트를 max_width 안에 들어가도록 줄 단위로 나눈다

    Args:
        text: 원문 (\\n 으로 단락 구분)
        max_width: 한 줄 최대 폭 (measure 와 같은 단위)
        measure: 문자열 -> 렌더링 폭 함수 (폰트/크기 의존)

    Returns:
        줄 리스트. 빈 단락(공백뿐인 단락 포함)은 "" 한 줄로 남는다.

    Examples:
        >>> wrap_text("ab", 1, len)
        ['a', 'b']
        >>> wrap_text("a\\n\\nb", 10, len)
        ['a', '', 'b']
    """
    lines: List[str] = []
    text = text or ""

    for paragraph in text.split("\n"):
        if not paragraph.strip():
            lines.append("")
            continue

        # 폭이 0 이하이면 글자마다 새 줄
        if max_width <= 0:
            lines.extend(paragraph)
            continue

        line = ""
        for char in paragraph:
            candidate = line + char
            if measure(candidate) > max_width and line:
                lines.append(line)
                line = char
            else:
                line = candidate

        if line:
            lines.append(line)

    logger.debug(f"Wrapped {len(text)} chars into {len(lines)} lines (max_width={max_width})")
    return lines


def font_measure(font) -> Measure:
    """Pillow 폰트를 measure 함수로 변환

    Args:
        font: ImageFont.FreeTypeFont 또는 ImageFont.load_default() 결과

    Returns:
        문자열 폭(px)을 돌려주는 함수
    """
    def measure(s: str) -> float:
        return font.getlength(s)

    return measure
