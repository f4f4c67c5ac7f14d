"""글자 수 통계 엔진

입력 텍스트를 한자(CJK 통합 한자) / 문장부호 / 라틴 단어 / 기타(공백 등)로 분류해 집계한다.
두 가지 통계 모드를 지원한다:

- Mode.CJK (중문 모드): 한자 1자 = 1, 영문 단어 1개 = 1
- Mode.LATIN (영문 모드): 영문 단어만 집계, 한자는 글자 수에만 반영

모든 함수는 입력이 None/빈 문자열이어도 0을 반환하며 예외를 던지지 않는다.
"""

import re
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from zishu_counter.utils.logger import get_logger

logger = get_logger(__name__)


class Mode(str, Enum):
    """통계 모드"""
    CJK = "zh"
    LATIN = "en"

    def toggled(self) -> "Mode":
        """반대 모드 반환"""
        return Mode.LATIN if self is Mode.CJK else Mode.CJK

    @property
    def label(self) -> str:
        return "中文统计模式" if self is Mode.CJK else "英文统计模式"


# CJK 통합 한자 범위 (기본, 확장 A, 호환 한자) - 양끝 포함
IDEOGRAPH_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0xF900, 0xFAFF),
)

# 중영문 문장부호 집합
ASCII_PUNCTUATION = ".!?,:;'\"()[]{}-/\\@#$%^&*+=<>|~`"
DASH_PUNCTUATION = "\u2013\u2014"  # – —
FULLWIDTH_PUNCTUATION = "，。！？；：（）【】《》、"
QUOTE_PUNCTUATION = "\u201c\u201d\u2018\u2019"  # “ ” ‘ ’

PUNCTUATION = frozenset(
    ASCII_PUNCTUATION + DASH_PUNCTUATION + FULLWIDTH_PUNCTUATION + QUOTE_PUNCTUATION
)

# 공백 문자 집합 (ECMAScript \s 와 동일, \x1c-\x1f 와 \x85 는 제외)
_WHITESPACE_PATTERN = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)
_PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n+")


def is_ideograph(char: str) -> bool:
    """한 글자(코드 포인트)가 CJK 통합 한자인지 판별"""
    code = ord(char)
    for start, end in IDEOGRAPH_RANGES:
        if start <= code <= end:
            return True
    return False


def is_punctuation(char: str) -> bool:
    """한 글자가 집계 대상 문장부호인지 판별"""
    return char in PUNCTUATION


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def count_ideographs(text: Optional[str]) -> int:
    """한자 수 집계

    Examples:
        >>> count_ideographs("你好, world!")
        2
    """
    if not text:
        return 0
    return sum(1 for char in text if is_ideograph(char))


def count_punctuation(text: Optional[str]) -> int:
    """문장부호 수 집계

    Examples:
        >>> count_punctuation("你好, world!")
        2
    """
    if not text:
        return 0
    return sum(1 for char in text if char in PUNCTUATION)


def count_latin_words(text: Optional[str]) -> int:
    """영문/숫자 단어 수 집계

    한자와 문장부호를 공백으로 바꾼 뒤 공백 기준으로 나누고,
    ASCII 영문자나 숫자를 하나 이상 포함한 토큰만 센다.
    아포스트로피도 문장부호이므로 "O'Brien"은 "O", "Brien" 두 단어가 된다.

    Examples:
        >>> count_latin_words("你好, world!")
        1
        >>> count_latin_words("   ")
        0
    """
    if not text or not text.strip():
        return 0

    stripped = "".join(
        " " if (is_ideograph(char) or char in PUNCTUATION) else char
        for char in text
    )
    tokens = stripped.split()
    return sum(1 for token in tokens if any(_is_ascii_alnum(c) for c in token))


def count_total_words(text: Optional[str], mode: Mode = Mode.CJK) -> int:
    """모드별 단어 수

    - CJK: 한자 수 + 영문 단어 수
    - LATIN: 영문 단어 수만
    """
    if Mode(mode) is Mode.CJK:
        return count_ideographs(text) + count_latin_words(text)
    return count_latin_words(text)


def utf16_length(text: str) -> int:
    """UTF-16 코드 유닛 수 (BMP 밖 문자는 2)"""
    return len(text.encode("utf-16-le")) // 2


def count_characters(text: Optional[str]) -> int:
    """공백 포함 글자 수 (UTF-16 코드 유닛 기준, 이모지 1개 = 2)"""
    return utf16_length(text) if text else 0


def count_characters_no_space(text: Optional[str]) -> int:
    """공백 제외 글자 수 (탭, 줄바꿈, 전각 공백 등 제외, UTF-16 코드 유닛 기준)"""
    if not text:
        return 0
    return utf16_length(_WHITESPACE_PATTERN.sub("", text))


def count_paragraphs(text: Optional[str]) -> int:
    """단락 수 집계

    연속된 줄바꿈 기준으로 나누고, 비어 있거나 공백뿐인 구간은 버린다.

    Examples:
        >>> count_paragraphs("a\\n\\nb\\n")
        2
    """
    if not text or not text.strip():
        return 0
    segments = _PARAGRAPH_SPLIT_PATTERN.split(text)
    return sum(1 for segment in segments if segment.strip())


@dataclass(frozen=True)
class StatsRecord:
    """한 번의 통계 결과"""
    ideograph_count: int
    word_count: int
    punctuation_count: int
    character_count: int
    character_count_no_space: int
    paragraph_count: int
    total_words: int
    grand_total: int
    mode: Mode = Mode.CJK

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data


def compute_stats(text: Optional[str], mode: Mode = Mode.CJK) -> StatsRecord:
    """전체 통계 계산

    Args:
        text: 입력 텍스트 (None은 빈 문자열로 취급)
        mode: 통계 모드

    Returns:
        StatsRecord (grand_total = total_words + punctuation_count)
    """
    text = text or ""
    mode = Mode(mode)

    ideographs = count_ideographs(text)
    words = count_latin_words(text)
    punctuation = count_punctuation(text)
    total_words = ideographs + words if mode is Mode.CJK else words

    record = StatsRecord(
        ideograph_count=ideographs,
        word_count=words,
        punctuation_count=punctuation,
        character_count=count_characters(text),
        character_count_no_space=count_characters_no_space(text),
        paragraph_count=count_paragraphs(text),
        total_words=total_words,
        grand_total=total_words + punctuation,
        mode=mode,
    )
    logger.debug(f"Stats computed ({mode.value}): total={record.grand_total}, chars={record.character_count}")
    return record


def get_detailed_stats(text: Optional[str], mode: Mode = Mode.CJK) -> Dict[str, Any]:
    """상세 통계 (JSON 출력 / 상세 보기용)

    Returns:
        모든 지표 + 모드 + 원문 + 집계 시각을 담은 dict
    """
    text = text or ""
    record = compute_stats(text, mode)
    detail = record.to_dict()
    detail["text"] = text
    detail["computed_at"] = datetime.now().isoformat(timespec="seconds")
    return detail
