"""텍스트 파일 읽기

인코딩 자동 감지(chardet) 후 본문을 문자열로 반환
"""

import chardet
from pathlib import Path
from typing import List, Optional, Tuple, Union
from zishu_counter.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "utf-8"
# 감지가 모두 실패했을 때 마지막으로 시도하는 중문 인코딩 (GBK/GB2312 상위 호환)
CJK_FALLBACK_ENCODING = "gb18030"


def guess_encoding(raw: bytes, sample_size: int = 10000) -> Tuple[Optional[str], float]:
    """chardet 추측 결과 그대로 반환 (인코딩, 신뢰도)"""
    if not raw:
        return None, 0.0

    result = chardet.detect(raw[:sample_size])
    return result.get("encoding"), result.get("confidence") or 0.0


def detect_encoding(raw: bytes, sample_size: int = 10000) -> Optional[str]:
    """인코딩 감지

    Args:
        raw: 파일 내용 (bytes)
        sample_size: 감지에 사용할 앞부분 크기 (바이트)

    Returns:
        인코딩 이름 (예: 'utf-8', 'GB2312'), 신뢰도 0.7 이하이면 None
    """
    encoding, confidence = guess_encoding(raw, sample_size)

    if encoding and confidence > 0.7:
        logger.debug(f"Encoding detected: {encoding} ({confidence:.2f})")
        return encoding

    logger.debug(f"Low confidence encoding: {encoding} ({confidence:.2f})")
    return None


def _candidate_encodings(raw: bytes, default_encoding: str) -> List[str]:
    """엄격 디코딩을 시도할 순서: 감지 결과(또는 기본값), 낮은 신뢰도 추측, gb18030"""
    guessed, confidence = guess_encoding(raw)
    detected = guessed if confidence > 0.7 else None
    logger.debug(f"Encoding guess: {guessed} ({confidence:.2f})")

    candidates: List[str] = []
    for encoding in (detected or default_encoding, guessed, CJK_FALLBACK_ENCODING):
        if encoding and encoding.lower() not in [c.lower() for c in candidates]:
            candidates.append(encoding)
    return candidates


def read_text(file_path: Union[str, Path], default_encoding: str = DEFAULT_ENCODING) -> str:
    """텍스트 파일 읽기

    감지된 인코딩으로 디코딩이 실패하면 신뢰도가 낮았던 추측과 gb18030 을 차례로 시도하고,
    모두 실패했을 때만 기본 인코딩으로 대체 문자(U+FFFD)를 넣어 읽는다.

    Args:
        file_path: 파일 경로
        default_encoding: 감지 실패 시 사용할 인코딩

    Returns:
        파일 내용 (줄바꿈은 \\n 으로 통일)

    Raises:
        FileNotFoundError: 파일이 없을 때
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    raw = path.read_bytes()
    text = None
    used = default_encoding

    for encoding in _candidate_encodings(raw, default_encoding):
        try:
            text = raw.decode(encoding)
            used = encoding
            break
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning(f"Decode failed with {encoding}: {e}")

    if text is None:
        logger.warning(f"All encodings failed, reading {path.name} as {default_encoding} with replacement")
        text = raw.decode(default_encoding, errors="replace")

    # BOM 제거, 줄바꿈 통일
    text = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    logger.info(f"Read {len(text)} chars from {path.name} ({used})")
    return text
