"""전역 로깅 설정 모듈

모든 모듈에서 `from zishu_counter.utils.logger import get_logger` 로 사용.
로그 디렉토리는 환경변수 ZISHU_LOG_DIR 로 바꿀 수 있다.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional

# 로그 디렉토리
LOG_DIR = Path(os.environ.get("ZISHU_LOG_DIR", "data/logs"))

# 로그 포맷
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"


def get_log_file(log_dir: Path = LOG_DIR) -> Path:
    """날짜별 로그 파일 경로 (예: data/logs/2026-10-18.log)"""
    return log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log"


# setup_logging 이 붙인 핸들러 (file / console)
_handlers: Dict[str, logging.Handler] = {}


def setup_logging(level: str = "DEBUG", console_level: str = "WARNING",
                  log_dir: Optional[Path] = None) -> Path:
    """전역 로깅 설정
    
    Args:
        level: 파일 로그 레벨 (DEBUG/INFO/WARNING/ERROR)
        console_level: 콘솔 로그 레벨. 통계 출력과 섞이지 않도록 기본 WARNING
        log_dir: 로그 디렉토리 (None이면 LOG_DIR)
    
    Returns:
        로그 파일 경로
    """
    log_dir = Path(log_dir) if log_dir else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = get_log_file(log_dir)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 최소 레벨은 DEBUG
    
    # 이전에 붙인 핸들러 제거 (재설정 시 중복 출력 방지)
    for handler in _handlers.values():
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    
    # 파일 핸들러 (DEBUG 레벨까지 전부 기록)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root_logger.addHandler(file_handler)
    _handlers["file"] = file_handler
    
    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)
    _handlers["console"] = console_handler
    
    set_levels(level, console_level)
    root_logger.debug(f"Logging initialized: file={log_file}, level={level}")
    return log_file


def set_levels(file_level: str, console_level: str) -> None:
    """핸들러를 다시 만들지 않고 레벨만 변경 (설정 파일 반영용)"""
    if "file" in _handlers:
        _handlers["file"].setLevel(getattr(logging, file_level.upper()))
    if "console" in _handlers:
        _handlers["console"].setLevel(getattr(logging, console_level.upper()))


def get_handler(kind: str) -> Optional[logging.Handler]:
    """setup_logging 이 붙인 핸들러 반환 ("file" / "console")"""
    return _handlers.get(kind)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """로거 인스턴스 반환
    
    Args:
        name: 로거 이름 (보통 __name__ 사용)
    
    Returns:
        logging.Logger 인스턴스
    
    Example:
        >>> from zishu_counter.utils.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("통계 계산")
    """
    return logging.getLogger(name or __name__)


# 모듈 임포트 시 자동 초기화
setup_logging()
