"""설정 파일 로더 (YAML)

config.yml을 읽어서 Python 객체로 변환
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field, asdict
from zishu_counter.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yml"


@dataclass
class PathsConfig:
    """경로 설정"""
    output_folder: str = "data/exports"


@dataclass
class CountingConfig:
    """통계 옵션"""
    default_mode: str = "zh"


@dataclass
class ExportConfig:
    """이미지 내보내기 옵션 (단위: 배율 적용 전 px)"""
    width: int = 800
    padding: int = 80
    line_height: int = 42
    font_size: int = 28
    count_font_size: int = 24
    scale: int = 3
    line_thickness: int = 3
    line_margin: int = 50
    count_area_height: int = 80
    count_gap: int = 25
    count_offset: int = 15
    background_color: str = "#ffffff"
    rule_color: str = "#2c2c2c"
    text_color: str = "#1a1a1a"
    count_color: str = "#B8860B"
    count_template: str = "{count}字"
    filename_template: str = "字数统计_{count}字_{date}.png"
    fonts: List[str] = field(default_factory=lambda: [
        "Songti.ttc",
        "PingFang.ttc",
        "Hiragino Sans GB.ttc",
        "msyh.ttc",
        "simsun.ttc",
        "NotoSerifCJK-Regular.ttc",
        "NotoSansCJK-Regular.ttc",
    ])


@dataclass
class LoggingConfig:
    """로깅 설정"""
    file_level: str = "DEBUG"
    console_level: str = "WARNING"


@dataclass
class UIConfig:
    """UI 설정"""
    show_rules: bool = True


@dataclass
class Config:
    """전체 설정"""
    paths: PathsConfig = field(default_factory=PathsConfig)
    counting: CountingConfig = field(default_factory=CountingConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def _from_dict(data: Dict[str, Any]) -> Config:
    """dict -> Config (없는 섹션은 기본값)"""
    data = data or {}
    return Config(
        paths=PathsConfig(**data.get("paths", {})),
        counting=CountingConfig(**data.get("counting", {})),
        export=ExportConfig(**data.get("export", {})),
        logging=LoggingConfig(**data.get("logging", {})),
        ui=UIConfig(**data.get("ui", {})),
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """config.yml 로드

    Args:
        config_path: 설정 파일 경로

    Returns:
        Config 객체

    Raises:
        FileNotFoundError: 설정 파일이 없을 때
        yaml.YAMLError: YAML 파싱 에러
        TypeError: 알 수 없는 설정 키가 있을 때
    """
    path = Path(config_path)
    if not path.exists():
        logger.error(f"Config file not found: {config_path}")
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug(f"Loading config from: {config_path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    config = _from_dict(data)
    logger.info(f"✅ Config loaded: mode={config.counting.default_mode}, export width={config.export.width}")
    return config


# 전역 설정 인스턴스 (싱글톤)
_config: Optional[Config] = None


def get_config() -> Config:
    """전역 설정 인스턴스 반환 (싱글톤)

    기본 설정 파일이 없으면 내장 기본값을 사용한다.

    Example:
        >>> from zishu_counter.config.loader import get_config
        >>> config = get_config()
        >>> print(config.export.width)
    """
    global _config
    if _config is None:
        try:
            _config = load_config()
        except FileNotFoundError:
            logger.warning(f"Using built-in default config ({DEFAULT_CONFIG_PATH} not found)")
            _config = Config()
    return _config


def reset_config() -> None:
    """싱글톤 초기화 (테스트용)"""
    global _config
    _config = None


def save_config(config: Config, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """config.yml 저장

    Args:
        config: Config 객체
        config_path: 설정 파일 경로
    """
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(asdict(config), f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    logger.info(f"✅ Config saved: {config_path}")
