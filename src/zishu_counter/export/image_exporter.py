"""이미지 내보내기

Pillow 기반 PNG 렌더링: 윗줄 / 본문 / 아랫줄 / 우측 하단 글자 수
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont
from zishu_counter.utils.logger import get_logger
from zishu_counter.config.loader import ExportConfig, get_config
from zishu_counter.counting.engine import Mode, compute_stats
from zishu_counter.layout.wrapper import wrap_text, font_measure

logger = get_logger(__name__)


def load_font(candidates: List[str], size: int):
    """후보 폰트를 순서대로 시도하고, 모두 실패하면 Pillow 기본 폰트 사용

    Args:
        candidates: 폰트 파일명 또는 경로 리스트
        size: 폰트 크기 (px)

    Returns:
        ImageFont 객체
    """
    for name in candidates:
        try:
            font = ImageFont.truetype(name, size)
            logger.debug(f"Font loaded: {name} ({size}px)")
            return font
        except OSError:
            logger.debug(f"Font not available: {name}")

    logger.warning(f"No CJK font found in {candidates}, falling back to default font")
    return ImageFont.load_default(size=size)


class ImageExporter:
    """통계 결과 이미지 생성기"""

    def __init__(self, config: Optional[ExportConfig] = None, output_dir: Optional[str] = None):
        """
        Args:
            config: 내보내기 설정 (None이면 전역 설정)
            output_dir: 출력 디렉토리 (None이면 전역 설정의 output_folder)
        """
        app_config = get_config()
        self.config = config or app_config.export
        self.output_dir = Path(output_dir or app_config.paths.output_folder)

        scale = self.config.scale
        self.body_font = load_font(self.config.fonts, self.config.font_size * scale)
        self.count_font = load_font(self.config.fonts, self.config.count_font_size * scale)

        logger.info("ImageExporter initialized")

    @property
    def max_text_width(self) -> int:
        """본문 최대 폭 (배율 적용)"""
        return (self.config.width - self.config.padding * 2) * self.config.scale

    def layout(self, text: str) -> List[str]:
        """본문 줄바꿈 결과"""
        return wrap_text(text, self.max_text_width, font_measure(self.body_font))

    def canvas_size(self, line_count: int) -> Tuple[int, int]:
        """캔버스 크기 (배율 적용)

        높이 = 여백 + 윗줄 + 여백 + 본문 + 여백 + 아랫줄 + 글자 수 영역
        """
        c = self.config
        base_height = (
            c.line_margin + c.line_thickness + c.line_margin
            + line_count * c.line_height
            + c.line_margin + c.line_thickness + c.count_area_height
        )
        return c.width * c.scale, base_height * c.scale

    def render(self, text: str, mode: Mode = Mode.CJK) -> Image.Image:
        """이미지 렌더링

        Args:
            text: 원문 (앞뒤 공백 제거 후 사용)
            mode: 통계 모드 (우측 하단 글자 수에 반영)

        Returns:
            PIL Image (RGB)

        Raises:
            ValueError: 텍스트가 비어 있을 때
        """
        text = (text or "").strip()
        if not text:
            raise ValueError("내보낼 텍스트가 없습니다 (请先输入文字内容)")

        c = self.config
        s = c.scale
        lines = self.layout(text)
        width, height = self.canvas_size(len(lines))

        img = Image.new("RGB", (width, height), c.background_color)
        draw = ImageDraw.Draw(img)

        left = c.padding * s
        right = (c.width - c.padding) * s
        y = c.line_margin * s

        # 윗줄
        draw.rectangle([left, y, right - 1, y + c.line_thickness * s - 1], fill=c.rule_color)
        y += (c.line_thickness + c.line_margin) * s

        # 본문
        for i, line in enumerate(lines):
            if line:
                draw.text((left, y + i * c.line_height * s), line, font=self.body_font, fill=c.text_color)
        y += (len(lines) * c.line_height + c.line_margin) * s

        # 아랫줄
        draw.rectangle([left, y, right - 1, y + c.line_thickness * s - 1], fill=c.rule_color)
        y += (c.line_thickness + c.count_gap) * s

        # 글자 수 (우측 정렬)
        grand_total = compute_stats(text, mode).grand_total
        label = c.count_template.format(count=grand_total)
        label_width = self.count_font.getlength(label)
        draw.text((right - label_width, y + c.count_offset * s), label, font=self.count_font, fill=c.count_color)

        logger.debug(f"Rendered {len(lines)} lines into {width}x{height} image (total={grand_total})")
        return img

    def build_filename(self, grand_total: int, date: Optional[datetime] = None) -> str:
        """출력 파일명 (예: 字数统计_5字_2026-10-18.png)"""
        date = date or datetime.now()
        return self.config.filename_template.format(count=grand_total, date=date.strftime("%Y-%m-%d"))

    def export(self, text: str, mode: Mode = Mode.CJK, output_path: Optional[str] = None) -> Path:
        """PNG 파일로 저장

        Args:
            text: 원문
            mode: 통계 모드
            output_path: 저장 경로 (None이면 output_dir/파일명 규칙)

        Returns:
            저장된 파일 경로

        Raises:
            ValueError: 텍스트가 비어 있을 때
        """
        img = self.render(text, mode)

        if output_path:
            path = Path(output_path)
        else:
            grand_total = compute_stats(text.strip(), mode).grand_total
            path = self.output_dir / self.build_filename(grand_total)
        path.parent.mkdir(parents=True, exist_ok=True)

        img.save(path, "PNG")
        logger.info(f"✅ Image exported: {path}")
        return path
