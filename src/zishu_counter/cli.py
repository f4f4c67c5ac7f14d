"""CLI 인터페이스

Typer 기반 명령줄 인터페이스, Rich 기반 출력
"""

import json
import sys
import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from zishu_counter.utils.logger import get_logger, set_levels
from zishu_counter.utils.text_reader import read_text
from zishu_counter.config.loader import get_config
from zishu_counter.counting.engine import Mode, StatsRecord, compute_stats, get_detailed_stats
from zishu_counter.counting.samples import get_sample_text
from zishu_counter.layout.wrapper import wrap_text, font_measure
from zishu_counter.export.image_exporter import ImageExporter, load_font

logger = get_logger(__name__)
console = Console()
app = typer.Typer(help="Zishu Counter - 중영문 글자 수 통계 도구")


@app.callback()
def main_callback():
    """설정 파일의 로깅 레벨 적용"""
    config = get_config()
    set_levels(config.logging.file_level, config.logging.console_level)


def build_stats_table(stats: StatsRecord, title: str = "统计结果") -> Table:
    """통계 결과 테이블 (화면의 6개 지표)"""
    word_label = "汉字数" if stats.mode is Mode.CJK else "单词数"

    table = Table(title=f"{title} ({stats.mode.label})")
    table.add_column("항목", style="cyan")
    table.add_column("값", justify="right", style="green")
    table.add_row("总字数 (Total)", f"{stats.grand_total:,}")
    table.add_row(f"{word_label} (Words)", f"{stats.total_words:,}")
    table.add_row("标点符号 (Punctuation)", f"{stats.punctuation_count:,}")
    table.add_row("字符数 含空格 (Characters)", f"{stats.character_count:,}")
    table.add_row("字符数 不含空格 (No spaces)", f"{stats.character_count_no_space:,}")
    table.add_row("段落数 (Paragraphs)", f"{stats.paragraph_count:,}")
    return table


def _resolve_text(text: Optional[str], file: Optional[Path]) -> str:
    """--text > FILE > stdin 순서로 입력 텍스트 결정"""
    if text is not None:
        return text
    if file is not None:
        try:
            return read_text(file)
        except FileNotFoundError as e:
            console.print(f"[bold red]❌ {e}[/bold red]")
            raise typer.Exit(1)
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def _resolve_mode(mode: Optional[str]) -> Mode:
    value = mode or get_config().counting.default_mode
    try:
        return Mode(value)
    except ValueError:
        console.print(f"[bold red]❌ 알 수 없는 모드: {value} (zh / en)[/bold red]")
        raise typer.Exit(1)


@app.command()
def count(
    file: Optional[Path] = typer.Argument(None, help="통계할 텍스트 파일"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="직접 입력할 텍스트"),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="통계 모드 (zh: 중문, en: 영문)"),
    as_json: bool = typer.Option(False, "--json", help="JSON 으로 출력"),
):
    """글자 수 통계"""
    source = _resolve_text(text, file)
    selected = _resolve_mode(mode)

    if as_json:
        detail = get_detailed_stats(source, selected)
        typer.echo(json.dumps(detail, ensure_ascii=False, indent=2))
        return

    stats = compute_stats(source, selected)
    console.print(build_stats_table(stats))


@app.command()
def wrap(
    file: Optional[Path] = typer.Argument(None, help="텍스트 파일"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="직접 입력할 텍스트"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="한 줄 최대 폭 (px, 기본: 이미지 본문 폭)"),
    font_size: Optional[int] = typer.Option(None, "--font-size", help="폰트 크기 (px)"),
    chars: bool = typer.Option(False, "--chars", help="폰트 대신 글자 수로 폭 측정"),
):
    """이미지 내보내기와 같은 규칙으로 줄바꿈 결과 출력"""
    source = _resolve_text(text, file)
    export_config = get_config().export
    max_width = width if width is not None else export_config.width - export_config.padding * 2

    if chars:
        measure = len
    else:
        font = load_font(export_config.fonts, font_size or export_config.font_size)
        measure = font_measure(font)

    for line in wrap_text(source, max_width, measure):
        typer.echo(line)


@app.command()
def export(
    file: Optional[Path] = typer.Argument(None, help="텍스트 파일"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="직접 입력할 텍스트"),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="통계 모드 (zh: 중문, en: 영문)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="저장 경로 (.png)"),
):
    """텍스트와 글자 수를 PNG 이미지로 내보내기"""
    source = _resolve_text(text, file)
    selected = _resolve_mode(mode)

    exporter = ImageExporter()
    try:
        path = exporter.export(source, selected, str(output) if output else None)
    except ValueError as e:
        console.print(f"[bold yellow]⚠️ {e}[/bold yellow]")
        raise typer.Exit(1)
    except OSError as e:
        logger.error(f"Image export failed: {e}", exc_info=True)
        console.print(f"[bold red]❌ 导出失败，请重试 (Export failed): {e}[/bold red]")
        raise typer.Exit(1)

    console.print(f"✅ 高清图片导出成功！ [green]{path}[/green]")


@app.command()
def example(
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="통계 모드 (zh: 중문, en: 영문)"),
):
    """예시 텍스트와 통계 출력"""
    selected = _resolve_mode(mode)
    sample = get_sample_text(selected)

    console.print(Panel(sample, title="示例文本 (Sample)", border_style="blue"))
    console.print(build_stats_table(compute_stats(sample, selected)))


@app.command()
def menu():
    """대화형 모드 실행"""
    from zishu_counter.menu import InteractiveMenu

    InteractiveMenu(mode=_resolve_mode(None)).run()


if __name__ == "__main__":
    app()
