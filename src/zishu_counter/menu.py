"""대화형 메뉴 TUI

Rich 기반 대화형 글자 수 통계. 텍스트가 바뀔 때마다 전체 통계를 다시 계산해 표시한다.
"""

from typing import List, Optional
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from zishu_counter.utils.logger import get_logger
from zishu_counter.config.loader import get_config
from zishu_counter.counting.engine import Mode, StatsRecord, compute_stats, get_detailed_stats
from zishu_counter.counting.samples import get_sample_text, RULE_DESCRIPTIONS
from zishu_counter.cli import build_stats_table
from zishu_counter.export.image_exporter import ImageExporter

logger = get_logger(__name__)
console = Console()

MENU_CHOICES = ["0", "1", "2", "3", "4", "5", "6", "7"]


class InteractiveMenu:
    """대화형 메뉴 TUI

    현재 텍스트와 모드만 상태로 가지며, 통계는 매번 엔진에 명시적으로 넘겨 계산한다.
    """

    def __init__(self, mode: Mode = Mode.CJK, text: str = "", console: Console = console):
        self.mode = Mode(mode)
        self.text = text
        self.console = console

    @property
    def stats(self) -> StatsRecord:
        return compute_stats(self.text, self.mode)

    def show_banner(self):
        """배너 표시"""
        self.console.print(Panel.fit(
            "[bold cyan]📝 Zishu Counter[/bold cyan]\n"
            "[dim]字数统计工具 - 중영문 글자 수 통계[/dim]",
            border_style="cyan"
        ))

    def show_stats(self):
        """현재 통계 표시"""
        self.console.print(build_stats_table(self.stats))
        if not get_config().ui.show_rules:
            return
        for rule in RULE_DESCRIPTIONS[self.mode]:
            self.console.print(f"  [dim]• {rule}[/dim]")

    def show_menu(self):
        """메인 메뉴 표시"""
        self.console.print("\n[bold green]🎯 메뉴 (Menu)[/bold green]\n")

        menu_items = [
            "[1] ✏️  텍스트 이어 쓰기 (Append text)",
            "[2] 📋 텍스트 붙여넣기 - 교체 (Paste, replace)",
            "[3] 🔄 모드 전환 (Switch mode)",
            "[4] 🧹 지우기 (Clear)",
            "[5] 📖 예시 텍스트 (Sample text)",
            "[6] 📊 상세 통계 (Detailed stats)",
            "[7] 🖼️  이미지 내보내기 (Export image)",
            "[0] 🚪 종료 (Exit)",
        ]

        for item in menu_items:
            self.console.print(f"  {item}")

    def read_block(self) -> str:
        """여러 줄 입력 (빈 줄 두 번 또는 EOF 로 종료)"""
        self.console.print("[dim]입력을 마치려면 빈 줄을 두 번 입력하세요. (Enter an empty line twice to finish)[/dim]")
        lines: List[str] = []
        blank_run = 0
        while True:
            try:
                line = input()
            except EOFError:
                break
            if line == "":
                blank_run += 1
                if blank_run >= 2:
                    break
            else:
                blank_run = 0
            lines.append(line)

        # 종료용 빈 줄은 본문에서 제외
        while lines and lines[-1] == "":
            lines.pop()
        return "\n".join(lines)

    def append_text(self, block: Optional[str] = None):
        """텍스트 이어 쓰기"""
        block = self.read_block() if block is None else block
        if not block:
            return
        self.text = f"{self.text}\n{block}" if self.text else block
        logger.debug(f"Text appended: {len(block)} chars")

    def paste_text(self, block: Optional[str] = None):
        """텍스트 교체"""
        block = self.read_block() if block is None else block
        if not block.strip():
            self.console.print("[yellow]剪贴板为空 (Nothing to paste)[/yellow]")
            return
        self.text = block
        self.console.print("[green]内容已粘贴 (Pasted)[/green]")

    def switch_mode(self):
        """통계 모드 전환"""
        self.mode = self.mode.toggled()
        self.console.print(f"[bold cyan]已切换到{self.mode.label}[/bold cyan]")
        logger.info(f"Mode switched: {self.mode.value}")

    def clear_text(self):
        """텍스트 지우기"""
        self.text = ""

    def load_sample(self):
        """예시 텍스트 불러오기"""
        self.text = get_sample_text(self.mode)

    def show_detail(self):
        """상세 통계 표시"""
        detail = get_detailed_stats(self.text, self.mode)
        detail.pop("text")
        for key, value in detail.items():
            self.console.print(f"  [cyan]{key}[/cyan]: {value}")

    def export_image(self, output_path: Optional[str] = None):
        """이미지 내보내기"""
        try:
            path = ImageExporter().export(self.text, self.mode, output_path)
        except ValueError as e:
            self.console.print(f"[yellow]⚠️ {e}[/yellow]")
            return None
        self.console.print(f"[bold green]✅ 高清图片导出成功！[/bold green] {path}")
        return path

    def handle(self, choice: str) -> bool:
        """메뉴 선택 처리

        Returns:
            계속 실행하면 True, 종료면 False
        """
        if choice == "0":
            return False
        elif choice == "1":
            self.append_text()
        elif choice == "2":
            self.paste_text()
        elif choice == "3":
            self.switch_mode()
        elif choice == "4":
            self.clear_text()
        elif choice == "5":
            self.load_sample()
        elif choice == "6":
            self.show_detail()
        elif choice == "7":
            self.export_image()
        return True

    def run(self):
        """메인 루프"""
        self.show_banner()

        while True:
            try:
                self.show_stats()
                self.show_menu()

                choice = Prompt.ask(
                    "\n선택하세요 (Choose an option)",
                    choices=MENU_CHOICES,
                    default="1",
                    console=self.console
                )

                if not self.handle(choice):
                    self.console.print("\n[bold cyan]👋 프로그램을 종료합니다. (Exiting...)[/bold cyan]")
                    break

            except KeyboardInterrupt:
                self.console.print("\n\n[bold yellow]⚠️ 사용자가 중단했습니다. (Interrupted by user)[/bold yellow]")
                if Confirm.ask("정말 종료하시겠습니까? (Really exit?)", console=self.console):
                    break
            except Exception as e:
                self.console.print(f"\n[bold red]❌ 오류 발생 (Error occurred): {e}[/bold red]")
                logger.error(f"Menu error: {e}", exc_info=True)


def main():
    """메뉴 실행"""
    menu = InteractiveMenu()
    menu.run()


if __name__ == "__main__":
    main()
