"""CLI 테스트"""

import json
import tempfile
from pathlib import Path

from typer.testing import CliRunner

from zishu_counter.cli import app

runner = CliRunner()


def test_help():
    """도움말 테스트"""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "count" in result.stdout


def test_count_table():
    """통계 테이블 출력"""
    result = runner.invoke(app, ["count", "--text", "你好, world!", "--mode", "zh"])
    assert result.exit_code == 0
    assert "中文统计模式" in result.stdout
    assert "Total" in result.stdout


def test_count_json():
    """JSON 출력"""
    result = runner.invoke(app, ["count", "-t", "你好, world!", "-m", "en", "--json"])
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["mode"] == "en"
    assert data["total_words"] == 1
    assert data["grand_total"] == 3
    assert data["character_count"] == 10


def test_count_from_file_and_stdin():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "input.txt"
        path.write_text("第一段\n\n第二段", encoding="utf-8")

        result = runner.invoke(app, ["count", str(path), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["paragraph_count"] == 2

    result = runner.invoke(app, ["count", "--json"], input="hello world")
    assert result.exit_code == 0
    assert json.loads(result.stdout)["word_count"] == 2


def test_count_missing_file():
    result = runner.invoke(app, ["count", "no-such-file.txt"])
    assert result.exit_code == 1


def test_count_invalid_mode():
    result = runner.invoke(app, ["count", "-t", "abc", "-m", "fr"])
    assert result.exit_code == 1


def test_wrap_by_characters():
    result = runner.invoke(app, ["wrap", "--chars", "--width", "2", "--text", "abcde\n\nxy"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["ab", "cd", "e", "", "xy"]


def test_export():
    with tempfile.TemporaryDirectory() as tmp:
        target = Path(tmp) / "out.png"
        result = runner.invoke(app, ["export", "--text", "你好, world!", "-o", str(target)])
        assert result.exit_code == 0
        assert target.exists()


def test_export_empty_text():
    result = runner.invoke(app, ["export", "--text", "   "])
    assert result.exit_code == 1


def test_example():
    result = runner.invoke(app, ["example", "--mode", "en"])
    assert result.exit_code == 0
    assert "sample text" in result.stdout


if __name__ == "__main__":
    print("Testing CLI...")
    test_help()
    test_count_table()
    test_count_json()
    test_count_from_file_and_stdin()
    test_wrap_by_characters()
    test_export()
    print("\n✅ CLI tests passed!")
