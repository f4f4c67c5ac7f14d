"""설정 로더 테스트

config.yml 로드/저장, 기본값, 싱글톤 폴백 검증
"""

import os
import tempfile
import unittest
from pathlib import Path

import yaml

from zishu_counter.config.loader import (
    Config,
    ExportConfig,
    get_config,
    load_config,
    reset_config,
    save_config,
)

REPO_CONFIG = Path(__file__).parent / "config" / "config.yml"


class TestConfigLoader(unittest.TestCase):
    """설정 로더 테스트"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "config.yml"

    def tearDown(self):
        self.tmp.cleanup()
        reset_config()

    def test_repo_config_matches_defaults(self):
        """저장소의 config.yml 은 내장 기본값과 같다"""
        self.assertEqual(load_config(str(REPO_CONFIG)), Config())

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_config(str(self.path))

    def test_partial_file_uses_defaults(self):
        self.path.write_text("counting:\n  default_mode: en\nexport:\n  scale: 1\n", encoding="utf-8")

        config = load_config(str(self.path))
        self.assertEqual(config.counting.default_mode, "en")
        self.assertEqual(config.export.scale, 1)
        self.assertEqual(config.export.width, 800)
        self.assertEqual(config.logging.console_level, "WARNING")

    def test_empty_file_uses_defaults(self):
        self.path.write_text("", encoding="utf-8")
        self.assertEqual(load_config(str(self.path)), Config())

    def test_unknown_key_raises(self):
        self.path.write_text("export:\n  colour: red\n", encoding="utf-8")
        with self.assertRaises(TypeError):
            load_config(str(self.path))

    def test_save_and_reload(self):
        config = Config(export=ExportConfig(width=600, count_template="{count} words"))
        save_config(config, str(self.path))

        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self.assertEqual(data["export"]["width"], 600)
        # 한자 파일명 규칙이 이스케이프 없이 저장된다
        self.assertIn("字数统计", self.path.read_text(encoding="utf-8"))

        self.assertEqual(load_config(str(self.path)), config)

    def test_get_config_falls_back_to_defaults(self):
        """기본 설정 파일이 없으면 내장 기본값"""
        cwd = os.getcwd()
        reset_config()
        try:
            os.chdir(self.tmp.name)
            config = get_config()
            self.assertEqual(config, Config())
            self.assertIs(get_config(), config)
        finally:
            os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
