"""텍스트 파일 읽기 테스트

인코딩 감지, BOM/줄바꿈 정리, 파일 없음 처리 검증
"""

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from zishu_counter.counting.engine import Mode, compute_stats
from zishu_counter.counting.samples import get_sample_text
from zishu_counter.utils.text_reader import detect_encoding, guess_encoding, read_text


class TestTextReader(unittest.TestCase):
    """read_text 테스트"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_utf8(self):
        path = self.dir / "utf8.txt"
        path.write_bytes("你好, world!".encode("utf-8"))
        self.assertEqual(read_text(path), "你好, world!")

    def test_gbk_detected(self):
        """GBK 로 저장된 중문 텍스트"""
        text = get_sample_text(Mode.CJK) * 5
        path = self.dir / "gbk.txt"
        path.write_bytes(text.encode("gbk"))

        result = read_text(path)
        self.assertEqual(result, text)
        self.assertEqual(compute_stats(result).grand_total, compute_stats(text).grand_total)

    def test_bom_and_crlf_normalized(self):
        path = self.dir / "bom.txt"
        path.write_bytes("\ufeff第一段\r\n\r\n第二段\r".encode("utf-8"))

        result = read_text(path)
        self.assertEqual(result, "第一段\n\n第二段\n")
        self.assertEqual(compute_stats(result).paragraph_count, 2)

    def test_empty_file(self):
        path = self.dir / "empty.txt"
        path.write_bytes(b"")
        self.assertEqual(read_text(path), "")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            read_text(self.dir / "missing.txt")

    def test_detect_encoding_empty(self):
        self.assertIsNone(detect_encoding(b""))
        self.assertEqual(guess_encoding(b""), (None, 0.0))

    def test_low_confidence_guess_used_when_utf8_fails(self):
        """신뢰도가 낮아도 엄격 디코딩에 성공하면 그 추측을 쓴다"""
        text = "这是一个中文字数统计的示例文本。"
        path = self.dir / "gb.txt"
        path.write_bytes(text.encode("gbk"))

        guess = {"encoding": "GB18030", "confidence": 0.64}
        with mock.patch("zishu_counter.utils.text_reader.chardet.detect", return_value=guess):
            self.assertIsNone(detect_encoding(path.read_bytes()))
            result = read_text(path)

        self.assertEqual(result, text)
        self.assertNotIn("\ufffd", result)

    def test_gb18030_fallback_without_guess(self):
        """추측이 없어도 gb18030 으로 읽는다"""
        text = "你好，世界。第二段"
        path = self.dir / "noguess.txt"
        path.write_bytes(text.encode("gbk"))

        guess = {"encoding": None, "confidence": 0.0}
        with mock.patch("zishu_counter.utils.text_reader.chardet.detect", return_value=guess):
            self.assertEqual(read_text(path), text)

    def test_replacement_is_last_resort(self):
        """모든 후보가 실패하면 대체 문자로 읽는다"""
        path = self.dir / "broken.txt"
        path.write_bytes(b"ab\x80")

        guess = {"encoding": "ascii", "confidence": 0.9}
        with mock.patch("zishu_counter.utils.text_reader.CJK_FALLBACK_ENCODING", "ascii"), \
                mock.patch("zishu_counter.utils.text_reader.chardet.detect", return_value=guess):
            self.assertEqual(read_text(path, default_encoding="ascii"), "ab\ufffd")


if __name__ == "__main__":
    unittest.main()
