"""모드별 예시 텍스트"""

from zishu_counter.counting.engine import Mode

SAMPLE_TEXTS = {
    Mode.CJK: (
        "这是一个中文字数统计的示例文本。它包含了中文汉字、英文单词和各种标点符号！\n"
        "\n"
        "我们来测试一下混合文本的统计效果：Hello world! 这样的混合文本应该能够正确统计。\n"
        "\n"
        "Does it work correctly? 当然可以！"
    ),
    Mode.LATIN: (
        "This is a sample text for testing the word counting functionality. \n"
        "\n"
        "It includes multiple sentences, punctuation marks, and paragraphs. "
        "Let's see how accurately it counts words and punctuation marks according to essay writing standards.\n"
        "\n"
        "Does it work correctly? Yes, it should!"
    ),
}

# 모드별 통계 규칙 설명 (화면 표시용)
RULE_DESCRIPTIONS = {
    Mode.CJK: [
        "每个汉字 + 每个标点符号 = 总字数",
        "每个中文汉字计为 1 个字数",
        "英文单词按单词计算",
    ],
    Mode.LATIN: [
        "每个单词 + 每个标点符号 = 总字数",
        "每个英文单词计为 1 个字数",
        "中文汉字不计入统计",
    ],
}


def get_sample_text(mode: Mode = Mode.CJK) -> str:
    """모드에 맞는 예시 텍스트 반환"""
    return SAMPLE_TEXTS[Mode(mode)]
