"""
Test suite for prompt builders and the tag reply parser.

System role: Verification of prompt construction
"""

from backend.core.ai.prompts import (
    DEFAULT_POLISH_PROMPT,
    DEFAULT_SUMMARY_PROMPT,
    build_article_prompt,
    build_polish_prompt,
    build_summary_prompt,
    build_tag_prompt,
    build_title_prompt,
    parse_tags,
)


class TestArticlePrompt:
    """Test suite for build_article_prompt()."""

    def test_should_expand_known_style(self) -> None:
        prompt = build_article_prompt("Python", style="技术文档", output_format="markdown")

        assert "主题：Python\n" in prompt
        assert "写作风格：详细、准确的技术说明，适合开发者\n" in prompt
        assert "输出格式：请使用Markdown格式输出\n" in prompt

    def test_should_pass_custom_style_through(self) -> None:
        prompt = build_article_prompt("Python", style="像海盗一样说话")
        assert "写作风格：像海盗一样说话\n" in prompt

    def test_should_omit_format_line_for_unknown_format(self) -> None:
        prompt = build_article_prompt("Python", output_format="text")
        assert "输出格式" not in prompt

    def test_should_place_system_prompt_first(self) -> None:
        prompt = build_article_prompt("Python", max_length=800, system_prompt="你是作家")

        assert prompt.startswith("你是作家\n\n请根据以下要求生成文章：\n")
        assert "文章长度：约800字\n" in prompt
        assert prompt.endswith("请直接输出生成的内容，不要包含任何解释或说明。")


class TestTitlePrompt:
    """Test suite for build_title_prompt()."""

    def test_should_number_requested_titles(self) -> None:
        prompt = build_title_prompt("正文", style="疑问式", count=3)

        assert prompt.startswith("请根据以下文章内容生成3个标题：\n\n")
        assert "写作风格：以疑问句形式，引发读者思考\n\n" in prompt
        assert "3. 标题3\n" in prompt
        assert "4. 标题4" not in prompt


class TestSimplePrompts:
    """Test suite for summary and polish prompts."""

    def test_summary_prompt_should_use_default_instruction(self) -> None:
        assert build_summary_prompt("正文") == f"{DEFAULT_SUMMARY_PROMPT}\n正文"

    def test_summary_prompt_should_use_configured_instruction(self) -> None:
        assert build_summary_prompt("正文", "总结：") == "总结：\n正文"

    def test_polish_prompt_should_fall_back_on_blank_instruction(self) -> None:
        prompt = build_polish_prompt("原文", "   ")
        assert prompt.startswith(DEFAULT_POLISH_PROMPT)
        assert "需要润色的内容：\n原文\n\n请直接返回润色后的内容：" in prompt


class TestTagPrompt:
    """Test suite for build_tag_prompt()."""

    def test_should_list_existing_tags(self) -> None:
        prompt = build_tag_prompt("正文", 5, existing_tags=["Python", "后端"])

        assert "请你给我符合文章内容的5个标签" in prompt
        assert "Python、后端" in prompt
        assert prompt.endswith("文章正文如下：\n正文")

    def test_should_skip_existing_section_without_tags(self) -> None:
        assert "【重要】" not in build_tag_prompt("正文", 5, existing_tags=[])


class TestParseTags:
    """Test suite for parse_tags()."""

    def test_should_split_on_commas_and_newlines(self) -> None:
        assert parse_tags("Python，后端, 数据库\n缓存", 10) == ["Python", "后端", "数据库", "缓存"]

    def test_should_strip_list_markers(self) -> None:
        assert parse_tags("1. Python\n- 后端\n• 缓存", 10) == ["Python", "后端", "缓存"]

    def test_should_deduplicate_and_drop_long_tags(self) -> None:
        text = "Python,Python,这是一个非常非常非常长的标签名字"
        assert parse_tags(text, 10) == ["Python"]

    def test_should_stop_at_limit(self) -> None:
        assert parse_tags("a,b,c,d", 2) == ["a", "b"]

    def test_should_return_empty_for_blank_reply(self) -> None:
        assert parse_tags("   ", 5) == []
        assert parse_tags(None, 5) == []
