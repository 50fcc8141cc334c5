"""
Test suite for vendor response and history parsing.

Covers content extraction across response shapes, history normalization
and SSE line decoding for both streaming formats.

System role: Verification of provider-neutral parsing helpers
"""

import json

import pytest

from backend.core.ai.response_parsing import (
    build_messages,
    enhance_with_system_prompt,
    extract_content,
    parse_dashscope_sse_line,
    parse_openai_sse_line,
)


class TestExtractContent:
    """Test suite for extract_content()."""

    @pytest.mark.parametrize(
        "body,expected",
        [
            ({"choices": [{"message": {"content": "openai"}}]}, "openai"),
            ({"choices": [{"delta": {"content": "delta"}}]}, "delta"),
            ({"output": {"text": "dashscope"}}, "dashscope"),
            ({"data": {"choices": [{"content": "nested"}]}}, "nested"),
            ({"content": "flat"}, "flat"),
        ],
    )
    def test_extract_content_should_read_known_shapes(self, body: dict, expected: str) -> None:
        assert extract_content(json.dumps(body)) == expected

    def test_extract_content_should_return_plain_text_unchanged(self) -> None:
        assert extract_content("just text") == "just text"

    def test_extract_content_should_fall_back_to_raw_for_unknown_json(self) -> None:
        raw = json.dumps({"unexpected": True})
        assert extract_content(raw) == raw

    def test_extract_content_should_return_raw_for_broken_json(self) -> None:
        raw = '{"choices": ['
        assert extract_content(raw) == raw

    def test_extract_content_should_return_empty_first_match(self) -> None:
        """Test an empty message content is returned rather than the raw body."""
        body = {"choices": [{"message": {"role": "assistant", "content": ""}}], "content": "fallback"}
        assert extract_content(json.dumps(body)) == ""

    def test_extract_content_should_pass_through_none(self) -> None:
        assert extract_content(None) is None


class TestBuildMessages:
    """Test suite for build_messages()."""

    def test_build_messages_should_wrap_plain_text_as_user_message(self) -> None:
        # Act
        messages = build_messages("hello", "be brief")

        # Assert
        assert messages == [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "hello"},
        ]

    def test_build_messages_should_drop_history_system_and_invalid_entries(self) -> None:
        # Arrange
        history = json.dumps([
            {"role": "system", "content": "ignored"},
            {"role": "user", "content": "  hi  "},
            {"role": "tool", "content": "bad role"},
            {"role": "assistant", "content": ""},
            "not an object",
            {"role": "assistant", "content": "hello"},
        ])

        # Act
        messages = build_messages(history, None)

        # Assert
        assert messages == [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ]

    def test_build_messages_should_treat_unparsable_array_as_text(self) -> None:
        messages = build_messages("[not json", None)
        assert messages == [{"role": "user", "content": "[not json"}]


class TestEnhanceWithSystemPrompt:
    """Test suite for enhance_with_system_prompt()."""

    def test_enhance_should_keep_existing_system_message(self) -> None:
        items = [{"role": "system", "content": "own"}, {"role": "user", "content": "q"}]
        assert enhance_with_system_prompt(json.dumps(items), "configured") == items

    def test_enhance_should_prepend_configured_prompt(self) -> None:
        items = [{"role": "user", "content": "q"}]
        result = enhance_with_system_prompt(json.dumps(items), "configured")
        assert result[0] == {"role": "system", "content": "configured"}
        assert result[1:] == items

    def test_enhance_should_wrap_text_history(self) -> None:
        assert enhance_with_system_prompt("q", None) == [{"role": "user", "content": "q"}]


class TestSseLines:
    """Test suite for SSE line decoders."""

    def test_openai_line_should_yield_delta_content(self) -> None:
        line = 'data: {"choices":[{"delta":{"content":"Hi"}}]}'
        assert parse_openai_sse_line(line) == ("Hi", False)

    def test_openai_line_should_finish_on_done(self) -> None:
        assert parse_openai_sse_line("data: [DONE]") == (None, True)

    @pytest.mark.parametrize("line", ["", ": keep-alive", "event: ping", "data: {broken"])
    def test_openai_line_should_ignore_other_lines(self, line: str) -> None:
        assert parse_openai_sse_line(line) == (None, False)

    def test_dashscope_line_should_yield_text_without_space_after_prefix(self) -> None:
        line = 'data:{"output":{"text":"你好","finish_reason":"null"}}'
        assert parse_dashscope_sse_line(line) == ("你好", False)

    def test_dashscope_line_should_finish_on_finish_reason(self) -> None:
        line = 'data:{"output":{"text":"end","finish_reason":"stop"}}'
        assert parse_dashscope_sse_line(line) == ("end", True)

    def test_dashscope_line_should_skip_empty_data(self) -> None:
        assert parse_dashscope_sse_line("data:") == (None, False)
