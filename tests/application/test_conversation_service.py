"""
Test suite for ConversationService.

Covers multi-turn chat, the streaming event sequence and the widget
config fallbacks.

System role: Verification of assistant conversation orchestration
"""

import json
from typing import AsyncIterator
from unittest.mock import MagicMock

import pytest

from backend.application.services.conversation_service import (
    DEFAULT_THEME,
    ConversationService,
    default_dialog_config,
)
from backend.configs.widgets import AssistantSettings, SummaryDisplaySettings
from backend.core.exceptions import AiProviderError
from backend.models.streaming import StreamEventType


@pytest.fixture
def conversation_service(mock_ai_config: MagicMock) -> ConversationService:
    return ConversationService(
        ai_config=mock_ai_config,
        assistant=AssistantSettings(_env_file=None),
        summary_display=SummaryDisplaySettings(_env_file=None),
    )


def stream_of(*chunks: str, error: AiProviderError | None = None):
    """Build a stream_chat replacement yielding chunks, then raising error."""
    async def stream(history, system_prompt, config) -> AsyncIterator[str]:
        for chunk in chunks:
            yield chunk
        if error is not None:
            raise error

    return stream


class TestChat:
    """Test suite for ConversationService.chat()."""

    @pytest.mark.asyncio
    async def test_should_return_reply_and_type(
        self, conversation_service: ConversationService, mock_provider: MagicMock
    ) -> None:
        # Arrange
        mock_provider.multi_turn_chat.return_value = '{"choices":[{"message":{"content":"你好！"}}]}'
        history = json.dumps([{"role": "user", "content": "你好"}])

        # Act
        result = await conversation_service.chat(history)

        # Assert
        assert result.success is True
        assert result.message == "多轮对话成功"
        assert result.response == "你好！"
        assert result.ai_type == "openAi"
        assert result.timestamp > 0

    @pytest.mark.asyncio
    async def test_should_report_provider_message(
        self, conversation_service: ConversationService, mock_provider: MagicMock
    ) -> None:
        mock_provider.multi_turn_chat.side_effect = AiProviderError("openAi", "multi_turn_chat", "timeout: read", kind="timeout")

        result = await conversation_service.chat("你好")

        assert result.success is False
        assert result.message == "timeout: read"
        assert result.response == ""


class TestStreamChat:
    """Test suite for ConversationService.stream_chat()."""

    @pytest.mark.asyncio
    async def test_should_emit_tokens_then_complete(
        self, conversation_service: ConversationService, mock_provider: MagicMock
    ) -> None:
        # Arrange
        mock_provider.stream_chat = stream_of("你", "好")

        # Act
        events = [e async for e in conversation_service.stream_chat("hi")]

        # Assert
        assert [e.event for e in events] == [
            StreamEventType.TOKEN,
            StreamEventType.TOKEN,
            StreamEventType.COMPLETE,
        ]
        assert events[-1].data == {"full_answer": "你好"}

    @pytest.mark.asyncio
    async def test_should_end_with_error_event(
        self, conversation_service: ConversationService, mock_provider: MagicMock
    ) -> None:
        mock_provider.stream_chat = stream_of(
            "部分", error=AiProviderError("openAi", "stream_chat", "HTTP 502: bad gateway", status_code=502)
        )

        events = [e async for e in conversation_service.stream_chat("hi")]

        assert [e.event for e in events] == [StreamEventType.TOKEN, StreamEventType.ERROR]
        assert events[-1].data == {"message": "HTTP 502: bad gateway"}


class TestWidgetConfig:
    """Test suite for dialog and summary box config."""

    def test_dialog_config_should_use_settings(self, mock_ai_config: MagicMock) -> None:
        service = ConversationService(
            ai_config=mock_ai_config,
            assistant=AssistantSettings(_env_file=None, name="小助手", suggestions=["问题一"]),
            summary_display=SummaryDisplaySettings(_env_file=None),
        )

        config = service.get_dialog_config()

        assert config.assistant_name == "小助手"
        assert config.suggestions == ["问题一"]

    def test_dialog_config_should_fill_blank_values(self, mock_ai_config: MagicMock) -> None:
        service = ConversationService(
            ai_config=mock_ai_config,
            assistant=AssistantSettings(_env_file=None, name="", suggestions=[]),
            summary_display=SummaryDisplaySettings(_env_file=None),
        )

        config = service.get_dialog_config()

        assert config.assistant_name == default_dialog_config().assistant_name
        assert config.suggestions == default_dialog_config().suggestions

    def test_summary_box_theme_should_be_compact_json(self, conversation_service: ConversationService) -> None:
        config = conversation_service.get_summary_box_config()

        assert json.loads(config.theme) == DEFAULT_THEME
        assert ", " not in config.theme
        assert config.gpt_name == "智阅GPT"
