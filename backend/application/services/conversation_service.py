"""
Conversation service.

Multi-turn chat (blocking and streamed) plus the widget configuration the
assistant and summary box read on page load.

Dependencies: backend.core.ai, backend.configs.widgets
System role: Assistant chat use cases
"""

import json
import logging
from typing import AsyncIterator

from backend.application.services.ai_config_service import AiConfigService
from backend.configs.widgets import (
    DEFAULT_ASSISTANT_ICON,
    DEFAULT_SUGGESTIONS,
    AssistantSettings,
    SummaryDisplaySettings,
)
from backend.core.ai.config import AiFunction
from backend.core.ai.response_parsing import extract_content
from backend.core.exceptions import AiProviderError
from backend.models.conversation import ConversationResponse, DialogConfig
from backend.models.streaming import StreamEvent
from backend.models.summary import SummaryBoxConfig

logger = logging.getLogger(__name__)

DEFAULT_THEME = {
    "bg": "#f7f9fe",
    "main": "#4F8DFD",
    "contentFontSize": "16px",
    "title": "#3A5A8C",
    "content": "#222",
    "gptName": "#7B88A8",
    "contentBg": "#fff",
    "border": "#e3e8f7",
    "shadow": "0 2px 12px 0 rgba(60,80,180,0.08)",
    "tagBg": "#f0f4ff",
    "cursor": "#4F8DFD",
}


def default_dialog_config() -> DialogConfig:
    return DialogConfig(
        assistant_icon=DEFAULT_ASSISTANT_ICON,
        conversation_icon=DEFAULT_ASSISTANT_ICON,
        assistant_name="智阅GPT助手",
        input_placeholder="请输入您想了解的问题...",
        dialog_type="overlay",
        button_position="right",
        suggestions=list(DEFAULT_SUGGESTIONS),
    )


def default_summary_box_config() -> SummaryBoxConfig:
    return SummaryBoxConfig(
        logo="icon.svg",
        summary_title="文章摘要",
        gpt_name="智阅GPT",
        type_speed=20,
        dark_selector="",
        theme_name="custom",
        theme=json.dumps(DEFAULT_THEME, ensure_ascii=False, separators=(",", ":")),
        typewriter=True,
    )


class ConversationService:
    """Assistant conversation and widget configuration."""

    def __init__(
        self,
        ai_config: AiConfigService,
        assistant: AssistantSettings,
        summary_display: SummaryDisplaySettings,
    ) -> None:
        """
        Initialize conversation service.

        Args:
            ai_config: Provider resolver for the conversation function
            assistant: Assistant widget settings
            summary_display: Summary box settings
        """
        self.ai_config = ai_config
        self.assistant = assistant
        self.summary_display = summary_display

    async def chat(self, history: str) -> ConversationResponse:
        """
        Answer the last turn of a conversation.

        Args:
            history: Validated, non-blank history (JSON array or plain text)

        Returns:
            ConversationResponse: Reply text and provider type, or the failure
        """
        config = self.ai_config.get_config(AiFunction.CONVERSATION)
        provider = self.ai_config.get_provider(AiFunction.CONVERSATION)
        logger.info(
            "Multi-turn conversation request",
            extra={"ai_type": config.ai_type, "history_length": len(history)},
        )
        try:
            raw = await provider.multi_turn_chat(history, config.system_prompt, config)
        except AiProviderError as e:
            logger.error("Conversation failed", extra={"ai_type": config.ai_type, "error": str(e)})
            return ConversationResponse(success=False, message=e.message, ai_type=config.ai_type)

        reply = extract_content(raw) or ""
        logger.info("Conversation completed", extra={"ai_type": config.ai_type})
        return ConversationResponse(
            success=True, message="多轮对话成功", response=reply, ai_type=config.ai_type
        )

    async def stream_chat(self, history: str) -> AsyncIterator[StreamEvent]:
        """
        Stream a reply as token events, ending with complete or error.

        Args:
            history: Validated, non-blank history

        Yields:
            StreamEvent: token events, then one complete or error event
        """
        config = self.ai_config.get_config(AiFunction.CONVERSATION)
        provider = self.ai_config.get_provider(AiFunction.CONVERSATION)
        logger.info(
            "Streaming conversation started",
            extra={"ai_type": config.ai_type, "history_length": len(history)},
        )
        parts: list[str] = []
        try:
            async for chunk in provider.stream_chat(history, config.system_prompt, config):
                parts.append(chunk)
                yield StreamEvent.token(chunk)
        except AiProviderError as e:
            logger.error("Streaming conversation failed", extra={"ai_type": config.ai_type, "error": str(e)})
            yield StreamEvent.error(e.message)
            return
        yield StreamEvent.complete("".join(parts))

    def get_dialog_config(self) -> DialogConfig:
        """Assistant dialog settings, falling back to defaults on error."""
        try:
            a = self.assistant
            defaults = default_dialog_config()
            return DialogConfig(
                assistant_icon=a.icon or defaults.assistant_icon,
                conversation_icon=a.conversation_icon or defaults.conversation_icon,
                assistant_name=a.name or defaults.assistant_name,
                input_placeholder=a.input_placeholder or defaults.input_placeholder,
                dialog_type=a.dialog_type or defaults.dialog_type,
                button_position=a.button_position or defaults.button_position,
                suggestions=a.suggestions or defaults.suggestions,
            )
        except Exception as e:
            logger.error("Failed to build dialog config, using defaults", extra={"error": str(e)})
            return default_dialog_config()

    def get_summary_box_config(self) -> SummaryBoxConfig:
        """Summary box settings, falling back to defaults on error."""
        try:
            s = self.summary_display
            theme = {
                "bg": s.theme_bg,
                "main": s.theme_main,
                "contentFontSize": s.theme_content_font_size,
                "title": s.theme_title,
                "content": s.theme_content,
                "gptName": s.theme_gpt_name,
                "contentBg": s.theme_content_bg,
                "border": s.theme_border,
                "shadow": s.theme_shadow,
                "tagBg": s.theme_tag_bg,
                "cursor": s.theme_cursor,
            }
            return SummaryBoxConfig(
                logo=s.logo,
                summary_title=s.summary_title,
                gpt_name=s.gpt_name,
                type_speed=s.type_speed,
                dark_selector=s.dark_selector,
                theme_name=s.theme_name,
                theme=json.dumps(theme, ensure_ascii=False, separators=(",", ":")),
                typewriter=s.typewriter,
            )
        except Exception as e:
            logger.error("Failed to build summary config, using defaults", extra={"error": str(e)})
            return default_summary_box_config()
