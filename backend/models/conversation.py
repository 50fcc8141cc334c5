"""
Conversation schemas.

Request/response models for multi-turn chat and the assistant dialog
config.

Dependencies: pydantic
System role: Conversation API contracts
"""

import time

from pydantic import BaseModel, Field


class ConversationRequest(BaseModel):
    """
    Multi-turn chat request.

    Attributes:
        conversation_history: JSON array of {role, content} messages, or plain
            text treated as a single user message
    """

    conversation_history: str | None = None


class ConversationResponse(BaseModel):
    """Multi-turn chat outcome."""

    success: bool
    message: str
    response: str = ""
    ai_type: str = ""
    timestamp: int = Field(default_factory=lambda: int(time.time() * 1000))


class DialogConfig(BaseModel):
    """Assistant dialog widget settings."""

    assistant_icon: str
    conversation_icon: str
    assistant_name: str
    input_placeholder: str
    dialog_type: str
    button_position: str
    suggestions: list[str]
