"""
Streaming event schemas for server-sent conversation output.

Defines event types and payloads relayed to the browser while a provider
streams its reply.

Dependencies: pydantic
System role: Streaming protocol schemas
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


class StreamEventType(str, Enum):
    """Server-to-client event types for streaming conversation."""

    TOKEN = "token"
    COMPLETE = "complete"
    ERROR = "error"


class StreamEvent(BaseModel):
    """
    Base streaming event model.

    Attributes:
        event: Event type identifier
        data: Event-specific payload
    """

    event: StreamEventType
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"event": self.event.value, "data": self.data}

    def to_sse(self) -> str:
        """Encode as one SSE frame (`data: <json>` plus a blank line)."""
        return f"data: {json.dumps(self.to_dict(), ensure_ascii=False)}\n\n"

    @classmethod
    def token(cls, text: str) -> "StreamEvent":
        return cls(event=StreamEventType.TOKEN, data={"token": text})

    @classmethod
    def complete(cls, full_answer: str) -> "StreamEvent":
        return cls(event=StreamEventType.COMPLETE, data={"full_answer": full_answer})

    @classmethod
    def error(cls, message: str) -> "StreamEvent":
        return cls(event=StreamEventType.ERROR, data={"message": message})
