"""
Provider configuration schemas.

Dependencies: pydantic
System role: Resolved per-call LLM configuration passed to providers
"""

from enum import Enum

from pydantic import BaseModel, Field


class AiFunction(str, Enum):
    """AI features whose provider can be configured independently."""

    SUMMARY = "summary"
    TAGS = "tags"
    CONVERSATION = "conversation"
    POLISH = "polish"
    GENERATE = "generate"
    TITLE = "title"


class ProviderConfig(BaseModel):
    """
    Fully resolved configuration for one provider call.

    Attributes:
        ai_type: Provider type key as configured (openAi, zhipuAi, dashScope,
            codesphere, siliconFlow)
        api_key: Vendor API key
        model_name: Vendor model identifier
        base_url: Base URL for OpenAI-compatible vendors
        system_prompt: Function-specific system prompt, if configured
        timeout_seconds: Request timeout
    """

    ai_type: str = "openAi"
    api_key: str | None = None
    model_name: str | None = None
    base_url: str | None = None
    system_prompt: str | None = None
    timeout_seconds: float = Field(default=120.0, gt=0)
