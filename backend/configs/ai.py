"""
AI provider configuration settings.

Holds the global and per-function provider selection, per-provider
credentials, and the prompts and limits used by each AI feature.

Dependencies: pydantic, pydantic_settings
System role: LLM provider configuration for the AI suite
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class AiSettings(BaseSettings):
    """
    AI suite configuration.

    Provider type keys are `openAi`, `zhipuAi`, `dashScope`, `codesphere`
    and `siliconFlow`. An empty per-function type inherits `global_ai_type`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AI_",
        case_sensitive=False,
        extra="ignore",
    )

    global_ai_type: str = Field(default="openAi", description="Provider used when a function has none")
    request_timeout_seconds: float = Field(default=120.0, description="Timeout for LLM calls")

    # Per-function provider selection
    summary_ai_type: str | None = Field(default=None)
    tag_ai_type: str | None = Field(default=None)
    assistant_ai_type: str | None = Field(default=None)
    polish_ai_type: str | None = Field(default=None)
    generate_ai_type: str | None = Field(default=None)
    title_ai_type: str | None = Field(default=None)

    # Provider credentials
    openai_api_key: str | None = Field(default=None)
    openai_model_name: str = Field(default="gpt-4o-mini")
    openai_base_url: str | None = Field(default=None, description="Blank means api.openai.com")

    zhipu_api_key: str | None = Field(default=None)
    zhipu_model_name: str = Field(default="glm-4-flash")

    dashscope_api_key: str | None = Field(default=None)
    dashscope_model_name: str = Field(default="qwen-turbo")

    codesphere_api_key: str | None = Field(default=None)
    codesphere_model_name: str = Field(default="gpt-4o-mini")

    siliconflow_api_key: str | None = Field(default=None)
    siliconflow_model_name: str = Field(default="Qwen/Qwen2.5-7B-Instruct")
    siliconflow_base_url: str = Field(default="https://api.siliconflow.cn")

    # Prompts and limits
    summary_system_prompt: str | None = Field(default=None)
    tag_generation_prompt: str | None = Field(default=None)
    tag_generation_count: int = Field(default=6, ge=1)
    conversation_system_prompt: str | None = Field(default=None)
    polish_system_prompt: str | None = Field(default=None)
    polish_max_length: int = Field(default=2000, ge=1)
    generate_system_prompt: str | None = Field(default=None)
    title_system_prompt: str | None = Field(default=None)
    title_default_count: int = Field(default=5, ge=1)

    summary_sync_concurrency: int = Field(default=3, ge=1, description="Posts summarized in parallel by a full sync")
