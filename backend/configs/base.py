"""
Shared settings for the service as a whole.

Concern-specific groups (database, AI, footprint, Steam, widgets) are
separate BaseSettings classes with their own env prefix; the fields here
have no prefix and apply across the app.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """
    Unprefixed application settings read from the environment or `.env`.

    Attributes:
        environment: Deployment name, logged at startup
        debug: FastAPI debug mode (tracebacks in 500 responses)
        http_timeout_seconds: Read timeout of the shared client used for
            Amap and Steam. LLM calls use AiSettings.request_timeout_seconds.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    http_timeout_seconds: float = Field(default=30.0, gt=0)
