"""
Steam configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Steam Web API credentials and cache policy
"""

import json
import logging
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import NoDecode, SettingsConfigDict

from backend.configs.base import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL_HOURS = 24


class SteamSettings(BaseSettings):
    """Steam game library configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STEAM_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Steam Web API key")
    steam_id: str | None = Field(default=None, description="64-bit Steam ID")
    refresh_interval: int = Field(
        default=DEFAULT_REFRESH_INTERVAL_HOURS,
        description="Cache lifetime in hours",
    )
    hidden_games: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="App IDs excluded from the library (JSON array string in env)",
    )
    localized_name_concurrency: int = Field(default=10, ge=1)

    @field_validator("refresh_interval", mode="before")
    @classmethod
    def _parse_refresh_interval(cls, value):
        if value is None or value == "":
            return DEFAULT_REFRESH_INTERVAL_HOURS
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.error("Invalid Steam refresh interval, using default", extra={"value": value})
            return DEFAULT_REFRESH_INTERVAL_HOURS

    @field_validator("hidden_games", mode="before")
    @classmethod
    def _parse_hidden_games(cls, value):
        if value is None or value == "":
            return []
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError:
                logger.error("Invalid hidden games list, ignoring", extra={"value": value})
                return []
            if not isinstance(parsed, list):
                return []
            return [str(item) for item in parsed]
        return [str(item) for item in value]
