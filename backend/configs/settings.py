"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.ai import AiSettings
from backend.configs.base import BaseSettings
from backend.configs.database import DatabaseSettings
from backend.configs.footprint import FootprintSettings
from backend.configs.observability import ObservabilitySettings
from backend.configs.steam import SteamSettings
from backend.configs.widgets import AssistantSettings, SummaryDisplaySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    ai: AiSettings = Field(default_factory=AiSettings)
    summary_display: SummaryDisplaySettings = Field(default_factory=SummaryDisplaySettings)
    assistant: AssistantSettings = Field(default_factory=AssistantSettings)
    footprint: FootprintSettings = Field(default_factory=FootprintSettings)
    steam: SteamSettings = Field(default_factory=SteamSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
