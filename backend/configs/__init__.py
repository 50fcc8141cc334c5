"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.ai import AiSettings
from backend.configs.settings import Settings, get_settings

__all__ = ["AiSettings", "Settings", "get_settings"]
