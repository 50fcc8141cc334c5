"""
Core business logic module.

Contains the LLM provider abstraction, prompt builders, response parsing
and the exception hierarchy. Nothing here touches the database or FastAPI.
"""

from backend.core.exceptions import (
    HaloPluginException,
    ConfigurationError,
    AiProviderError,
    ExternalServiceError,
    GeocodingError,
    SteamApiError,
)

__all__ = [
    "HaloPluginException",
    "ConfigurationError",
    "AiProviderError",
    "ExternalServiceError",
    "GeocodingError",
    "SteamApiError",
]
