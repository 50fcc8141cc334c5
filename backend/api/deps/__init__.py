"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_ai_config_service,
    get_conversation_service,
    get_footprint_service,
    get_generate_service,
    get_polish_service,
    get_post_service,
    get_service_cache,
    get_steam_service,
    get_summary_service,
    get_summary_sync_runner,
    get_sync_tracker,
    get_tag_service,
)

__all__ = [
    "get_ai_config_service",
    "get_conversation_service",
    "get_footprint_service",
    "get_generate_service",
    "get_polish_service",
    "get_post_service",
    "get_service_cache",
    "get_steam_service",
    "get_summary_service",
    "get_summary_sync_runner",
    "get_sync_tracker",
    "get_tag_service",
]
