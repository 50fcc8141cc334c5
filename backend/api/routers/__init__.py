"""API routers."""

from .ai import (
    conversation_router,
    generate_router,
    polish_router,
    posts_router,
    summaries_router,
    tags_router,
)
from .footprints import router as footprints_router
from .health import router as health_router
from .steam import router as steam_router

__all__ = [
    "conversation_router",
    "footprints_router",
    "generate_router",
    "health_router",
    "polish_router",
    "posts_router",
    "steam_router",
    "summaries_router",
    "tags_router",
]
