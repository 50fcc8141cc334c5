"""
AI suite routers: summaries, generation, polish, tags, conversation and
the posts they operate on.
"""

from .conversation_router import router as conversation_router
from .generate_router import router as generate_router
from .polish_router import router as polish_router
from .posts_router import router as posts_router
from .summaries_router import router as summaries_router
from .tags_router import router as tags_router

__all__ = [
    "conversation_router",
    "generate_router",
    "polish_router",
    "posts_router",
    "summaries_router",
    "tags_router",
]
