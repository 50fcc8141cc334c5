"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    conversation_router,
    footprints_router,
    generate_router,
    health_router,
    polish_router,
    posts_router,
    steam_router,
    summaries_router,
    tags_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(footprints_router)
api_router.include_router(posts_router)
api_router.include_router(summaries_router)
api_router.include_router(generate_router)
api_router.include_router(polish_router)
api_router.include_router(tags_router)
api_router.include_router(conversation_router)
api_router.include_router(steam_router)

__all__ = ["api_router"]
