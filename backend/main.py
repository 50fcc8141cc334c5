"""
Halo plugin suite service entry point.

Builds the FastAPI app that serves the footprint map, the AI writing
assistant and the Steam game library under /api/v1.

Dependencies: fastapi, backend.api, backend.observability, backend.configs
System role: Application initialization and configuration

Usage:
    uvicorn backend.main:app --port 8082
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api import api_router
from backend.api.deps.dependencies import get_service_cache
from backend.boundary.db import dispose_engine
from backend.boundary.db.create_tables import create_all_tables
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: logging, then tables when DatabaseSettings.create_tables is on.
    Shutdown: close the shared outbound HTTP client, then the engine pool.
    """
    settings = get_settings()
    configure_logging(settings.observability.level)
    logger.info(
        "Starting Halo plugin suite",
        extra={"environment": settings.environment, "global_ai_type": settings.ai.global_ai_type},
    )

    if settings.database.create_tables:
        try:
            await create_all_tables()
        except Exception as e:
            logger.exception("Failed to create database tables", extra={"error": str(e)})
            raise

    yield

    await get_service_cache().aclose()
    await dispose_engine()
    logger.info("Halo plugin suite stopped")


def create_app() -> FastAPI:
    """
    Create the FastAPI application.

    The widgets call the API from the blog's origin, so CORS is open and
    credential-less.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Halo Plugin Suite API",
        description="Footprint map, AI writing assistant and Steam game library",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added last runs first: correlation ID is bound before request logging
    if settings.observability.request_logging:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )

    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="localhost", port=8082, reload=True)
