"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.configs import get_settings
from backend.boundary.db import get_async_db, get_async_session_factory
from backend.boundary.http.amap_client import AmapGeocodingClient
from backend.boundary.http.steam_client import SteamApiClient
from backend.application.services import (
    AiConfigService,
    ConversationService,
    FootprintService,
    GenerateService,
    PolishService,
    PostService,
    SteamService,
    SummaryService,
    SummarySyncRunner,
    TagService,
)
from backend.core.ai.factory import AiProviderFactory
from backend.core.sync_tracker import SyncProgressTracker

CONNECT_TIMEOUT_SECONDS = 10.0


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._http_client = None
        self._provider_factory = None
        self._ai_config = None
        self._amap_client = None
        self._steam_client = None
        self._sync_tracker = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get shared outbound HTTP client."""
        if self._http_client is None or self._http_client.is_closed:
            settings = get_settings()
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(settings.http_timeout_seconds, connect=CONNECT_TIMEOUT_SECONDS),
                follow_redirects=True,
            )
        return self._http_client

    @property
    def provider_factory(self) -> AiProviderFactory:
        """Get cached LLM provider registry."""
        if self._provider_factory is None:
            self._provider_factory = AiProviderFactory.with_default_providers(self.http_client)
        return self._provider_factory

    @property
    def ai_config(self) -> AiConfigService:
        """Get cached per-function AI config resolver."""
        if self._ai_config is None:
            self._ai_config = AiConfigService(get_settings().ai, self.provider_factory)
        return self._ai_config

    @property
    def amap_client(self) -> AmapGeocodingClient:
        """Get cached Amap geocoding client."""
        if self._amap_client is None:
            self._amap_client = AmapGeocodingClient(
                self.http_client, geocode_url=get_settings().footprint.geocode_url
            )
        return self._amap_client

    @property
    def steam_client(self) -> SteamApiClient:
        """Get cached Steam Web API client."""
        if self._steam_client is None:
            self._steam_client = SteamApiClient(self.http_client)
        return self._steam_client

    @property
    def sync_tracker(self) -> SyncProgressTracker:
        """Get process-wide summary sync progress."""
        if self._sync_tracker is None:
            self._sync_tracker = SyncProgressTracker()
        return self._sync_tracker

    async def aclose(self) -> None:
        """Close the shared HTTP client and drop cached instances."""
        if self._http_client is not None:
            await self._http_client.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._http_client = None
        self._provider_factory = None
        self._ai_config = None
        self._amap_client = None
        self._steam_client = None
        self._sync_tracker = None


# Global service cache
_service_cache = ServiceCache()

def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_ai_config_service() -> AiConfigService:
    """Get per-function AI config resolver."""
    return get_service_cache().ai_config


def get_footprint_service(db: AsyncSession = Depends(get_async_db)) -> FootprintService:
    """
    Get footprint service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        FootprintService: Footprint service with the shared Amap client
    """
    cache = get_service_cache()
    return FootprintService(
        db=db,
        geocoder=cache.amap_client,
        settings=get_settings().footprint,
    )


def get_post_service(db: AsyncSession = Depends(get_async_db)) -> PostService:
    """
    Get post service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PostService: Post service instance
    """
    return PostService(db=db)


def get_summary_service(db: AsyncSession = Depends(get_async_db)) -> SummaryService:
    """
    Get summary service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SummaryService: Summary service instance
    """
    return SummaryService(db=db, ai_config=get_service_cache().ai_config)


def get_summary_sync_runner() -> SummarySyncRunner:
    """
    Get background summary sync runner.

    The runner opens its own sessions, one per post, so it outlives the
    request that triggered it.

    Returns:
        SummarySyncRunner: Runner bound to the shared progress tracker
    """
    cache = get_service_cache()
    return SummarySyncRunner(
        session_factory=get_async_session_factory(),
        ai_config=cache.ai_config,
        tracker=cache.sync_tracker,
        concurrency=get_settings().ai.summary_sync_concurrency,
    )


def get_sync_tracker() -> SyncProgressTracker:
    """Get summary sync progress tracker."""
    return get_service_cache().sync_tracker


def get_generate_service() -> GenerateService:
    """Get article/title generation service."""
    return GenerateService(ai_config=get_service_cache().ai_config)


def get_polish_service() -> PolishService:
    """Get polish service."""
    return PolishService(ai_config=get_service_cache().ai_config)


def get_tag_service(db: AsyncSession = Depends(get_async_db)) -> TagService:
    """
    Get tag service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        TagService: Tag service instance
    """
    return TagService(db=db, ai_config=get_service_cache().ai_config)


def get_conversation_service() -> ConversationService:
    """Get conversation service with widget settings."""
    settings = get_settings()
    return ConversationService(
        ai_config=get_service_cache().ai_config,
        assistant=settings.assistant,
        summary_display=settings.summary_display,
    )


def get_steam_service(db: AsyncSession = Depends(get_async_db)) -> SteamService:
    """
    Get Steam library service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SteamService: Steam service with the shared Steam client
    """
    return SteamService(
        db=db,
        client=get_service_cache().steam_client,
        settings=get_settings().steam,
    )
