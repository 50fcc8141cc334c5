"""
Steam library service.

Builds the game library from the Steam Web API, caches it in the database
and serves it until the cache is older than the refresh interval.

Dependencies: backend.boundary.http.steam_client, backend.boundary.db.CRUD
System role: Steam game library use cases
"""

import asyncio
import logging
import math
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import ensure_utc, utc_now
from backend.boundary.db.CRUD.game_cache_crud import game_cache_crud
from backend.boundary.http.steam_client import SteamApiClient, game_cover_url
from backend.configs.steam import DEFAULT_REFRESH_INTERVAL_HOURS, SteamSettings
from backend.core.exceptions import ConfigurationError, SteamApiError
from backend.models.steam import (
    ConnectionTestResult,
    GameLibrary,
    GameView,
    LibraryStats,
    RefreshResult,
    SteamGame,
)

logger = logging.getLogger(__name__)

GAMES_CACHE_KEY = "gamesData"
NEVER_PLAYED = "从未游玩"


def is_cache_fresh(last_updated: datetime, refresh_interval: int, now: datetime | None = None) -> bool:
    """
    Whether a cache entry is still usable.

    Fresh iff the whole hours elapsed since last_updated are fewer than
    refresh_interval.

    Args:
        last_updated: Fetch time (naive values are treated as UTC)
        refresh_interval: Lifetime in hours
        now: Current time, defaults to utc_now()

    Returns:
        bool: True when the cache can be served
    """
    now = now or utc_now()
    elapsed_hours = math.floor((now - ensure_utc(last_updated)).total_seconds() / 3600)
    return elapsed_hours < refresh_interval


def merge_games(owned: list[SteamGame], recent: list[SteamGame]) -> list[SteamGame]:
    """Owned games first; recently played games only add app IDs not owned."""
    merged: dict[str, SteamGame] = {}
    for game in owned:
        merged[game.app_id] = game
    for game in recent:
        merged.setdefault(game.app_id, game)
    return list(merged.values())


def format_last_played(rtime_last_played: int) -> str:
    """Local date of the last session, or the never-played marker."""
    if rtime_last_played <= 0:
        return NEVER_PLAYED
    return datetime.fromtimestamp(rtime_last_played, tz=timezone.utc).astimezone().date().isoformat()


def build_game_views(games: list[SteamGame], hidden_games: list[str]) -> list[GameView]:
    """Display entries for games that are not hidden, percentages not yet applied."""
    hidden = set(hidden_games)
    return [
        GameView(
            app_id=game.app_id,
            name=game.name,
            cover_url=game_cover_url(game.app_id),
            total_time=game.playtime_forever,
            two_week_time=game.playtime_2weeks,
            last_played=format_last_played(game.rtime_last_played),
        )
        for game in games
        if game.app_id not in hidden
    ]


def summarize_library(views: list[GameView]) -> GameLibrary:
    """
    Fill in playtime shares and library totals.

    Args:
        views: Display entries

    Returns:
        GameLibrary: Games with percentages and stats (last_updated unset)
    """
    total_time = sum(v.total_time for v in views)
    two_week_time = sum(v.two_week_time for v in views)
    for view in views:
        view.total_percent = view.total_time * 100.0 / total_time if total_time > 0 else 0.0
        view.two_week_percent = view.two_week_time * 100.0 / two_week_time if two_week_time > 0 else 0.0
    return GameLibrary(
        games=views,
        stats=LibraryStats(total_games=len(views), total_time=total_time, two_week_time=two_week_time),
    )


class SteamService:
    """Steam library use cases."""

    def __init__(self, db: AsyncSession, client: SteamApiClient, settings: SteamSettings) -> None:
        """
        Initialize Steam service.

        Args:
            db: Async SQLAlchemy session (cache storage)
            client: Steam Web API client
            settings: Steam settings
        """
        self.db = db
        self.client = client
        self.settings = settings

    def _credentials(self) -> tuple[str, str]:
        api_key = (self.settings.api_key or "").strip()
        if not api_key:
            raise ConfigurationError("Steam API Key 未配置", setting="STEAM_API_KEY")
        steam_id = (self.settings.steam_id or "").strip()
        if not steam_id:
            raise ConfigurationError("Steam ID 未配置", setting="STEAM_STEAM_ID")
        return api_key, steam_id

    def _refresh_interval(self) -> int:
        interval = self.settings.refresh_interval
        if interval is None or interval < 0:
            return DEFAULT_REFRESH_INTERVAL_HOURS
        return interval

    async def _localize_names(self, views: list[GameView]) -> None:
        semaphore = asyncio.Semaphore(self.settings.localized_name_concurrency)

        async def localize(view: GameView) -> None:
            async with semaphore:
                name = await self.client.get_localized_name(view.app_id)
            if name:
                view.name = name

        await asyncio.gather(*(localize(view) for view in views))

    async def fetch_library(self) -> GameLibrary:
        """
        Fetch, process and cache the library from Steam.

        Returns:
            GameLibrary: Fresh library with last_updated set

        Raises:
            ConfigurationError: If the API key or Steam ID is missing
            SteamApiError: If a Steam call fails
        """
        api_key, steam_id = self._credentials()
        owned, recent = await asyncio.gather(
            self.client.get_owned_games(api_key, steam_id),
            self.client.get_recently_played_games(api_key, steam_id),
        )
        games = merge_games(owned, recent)
        logger.info(
            "Merged Steam games",
            extra={"owned": len(owned), "recent": len(recent), "merged": len(games)},
        )

        views = build_game_views(games, self.settings.hidden_games)
        await self._localize_names(views)
        library = summarize_library(views)

        fetched_at = utc_now()
        library.last_updated = fetched_at.isoformat()
        await game_cache_crud.upsert(
            self.db,
            cache_key=GAMES_CACHE_KEY,
            payload=library.model_dump(mode="json"),
            last_updated=fetched_at,
        )
        return library

    async def get_cached_library(self) -> GameLibrary | None:
        """Cached library if younger than the refresh interval, else None."""
        entry = await game_cache_crud.get_by_key(self.db, GAMES_CACHE_KEY)
        if entry is None:
            return None
        if not is_cache_fresh(entry.last_updated, self._refresh_interval()):
            logger.info("Steam cache expired", extra={"last_updated": str(entry.last_updated)})
            return None
        try:
            return GameLibrary.model_validate(entry.payload)
        except PydanticValidationError as e:
            logger.warning("Discarding unreadable Steam cache", extra={"error": str(e)})
            return None

    async def get_library(self) -> GameLibrary:
        """
        Library from cache when fresh, otherwise from Steam.

        Raises:
            ConfigurationError: If a refetch is needed and credentials are missing
            SteamApiError: If a refetch fails
        """
        cached = await self.get_cached_library()
        if cached is not None:
            logger.info("Serving Steam library from cache")
            return cached
        logger.info("Fetching Steam library from API")
        return await self.fetch_library()

    async def refresh(self) -> RefreshResult:
        """Force a refetch, reporting failure instead of raising."""
        try:
            library = await self.fetch_library()
        except (ConfigurationError, SteamApiError) as e:
            logger.error("Steam refresh failed", extra={"error": str(e)})
            return RefreshResult(success=False, message=f"刷新失败: {e.message}")
        return RefreshResult(success=True, message="刷新成功", data=library)

    async def test_connection(self) -> ConnectionTestResult:
        """Check the configured credentials by listing owned games."""
        try:
            api_key, steam_id = self._credentials()
        except ConfigurationError as e:
            return ConnectionTestResult(success=False, message=e.message)
        try:
            games = await self.client.get_owned_games(api_key, steam_id)
        except SteamApiError as e:
            return ConnectionTestResult(success=False, message=f"连接失败: {e.message}")
        return ConnectionTestResult(
            success=True, message=f"连接成功！找到 {len(games)} 个游戏", game_count=len(games)
        )

    async def clear_cache(self) -> bool:
        """Drop the cached library; False when nothing was cached."""
        deleted = await game_cache_crud.delete_by_key(self.db, GAMES_CACHE_KEY)
        logger.info("Steam cache cleared", extra={"deleted": deleted})
        return deleted

    async def resolve_vanity_url(self, vanity_name: str) -> str:
        """
        Resolve a vanity profile name to a Steam ID.

        Raises:
            ConfigurationError: If the API key is missing
            SteamApiError: If Steam cannot resolve the name
        """
        api_key = (self.settings.api_key or "").strip()
        if not api_key:
            raise ConfigurationError("Steam API Key 未配置", setting="STEAM_API_KEY")
        return await self.client.resolve_vanity_url(api_key, vanity_name)
