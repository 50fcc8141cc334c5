"""
Steam game library endpoints.

Routes:
- GET /steamview/games - Game library, served from cache while fresh
- GET /steamview/test - Check the configured key and Steam ID
- POST /steamview/refresh - Refetch the library, bypassing the cache
- DELETE /steamview/cache - Drop the cached library
- GET /steamview/resolve/{vanity_name} - Resolve a custom profile name to a Steam ID

Dependencies: backend.application.services, backend.models
System role: Steam HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.application.services.steam_service import SteamService
from backend.api.deps.dependencies import get_steam_service
from backend.models.common import OperationResult
from backend.models.steam import (
    ConnectionTestResult,
    GameLibrary,
    RefreshResult,
    ResolveVanityResponse,
)

from .steam_error_handling import handle_steam_errors
from .steam_validators import validate_vanity_name
from .steam_responses import map_cache_cleared_to_response, map_vanity_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/steamview", tags=["steam"])


@router.get("/games", response_model=GameLibrary)
@handle_steam_errors
async def get_games(
    steam_service: SteamService = Depends(get_steam_service),
) -> GameLibrary:
    """
    Get the game library with per-game playtime shares.

    Served from the cache while it is younger than the refresh interval,
    otherwise fetched from Steam and cached.

    Raises:
        HTTPException: 400 if Steam is not configured, 502 if Steam fails
    """
    return await steam_service.get_library()


@router.get("/test", response_model=ConnectionTestResult)
@handle_steam_errors
async def test_connection(
    steam_service: SteamService = Depends(get_steam_service),
) -> ConnectionTestResult:
    return await steam_service.test_connection()


@router.post("/refresh", response_model=RefreshResult)
@handle_steam_errors
async def refresh(
    steam_service: SteamService = Depends(get_steam_service),
) -> RefreshResult:
    logger.info("Steam library refresh requested")
    return await steam_service.refresh()


@router.delete("/cache", response_model=OperationResult)
@handle_steam_errors
async def clear_cache(
    steam_service: SteamService = Depends(get_steam_service),
) -> OperationResult:
    deleted = await steam_service.clear_cache()
    return map_cache_cleared_to_response(deleted)


@router.get("/resolve/{vanity_name}", response_model=ResolveVanityResponse)
@handle_steam_errors
async def resolve_vanity(
    vanity_name: str,
    steam_service: SteamService = Depends(get_steam_service),
) -> ResolveVanityResponse:
    """
    Resolve a custom profile URL name to a 64-bit Steam ID.

    Args:
        vanity_name: Name from steamcommunity.com/id/<name>
        steam_service: Injected SteamService

    Returns:
        ResolveVanityResponse: Name and resolved ID
    """
    vanity_name = validate_vanity_name(vanity_name)
    steam_id = await steam_service.resolve_vanity_url(vanity_name)
    return map_vanity_to_response(vanity_name, steam_id)
