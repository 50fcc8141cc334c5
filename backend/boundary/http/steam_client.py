"""
Steam Web API client.

Fetches a user's owned and recently played games, resolves vanity URLs,
and looks up localized store names.

Dependencies: httpx, backend.core.exceptions, backend.models.steam
System role: Steam data source for the game library widget
"""

import logging
from typing import Any

import httpx

from backend.core.exceptions import SteamApiError
from backend.models.steam import SteamGame

logger = logging.getLogger(__name__)

STEAM_API_BASE = "https://api.steampowered.com"
STEAM_STORE_BASE = "https://store.steampowered.com"
COVER_URL_TEMPLATE = "https://cdn.cloudflare.steamstatic.com/steam/apps/{app_id}/header.jpg"


def game_cover_url(app_id: str) -> str:
    """Header image URL for an app."""
    return COVER_URL_TEMPLATE.format(app_id=app_id)


def _parse_game(node: dict[str, Any]) -> SteamGame:
    return SteamGame(
        app_id=str(node.get("appid", "")),
        name=node.get("name") or "",
        img_icon_url=node.get("img_icon_url") or "",
        img_logo_url=node.get("img_logo_url") or "",
        has_community_visible_stats=bool(node.get("has_community_visible_stats", False)),
        playtime_forever=int(node.get("playtime_forever") or 0),
        playtime_2weeks=int(node.get("playtime_2weeks") or 0),
        rtime_last_played=int(node.get("rtime_last_played") or 0),
    )


class SteamApiClient:
    """Async client for the Steam endpoints the library widget needs."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_base: str = STEAM_API_BASE,
        store_base: str = STEAM_STORE_BASE,
    ) -> None:
        """
        Initialize Steam client.

        Args:
            client: Shared async HTTP client
            api_base: Steam Web API base URL
            store_base: Steam store base URL
        """
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._store_base = store_base.rstrip("/")

    async def _get_json(self, url: str, params: dict[str, Any], operation: str) -> dict[str, Any]:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Steam API returned error status",
                extra={"operation": operation, "status_code": e.response.status_code},
            )
            raise SteamApiError(
                f"Steam API {operation} failed with HTTP {e.response.status_code}",
                {"operation": operation, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error("Steam API request failed", extra={"operation": operation, "error_type": type(e).__name__})
            raise SteamApiError(
                f"Steam API {operation} failed: {type(e).__name__}", {"operation": operation}
            ) from e
        except ValueError as e:
            raise SteamApiError(f"Failed to parse Steam {operation} response", {"operation": operation}) from e

    async def get_owned_games(self, api_key: str, steam_id: str) -> list[SteamGame]:
        """
        Games in the user's library, including played free games.

        Raises:
            SteamApiError: On transport or parse failure
        """
        body = await self._get_json(
            f"{self._api_base}/IPlayerService/GetOwnedGames/v0001/",
            {
                "key": api_key,
                "steamid": steam_id,
                "format": "json",
                "include_appinfo": "true",
                "include_played_free_games": "true",
            },
            "GetOwnedGames",
        )
        games = (body.get("response") or {}).get("games") or []
        return [_parse_game(node) for node in games]

    async def get_recently_played_games(self, api_key: str, steam_id: str) -> list[SteamGame]:
        """
        Games played in the last two weeks, including family-shared titles.

        Raises:
            SteamApiError: On transport or parse failure
        """
        body = await self._get_json(
            f"{self._api_base}/IPlayerService/GetRecentlyPlayedGames/v0001/",
            {"key": api_key, "steamid": steam_id, "format": "json"},
            "GetRecentlyPlayedGames",
        )
        games = (body.get("response") or {}).get("games") or []
        logger.info("Fetched recently played games", extra={"count": len(games)})
        return [_parse_game(node) for node in games]

    async def resolve_vanity_url(self, api_key: str, vanity_name: str) -> str:
        """
        Resolve a profile vanity name to a 64-bit Steam ID.

        Raises:
            SteamApiError: When Steam cannot resolve the name
        """
        body = await self._get_json(
            f"{self._api_base}/ISteamUser/ResolveVanityURL/v0001/",
            {"key": api_key, "vanityurl": vanity_name},
            "ResolveVanityURL",
        )
        node = body.get("response") or {}
        if int(node.get("success") or 0) == 1:
            return str(node.get("steamid"))
        message = node.get("message") or "Unknown error"
        raise SteamApiError(f"Failed to resolve Steam ID: {message}", {"vanity_name": vanity_name})

    async def get_localized_name(self, app_id: str, language: str = "schinese") -> str | None:
        """
        Store name of an app in the given language.

        Failures are logged and reported as None so callers keep the
        original name.

        Args:
            app_id: Steam app ID
            language: Store language code

        Returns:
            str | None: Localized name, None when unavailable
        """
        try:
            body = await self._get_json(
                f"{self._store_base}/api/appdetails",
                {"appids": app_id, "l": language},
                "appdetails",
            )
        except SteamApiError as e:
            logger.warning("Localized name lookup failed", extra={"app_id": app_id, "error": e.message})
            return None
        node = body.get(app_id) or {}
        if not node.get("success"):
            return None
        name = (node.get("data") or {}).get("name")
        return name or None
