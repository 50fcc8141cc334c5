"""
Test suite for SteamApiClient.

System role: Verification of Steam Web API parsing and failures
"""

import httpx
import pytest

from backend.boundary.http.steam_client import SteamApiClient
from backend.core.exceptions import SteamApiError


class TestOwnedGames:
    """Test suite for SteamApiClient.get_owned_games()."""

    @pytest.mark.asyncio
    async def test_should_parse_games(self, make_http_client) -> None:
        # Arrange
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200,
                json={
                    "response": {
                        "game_count": 1,
                        "games": [
                            {
                                "appid": 730,
                                "name": "Counter-Strike 2",
                                "playtime_forever": 1200,
                                "playtime_2weeks": 30,
                                "rtime_last_played": 1717243200,
                            }
                        ],
                    }
                },
            )

        client = SteamApiClient(make_http_client(handler))

        # Act
        games = await client.get_owned_games("key", "7656119")

        # Assert
        assert len(games) == 1
        assert games[0].app_id == "730"
        assert games[0].playtime_forever == 1200
        assert captured[0].url.path == "/IPlayerService/GetOwnedGames/v0001/"
        assert captured[0].url.params["include_appinfo"] == "true"

    @pytest.mark.asyncio
    async def test_empty_response_should_yield_no_games(self, make_http_client) -> None:
        client = SteamApiClient(make_http_client(lambda r: httpx.Response(200, json={"response": {}})))
        assert await client.get_owned_games("key", "id") == []

    @pytest.mark.asyncio
    async def test_error_status_should_raise(self, make_http_client) -> None:
        client = SteamApiClient(make_http_client(lambda r: httpx.Response(403, text="Forbidden")))

        with pytest.raises(SteamApiError) as exc_info:
            await client.get_owned_games("key", "id")

        assert exc_info.value.details["status_code"] == 403

    @pytest.mark.asyncio
    async def test_transport_error_should_not_echo_api_key(self, make_http_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

        client = SteamApiClient(make_http_client(handler))

        with pytest.raises(SteamApiError) as exc_info:
            await client.get_owned_games("SECRET-STEAM-KEY", "id")

        assert "SECRET-STEAM-KEY" not in str(exc_info.value)


class TestResolveVanityUrl:
    """Test suite for SteamApiClient.resolve_vanity_url()."""

    @pytest.mark.asyncio
    async def test_should_return_steam_id(self, make_http_client) -> None:
        client = SteamApiClient(
            make_http_client(lambda r: httpx.Response(200, json={"response": {"success": 1, "steamid": "7656119"}}))
        )
        assert await client.resolve_vanity_url("key", "gaben") == "7656119"

    @pytest.mark.asyncio
    async def test_should_raise_with_steam_message(self, make_http_client) -> None:
        client = SteamApiClient(
            make_http_client(lambda r: httpx.Response(200, json={"response": {"success": 42, "message": "No match"}}))
        )

        with pytest.raises(SteamApiError) as exc_info:
            await client.resolve_vanity_url("key", "nobody")

        assert exc_info.value.message == "Failed to resolve Steam ID: No match"


class TestLocalizedName:
    """Test suite for SteamApiClient.get_localized_name()."""

    @pytest.mark.asyncio
    async def test_should_return_store_name(self, make_http_client) -> None:
        client = SteamApiClient(
            make_http_client(
                lambda r: httpx.Response(200, json={"730": {"success": True, "data": {"name": "反恐精英2"}}})
            )
        )
        assert await client.get_localized_name("730") == "反恐精英2"

    @pytest.mark.asyncio
    async def test_should_return_none_on_failure(self, make_http_client) -> None:
        client = SteamApiClient(make_http_client(lambda r: httpx.Response(500)))
        assert await client.get_localized_name("730") is None

    @pytest.mark.asyncio
    async def test_should_return_none_when_unsuccessful(self, make_http_client) -> None:
        client = SteamApiClient(make_http_client(lambda r: httpx.Response(200, json={"730": {"success": False}})))
        assert await client.get_localized_name("730") is None
