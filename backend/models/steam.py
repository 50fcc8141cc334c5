"""
Steam library schemas.

Raw games as returned by the Steam Web API and the processed library
served to the widget.

Dependencies: pydantic
System role: Steam API contracts
"""

from pydantic import BaseModel, Field


class SteamGame(BaseModel):
    """Game entry from GetOwnedGames/GetRecentlyPlayedGames."""

    app_id: str
    name: str = ""
    img_icon_url: str = ""
    img_logo_url: str = ""
    has_community_visible_stats: bool = False
    playtime_forever: int = 0
    playtime_2weeks: int = 0
    rtime_last_played: int = 0


class GameView(BaseModel):
    """
    Game as displayed in the library.

    Attributes:
        app_id: Steam app ID
        name: Localized name when available
        cover_url: Header image URL
        total_time: Minutes played in total
        two_week_time: Minutes played in the last two weeks
        last_played: Local date (YYYY-MM-DD) or "从未游玩"
        total_percent: Share of total_time across the library
        two_week_percent: Share of two_week_time across the library
    """

    app_id: str
    name: str
    cover_url: str
    total_time: int
    two_week_time: int
    last_played: str
    total_percent: float = 0.0
    two_week_percent: float = 0.0


class LibraryStats(BaseModel):
    total_games: int
    total_time: int
    two_week_time: int


class GameLibrary(BaseModel):
    """Processed library stored in the cache and served by /steamview/games."""

    games: list[GameView] = Field(default_factory=list)
    stats: LibraryStats
    last_updated: str | None = Field(None, description="ISO-8601 fetch time")


class ConnectionTestResult(BaseModel):
    success: bool
    message: str
    game_count: int | None = None


class RefreshResult(BaseModel):
    success: bool
    message: str
    data: GameLibrary | None = None


class ResolveVanityResponse(BaseModel):
    vanity_name: str
    steam_id: str
