"""
Test suite for Steam library processing.

Covers cache expiry, the owned/recent merge, hidden games, playtime
shares and last-played formatting.

System role: Verification of pure Steam library helpers
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.application.services.steam_service import (
    NEVER_PLAYED,
    build_game_views,
    format_last_played,
    is_cache_fresh,
    merge_games,
    summarize_library,
)
from backend.models.steam import SteamGame

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestIsCacheFresh:
    """Test suite for is_cache_fresh()."""

    @pytest.mark.parametrize(
        "age,interval,expected",
        [
            (timedelta(minutes=59), 1, True),
            (timedelta(hours=1), 1, False),
            (timedelta(hours=23, minutes=59), 24, True),
            (timedelta(hours=24), 24, False),
            (timedelta(0), 0, False),
        ],
    )
    def test_should_compare_whole_elapsed_hours(self, age: timedelta, interval: int, expected: bool) -> None:
        assert is_cache_fresh(NOW - age, interval, now=NOW) is expected

    def test_should_treat_naive_timestamp_as_utc(self) -> None:
        naive = (NOW - timedelta(minutes=30)).replace(tzinfo=None)
        assert is_cache_fresh(naive, 1, now=NOW) is True


class TestMergeGames:
    """Test suite for merge_games()."""

    def test_owned_entry_should_win_and_keep_order(self) -> None:
        # Arrange
        owned = [
            SteamGame(app_id="1", name="A", playtime_forever=10),
            SteamGame(app_id="2", name="B", playtime_forever=20),
        ]
        recent = [
            SteamGame(app_id="2", name="B-recent", playtime_forever=99),
            SteamGame(app_id="3", name="C", playtime_forever=5),
        ]

        # Act
        merged = merge_games(owned, recent)

        # Assert
        assert [g.app_id for g in merged] == ["1", "2", "3"]
        assert merged[1].name == "B"
        assert merged[1].playtime_forever == 20


class TestLibrarySummary:
    """Test suite for build_game_views() and summarize_library()."""

    def test_should_exclude_hidden_and_compute_shares(self) -> None:
        # Arrange
        games = [
            SteamGame(app_id="1", name="A", playtime_forever=300, playtime_2weeks=60),
            SteamGame(app_id="2", name="B", playtime_forever=100, playtime_2weeks=0),
            SteamGame(app_id="3", name="Hidden", playtime_forever=1000),
        ]

        # Act
        library = summarize_library(build_game_views(games, hidden_games=["3"]))

        # Assert
        assert [g.app_id for g in library.games] == ["1", "2"]
        assert library.stats.total_games == 2
        assert library.stats.total_time == 400
        assert library.stats.two_week_time == 60
        assert library.games[0].total_percent == pytest.approx(75.0)
        assert library.games[1].total_percent == pytest.approx(25.0)
        assert library.games[0].two_week_percent == pytest.approx(100.0)
        assert library.games[0].cover_url.endswith("/1/header.jpg")

    def test_should_report_zero_shares_without_playtime(self) -> None:
        games = [SteamGame(app_id="1", name="A"), SteamGame(app_id="2", name="B")]

        library = summarize_library(build_game_views(games, hidden_games=[]))

        assert all(g.total_percent == 0.0 and g.two_week_percent == 0.0 for g in library.games)
        assert library.stats.total_time == 0

    def test_empty_library(self) -> None:
        library = summarize_library([])
        assert library.games == []
        assert library.stats.total_games == 0


class TestFormatLastPlayed:
    """Test suite for format_last_played()."""

    def test_should_mark_never_played(self) -> None:
        assert format_last_played(0) == NEVER_PLAYED

    def test_should_format_local_date(self) -> None:
        ts = 1717243200
        expected = datetime.fromtimestamp(ts, tz=timezone.utc).astimezone().date().isoformat()
        assert format_last_played(ts) == expected
