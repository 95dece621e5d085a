import datetime
import logging
from typing import Any

import pytest

from pitch_analytics.domain.errors import FeedFetchError
from pitch_analytics.domain.pitch_mix import PitcherWhiffs
from pitch_analytics.domain.result import Err, FeedResult, Ok
from pitch_analytics.services.daily_whiffs import DailyWhiffService

_FEED = {
    "home_pitchers": {
        "10": [
            {"description": "Swinging Strike"},
            {"description": "Swinging Strike (Blocked)"},
            {"description": "Foul"},
            {"call_name": "Swinging Strike"},
        ],
    },
    "away_pitchers": {
        "20": [{"description": "Ball"}, {"description": "Swinging Strike"}],
        "30": [],
    },
}


class FakeGameSource:
    def __init__(self, result: FeedResult[dict[str, Any]]) -> None:
        self._result = result

    @property
    def source_type(self) -> str:
        return "fake"

    def pitcher_day_csv(self, player_id: int, day: datetime.date) -> FeedResult[str]:
        return Ok("")

    def pitcher_season_csv(self, player_id: int, season: int) -> FeedResult[str]:
        return Ok("")

    def batter_season_csv(self, player_id: int, season: int) -> FeedResult[str]:
        return Ok("")

    def game_feed(self, game_pk: int) -> FeedResult[dict[str, Any]]:
        return self._result


class TestDailyWhiffService:
    def test_counts_whiffs_per_pitcher(self) -> None:
        whiffs = DailyWhiffService(FakeGameSource(Ok(_FEED))).game_whiffs(745001)
        assert whiffs == [
            PitcherWhiffs(pitcher_id=10, pitches=4, whiffs=3),
            PitcherWhiffs(pitcher_id=20, pitches=2, whiffs=1),
            PitcherWhiffs(pitcher_id=30, pitches=0, whiffs=0),
        ]

    def test_empty_feed(self) -> None:
        assert DailyWhiffService(FakeGameSource(Ok({}))).game_whiffs(1) == []

    def test_failed_feed(self) -> None:
        result = Err(FeedFetchError(message="404 Not Found", source="fake", detail="game 1"))
        assert DailyWhiffService(FakeGameSource(result)).game_whiffs(1) is None

    def test_failed_feed_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        result = Err(FeedFetchError(message="404 Not Found", source="fake", detail="game 9"))
        with caplog.at_level(logging.WARNING, logger="pitch_analytics.services.daily_whiffs"):
            DailyWhiffService(FakeGameSource(result)).game_whiffs(9)
        assert "Game feed unavailable for game 9: 404 Not Found" in caplog.text

    def test_pitch_carrying_its_own_pitcher_id(self) -> None:
        feed = {"home_pitchers": {"10": [{"description": "Swinging Strike", "pitcher": 10}]}}
        assert DailyWhiffService(FakeGameSource(Ok(feed))).game_whiffs(1) == [
            PitcherWhiffs(pitcher_id=10, pitches=1, whiffs=1)
        ]
