import datetime
import logging
from typing import Any

import pytest

from pitch_analytics.domain.errors import FeedFetchError
from pitch_analytics.domain.pitch import FeedSource, PitchBatch, RawPitchRecord
from pitch_analytics.domain.result import Err, FeedResult, Ok
from pitch_analytics.services.batter_decisions import BatterDecisionService, build_decision_report


def _season_csv(rows: int) -> str:
    lines = ["pitch_type,description,zone,balls,strikes,estimated_woba_using_speedangle,batter"]
    for i in range(rows):
        zone = i % 9 + 1
        description = "hit_into_play" if i % 3 == 0 else "called_strike"
        value = "0.400" if description == "hit_into_play" else ""
        lines.append(f"FF,{description},{zone},0,0,{value},592450")
    return "\n".join(lines) + "\n"


class FakeBatterSource:
    def __init__(self, result: FeedResult[str]) -> None:
        self._result = result
        self.requested: list[tuple[int, int]] = []

    @property
    def source_type(self) -> str:
        return "fake"

    def pitcher_day_csv(self, player_id: int, day: datetime.date) -> FeedResult[str]:
        return Ok("")

    def pitcher_season_csv(self, player_id: int, season: int) -> FeedResult[str]:
        return Ok("")

    def batter_season_csv(self, player_id: int, season: int) -> FeedResult[str]:
        self.requested.append((player_id, season))
        return self._result

    def game_feed(self, game_pk: int) -> FeedResult[dict[str, Any]]:
        return Ok({})


class TestBuildDecisionReport:
    def test_small_sample_has_no_scores(self) -> None:
        batch = PitchBatch(source=FeedSource.BATCH_CSV, records=(RawPitchRecord(zone=5, description="foul"),))
        report = build_decision_report(592450, 2024, batch)

        assert report.batter_id == 592450
        assert report.season == 2024
        assert report.pitch_count == 1
        assert report.trout_plus.score is None
        assert report.trout_plus.sample_size == 1
        assert report.zone_decision_plus.score is None
        assert report.xwoba is None
        assert len(report.zones) == 9


class TestBatterDecisionService:
    def test_season_report(self) -> None:
        source = FakeBatterSource(Ok(_season_csv(90)))
        report = BatterDecisionService(source).season_report(592450, 2024)

        assert report is not None
        assert source.requested == [(592450, 2024)]
        assert report.pitch_count == 90
        assert report.trout_plus.is_qualified
        assert report.zone_decision_plus.is_qualified
        assert report.zone_decision_plus.sample_size == 90
        assert report.xwoba == pytest.approx(0.4)
        assert sum(z.pitches for z in report.zones) == 90

    def test_failed_feed(self, caplog: pytest.LogCaptureFixture) -> None:
        source = FakeBatterSource(Err(FeedFetchError(message="timed out", source="fake", detail="batter 1")))
        with caplog.at_level(logging.WARNING, logger="pitch_analytics.services.batter_decisions"):
            assert BatterDecisionService(source).season_report(1, 2024) is None
        assert "timed out" in caplog.text
