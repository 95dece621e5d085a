import logging

from pitch_analytics.domain.decision import BatterDecisionReport
from pitch_analytics.domain.pitch import PitchBatch
from pitch_analytics.domain.result import value_or_warn
from pitch_analytics.ingest.batches import batch_from_savant_csv
from pitch_analytics.ingest.protocols import PitchFeedSource
from pitch_analytics.scoring.zone_decision import score_zone_decisions, zone_contact_profile
from pitch_analytics.scoring.swing_decision import score_swing_decisions
from pitch_analytics.scoring.zones import overall_batted_ball_value

logger = logging.getLogger(__name__)


def build_decision_report(batter_id: int, season: int, batch: PitchBatch) -> BatterDecisionReport:
    zones = zone_contact_profile(batch)
    return BatterDecisionReport(
        batter_id=batter_id,
        season=season,
        trout_plus=score_swing_decisions(batch),
        zone_decision_plus=score_zone_decisions(batch),
        zones=zones,
        xwoba=overall_batted_ball_value(batch.records),
        pitch_count=len(batch),
    )


class BatterDecisionService:
    def __init__(self, source: PitchFeedSource) -> None:
        self._source = source

    def season_report(self, batter_id: int, season: int) -> BatterDecisionReport | None:
        """Score one batter's regular-season swing decisions; None when the feed fails."""
        text = value_or_warn(
            self._source.batter_season_csv(batter_id, season),
            logger,
            "Season CSV unavailable for batter %d: %s",
            batter_id,
        )
        if text is None:
            return None
        batch = batch_from_savant_csv(text)
        logger.debug("Scoring %d pitches for batter %d in %d", len(batch), batter_id, season)
        return build_decision_report(batter_id, season, batch)
