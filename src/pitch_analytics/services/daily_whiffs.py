import logging

from pitch_analytics.classify.outcomes import outcome_classifier_for
from pitch_analytics.domain.pitch_mix import PitcherWhiffs
from pitch_analytics.domain.result import value_or_warn
from pitch_analytics.ingest.batches import batch_from_game_feed, game_feed_pitchers
from pitch_analytics.ingest.protocols import PitchFeedSource

logger = logging.getLogger(__name__)


class DailyWhiffService:
    """Per-pitcher swinging-strike counts for a single game from the live feed."""

    def __init__(self, source: PitchFeedSource) -> None:
        self._source = source

    def game_whiffs(self, game_pk: int) -> list[PitcherWhiffs] | None:
        payload = value_or_warn(
            self._source.game_feed(game_pk), logger, "Game feed unavailable for game %d: %s", game_pk
        )
        if payload is None:
            return None

        batch = batch_from_game_feed(payload)
        classifier = outcome_classifier_for(batch.source)
        results = []
        for pitcher_id in game_feed_pitchers(payload):
            pitches = batch.for_pitcher(pitcher_id)
            whiffs = sum(1 for record in pitches.records if classifier.classify(record.description).is_whiff)
            results.append(PitcherWhiffs(pitcher_id=pitcher_id, pitches=len(pitches), whiffs=whiffs))
        return sorted(results, key=lambda r: -r.whiffs)
