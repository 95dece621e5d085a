import datetime
import logging

from pitch_analytics.aggregate.pitch_mix import aggregate_pitch_mix, merge_pitch_mix
from pitch_analytics.domain.pitch import PitchBatch
from pitch_analytics.domain.pitch_mix import PitchMixSummary
from pitch_analytics.domain.result import value_or_warn
from pitch_analytics.ingest.batches import batch_from_game_feed, batch_from_savant_csv
from pitch_analytics.ingest.protocols import PitchFeedSource

logger = logging.getLogger(__name__)


class PitcherDayService:
    """One pitcher's pitch mix for one date.

    The real-time game feed is preferred when a game is known; the batch CSV
    fills whatever the feed leaves empty. A failed feed is treated as absent,
    as is a feed whose pitches were all filtered out.
    """

    def __init__(self, source: PitchFeedSource) -> None:
        self._source = source

    def _batch_csv(self, player_id: int, day: datetime.date, game_pk: int | None) -> PitchBatch | None:
        text = value_or_warn(
            self._source.pitcher_day_csv(player_id, day), logger, "Batch CSV unavailable for pitcher %d: %s", player_id
        )
        if text is None:
            return None
        batch = batch_from_savant_csv(text)
        if game_pk is not None:
            batch = batch.for_game(game_pk)
        return batch if len(batch) else None

    def _realtime(self, player_id: int, game_pk: int) -> PitchBatch | None:
        payload = value_or_warn(
            self._source.game_feed(game_pk), logger, "Game feed unavailable for game %d: %s", game_pk
        )
        if payload is None:
            return None
        batch = batch_from_game_feed(payload, pitcher_id=player_id)
        return batch if len(batch) else None

    def pitch_mix(
        self,
        player_id: int,
        day: datetime.date,
        game_pk: int | None = None,
        throws: str | None = None,
    ) -> PitchMixSummary | None:
        batch = self._batch_csv(player_id, day, game_pk)
        realtime = self._realtime(player_id, game_pk) if game_pk is not None else None
        if throws is None:
            throws = _infer_throws(batch) or _infer_throws(realtime)

        batch_summary = aggregate_pitch_mix(batch, throws=throws) if batch is not None else None
        realtime_summary = aggregate_pitch_mix(realtime, throws=throws) if realtime is not None else None
        if realtime_summary is not None and realtime_summary.total_pitches == 0 and batch_summary is not None:
            logger.debug("Realtime feed for game %d kept no pitches; using batch CSV", game_pk)
            realtime_summary = None

        if realtime_summary is not None and batch_summary is not None:
            logger.debug(
                "Merging %d realtime pitches over %d batch pitches",
                realtime_summary.total_pitches,
                batch_summary.total_pitches,
            )
            return merge_pitch_mix(realtime_summary, batch_summary)
        return realtime_summary or batch_summary

    def season_pitch_mix(self, player_id: int, season: int, throws: str | None = None) -> PitchMixSummary | None:
        text = value_or_warn(
            self._source.pitcher_season_csv(player_id, season),
            logger,
            "Season CSV unavailable for pitcher %d: %s",
            player_id,
        )
        if text is None:
            return None
        batch = batch_from_savant_csv(text)
        if not len(batch):
            return None
        return aggregate_pitch_mix(batch, throws=throws or _infer_throws(batch))


def _infer_throws(batch: PitchBatch | None) -> str | None:
    if batch is None:
        return None
    for record in batch.records:
        if record.pitcher_throws:
            return record.pitcher_throws
    return None
