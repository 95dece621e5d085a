"""Normalise both upstream wire shapes into a single PitchBatch."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from pitch_analytics.domain.pitch import FeedSource, PitchBatch, RawPitchRecord
from pitch_analytics.ingest.column_maps import game_feed_pitch_to_record, savant_row_to_record
from pitch_analytics.ingest.row_parser import parse_rows

logger = logging.getLogger(__name__)

_GAME_FEED_SIDES = ("home_pitchers", "away_pitchers")


def batch_from_savant_csv(text: str, delimiter: str = ",") -> PitchBatch:
    rows = parse_rows(text, delimiter=delimiter)
    records = tuple(savant_row_to_record(row) for row in rows)
    return PitchBatch(source=FeedSource.BATCH_CSV, records=records)


def game_feed_pitchers(payload: Mapping[str, Any]) -> dict[int, list[Mapping[str, Any]]]:
    """Return pitch objects per pitcher id from a /gf payload, home side first."""
    by_pitcher: dict[int, list[Mapping[str, Any]]] = {}
    for side in _GAME_FEED_SIDES:
        side_data = payload.get(side)
        if not isinstance(side_data, Mapping):
            continue
        for pid_str, pitches in side_data.items():
            try:
                pid = int(pid_str)
            except (TypeError, ValueError):
                logger.debug("Skipping non-numeric pitcher key %r in %s", pid_str, side)
                continue
            if not isinstance(pitches, list):
                continue
            by_pitcher.setdefault(pid, []).extend(p for p in pitches if isinstance(p, Mapping))
    return by_pitcher


def batch_from_game_feed(payload: Mapping[str, Any], pitcher_id: int | None = None) -> PitchBatch:
    """Build a realtime batch, optionally restricted to one pitcher.

    Pitch objects rarely carry their own pitcher id, so it is filled in from
    the key they were listed under.
    """
    records: list[RawPitchRecord] = []
    for pid, pitches in game_feed_pitchers(payload).items():
        if pitcher_id is not None and pid != pitcher_id:
            continue
        for pitch in pitches:
            record = game_feed_pitch_to_record(pitch)
            if record.pitcher_id is None:
                record = replace(record, pitcher_id=pid)
            records.append(record)
    return PitchBatch(source=FeedSource.REALTIME_FEED, records=tuple(records))
