"""ZoneDecision+ in-zone decision score and the zone contact profile.

For each strike-zone cell with enough batted-ball samples, the batter's mean
expected value is compared with a fixed baseline. Swinging where they do
damage and taking where they don't both earn points; the reverse costs
points. The grand total is standardized with placeholder constants.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pitch_analytics.classify.outcomes import outcome_classifier_for
from pitch_analytics.domain.decision import ZONE_DECISION_PLUS, DecisionScore, ZoneContact
from pitch_analytics.scoring.tables import (
    ZONE_DECISION_MEAN,
    ZONE_DECISION_MIN_PITCHES,
    ZONE_DECISION_SCALE,
    ZONE_MIN_VALUE_SAMPLES,
    ZONE_VALUE_BASELINE,
    ZONE_VALUE_POINTS_PER_UNIT,
)
from pitch_analytics.scoring.zones import IN_ZONE, zone_value_profile
from pitch_analytics.stat_utils import pct, round_half_up, round_to_int

if TYPE_CHECKING:
    from pitch_analytics.domain.pitch import PitchBatch

logger = logging.getLogger(__name__)

# Rates in the contact profile need this many pitches (or swings) behind them.
_MIN_RATE_SAMPLES = 5


def _zone_counts(batch: PitchBatch) -> tuple[dict[int, int], dict[int, int], dict[int, int]]:
    classifier = outcome_classifier_for(batch.source)
    pitches = dict.fromkeys(IN_ZONE, 0)
    swings = dict.fromkeys(IN_ZONE, 0)
    contacts = dict.fromkeys(IN_ZONE, 0)
    for record in batch.records:
        if record.zone not in pitches:
            continue
        outcome = classifier.classify(record.description)
        pitches[record.zone] += 1
        if outcome.is_swing:
            swings[record.zone] += 1
            if outcome.is_contact:
                contacts[record.zone] += 1
    return pitches, swings, contacts


def score_zone_decisions(batch: PitchBatch) -> DecisionScore:
    pitches, swings, _ = _zone_counts(batch)
    profile = zone_value_profile(r for r in batch.records if r.zone in pitches)

    raw_total = 0.0
    for zone in IN_ZONE:
        zone_value = profile.zone_mean(zone, ZONE_MIN_VALUE_SAMPLES)
        if zone_value is None:
            continue
        diff_pts = (zone_value - ZONE_VALUE_BASELINE) * ZONE_VALUE_POINTS_PER_UNIT
        takes = pitches[zone] - swings[zone]
        raw_total += diff_pts * swings[zone] - diff_pts * takes

    zone_pitches = sum(pitches.values())
    if zone_pitches < ZONE_DECISION_MIN_PITCHES:
        logger.debug("ZoneDecision+ needs %d in-zone pitches, have %d", ZONE_DECISION_MIN_PITCHES, zone_pitches)
        return DecisionScore(
            model=ZONE_DECISION_PLUS,
            score=None,
            raw=None,
            sample_size=zone_pitches,
            min_sample=ZONE_DECISION_MIN_PITCHES,
        )

    return DecisionScore(
        model=ZONE_DECISION_PLUS,
        score=round_to_int(100 + (raw_total - ZONE_DECISION_MEAN) / ZONE_DECISION_SCALE),
        raw=round_half_up(raw_total, 1),
        sample_size=zone_pitches,
        min_sample=ZONE_DECISION_MIN_PITCHES,
    )


def zone_contact_profile(batch: PitchBatch) -> tuple[ZoneContact, ...]:
    pitches, swings, contacts = _zone_counts(batch)
    profile = zone_value_profile(r for r in batch.records if r.zone in pitches)
    zones: list[ZoneContact] = []
    for zone in IN_ZONE:
        value = profile.zone_mean(zone, ZONE_MIN_VALUE_SAMPLES)
        zones.append(
            ZoneContact(
                zone=zone,
                pitches=pitches[zone],
                swings=swings[zone],
                contacts=contacts[zone],
                swing_pct=pct(swings[zone], pitches[zone]) if pitches[zone] >= _MIN_RATE_SAMPLES else None,
                contact_pct=pct(contacts[zone], swings[zone]) if swings[zone] >= _MIN_RATE_SAMPLES else None,
                xwoba=round_half_up(value, 3) if value is not None else None,
                xwoba_n=profile.zone_counts.get(zone, 0),
            )
        )
    return tuple(zones)
