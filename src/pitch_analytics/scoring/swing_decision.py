"""Trout+ swing-decision score.

Every zoned pitch a batter sees earns points from a calibrated table keyed by
where it was (strike zone, shadow, chase), whether the batter swung, and the
count. Swinging at a strike in one of the batter's own hot zones earns a flat
bonus. The per-pitch mean is standardized against fixed league constants.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pitch_analytics.classify.outcomes import outcome_classifier_for
from pitch_analytics.domain.decision import TROUT_PLUS, DecisionScore
from pitch_analytics.scoring.tables import (
    HOT_ZONE_BONUS,
    HOT_ZONE_MARGIN,
    HOT_ZONE_MIN_OVERALL_SAMPLES,
    HOT_ZONE_MIN_ZONE_SAMPLES,
    TROUT_PLUS_MEAN,
    TROUT_PLUS_MIN_PITCHES,
    TROUT_PLUS_POINTS,
    TROUT_PLUS_SCALE,
    TROUT_PLUS_STDEV,
    CountSituation,
    Decision,
)
from pitch_analytics.scoring.zones import ZoneType, classify_zone, hot_zones, zone_value_profile
from pitch_analytics.stat_utils import round_half_up, round_to_int

if TYPE_CHECKING:
    from pitch_analytics.domain.pitch import PitchBatch

logger = logging.getLogger(__name__)


def count_situation(balls: int | None, strikes: int | None) -> CountSituation:
    """Classify the count; 3-ball counts take precedence over two strikes."""
    if balls == 3 and strikes == 0:
        return CountSituation.THREE_OH
    if balls == 3 and strikes == 2:
        return CountSituation.THREE_TWO
    if balls == 3 and strikes == 1:
        return CountSituation.THREE_ONE
    if strikes == 2:
        return CountSituation.TWO_STRIKE
    return CountSituation.REGULAR


def pitch_points(zone_type: ZoneType, swung: bool, situation: CountSituation) -> float:
    decision = Decision.SWING if swung else Decision.TAKE
    return TROUT_PLUS_POINTS[(zone_type, decision)][situation]


def standardize_trout_plus(mean_points: float) -> int:
    return round_to_int(100 + (mean_points - TROUT_PLUS_MEAN) / TROUT_PLUS_STDEV * TROUT_PLUS_SCALE)


def score_swing_decisions(batch: PitchBatch) -> DecisionScore:
    classifier = outcome_classifier_for(batch.source)
    hot = hot_zones(
        zone_value_profile(batch.records),
        margin=HOT_ZONE_MARGIN,
        min_zone_samples=HOT_ZONE_MIN_ZONE_SAMPLES,
        min_overall_samples=HOT_ZONE_MIN_OVERALL_SAMPLES,
    )

    total_points = 0.0
    scored = 0
    for record in batch.records:
        if record.zone is None or record.zone < 1:
            continue
        zone_type = classify_zone(record.zone)
        if zone_type is None:
            continue
        swung = classifier.classify(record.description).is_swing
        points = pitch_points(zone_type, swung, count_situation(record.balls, record.strikes))
        if zone_type is ZoneType.STRIKE and swung and record.zone in hot:
            points += HOT_ZONE_BONUS
        total_points += points
        scored += 1

    if scored < TROUT_PLUS_MIN_PITCHES:
        logger.debug("Trout+ needs %d zoned pitches, have %d", TROUT_PLUS_MIN_PITCHES, scored)
        return DecisionScore(
            model=TROUT_PLUS,
            score=None,
            raw=None,
            sample_size=scored,
            min_sample=TROUT_PLUS_MIN_PITCHES,
        )

    mean_points = total_points / scored
    return DecisionScore(
        model=TROUT_PLUS,
        score=standardize_trout_plus(mean_points),
        raw=round_half_up(mean_points, 1),
        sample_size=scored,
        min_sample=TROUT_PLUS_MIN_PITCHES,
    )
