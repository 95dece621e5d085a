"""Calibration constants for the swing-decision scores.

These are empirical artifacts fixed at calibration time. They are loaded once
and never recomputed from the population being scored.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from pitch_analytics.scoring.zones import ZoneType

if TYPE_CHECKING:
    from collections.abc import Mapping


class CountSituation(enum.Enum):
    THREE_OH = "3-0"
    THREE_ONE = "3-1"
    THREE_TWO = "3-2"
    TWO_STRIKE = "two_strike"
    REGULAR = "regular"


class Decision(enum.Enum):
    SWING = "swing"
    TAKE = "take"


# Trout+ points per pitch, keyed by (zone type, decision) then count situation.
TROUT_PLUS_POINTS: Mapping[tuple[ZoneType, Decision], Mapping[CountSituation, float]] = MappingProxyType(
    {
        (ZoneType.STRIKE, Decision.SWING): MappingProxyType(
            {
                CountSituation.THREE_OH: 60.0,
                CountSituation.THREE_ONE: 80.0,
                CountSituation.THREE_TWO: 85.0,
                CountSituation.TWO_STRIKE: 85.0,
                CountSituation.REGULAR: 75.0,
            }
        ),
        (ZoneType.STRIKE, Decision.TAKE): MappingProxyType(
            {
                CountSituation.THREE_OH: 80.0,
                CountSituation.THREE_ONE: 55.0,
                CountSituation.THREE_TWO: 25.0,
                CountSituation.TWO_STRIKE: 30.0,
                CountSituation.REGULAR: 55.0,
            }
        ),
        (ZoneType.SHADOW, Decision.SWING): MappingProxyType(
            {
                CountSituation.THREE_OH: 40.0,
                CountSituation.THREE_ONE: 55.0,
                CountSituation.THREE_TWO: 70.0,
                CountSituation.TWO_STRIKE: 70.0,
                CountSituation.REGULAR: 60.0,
            }
        ),
        (ZoneType.SHADOW, Decision.TAKE): MappingProxyType(
            {
                CountSituation.THREE_OH: 75.0,
                CountSituation.THREE_ONE: 70.0,
                CountSituation.THREE_TWO: 55.0,
                CountSituation.TWO_STRIKE: 55.0,
                CountSituation.REGULAR: 65.0,
            }
        ),
        (ZoneType.CHASE, Decision.SWING): MappingProxyType(
            {
                CountSituation.THREE_OH: 10.0,
                CountSituation.THREE_ONE: 25.0,
                CountSituation.THREE_TWO: 40.0,
                CountSituation.TWO_STRIKE: 45.0,
                CountSituation.REGULAR: 35.0,
            }
        ),
        (ZoneType.CHASE, Decision.TAKE): MappingProxyType(
            {
                CountSituation.THREE_OH: 90.0,
                CountSituation.THREE_ONE: 85.0,
                CountSituation.THREE_TWO: 80.0,
                CountSituation.TWO_STRIKE: 80.0,
                CountSituation.REGULAR: 85.0,
            }
        ),
    }
)

TROUT_PLUS_MEAN = 66.8
TROUT_PLUS_STDEV = 2.0
TROUT_PLUS_SCALE = 10.0
TROUT_PLUS_MIN_PITCHES = 10

HOT_ZONE_BONUS = 5.0
HOT_ZONE_MARGIN = 0.030
HOT_ZONE_MIN_ZONE_SAMPLES = 5
HOT_ZONE_MIN_OVERALL_SAMPLES = 10

ZONE_VALUE_BASELINE = 0.250
ZONE_VALUE_POINTS_PER_UNIT = 1000.0
ZONE_MIN_VALUE_SAMPLES = 5
# Placeholder standardization: not yet fitted to a full season of hitters.
ZONE_DECISION_MEAN = 0.0
ZONE_DECISION_SCALE = 10.0
ZONE_DECISION_MIN_PITCHES = 50
