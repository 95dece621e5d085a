from __future__ import annotations

import enum
from dataclasses import dataclass

from pitch_analytics.domain.pitch import FeedSource

INCHES_PER_FOOT = 12.0


class BreakConvention(enum.Enum):
    """Horizontal-break orientation reported by an upstream feed.

    The batch CSV reports pfx_x from the catcher's view (positive toward first
    base) and must be negated. The realtime feed already reports the pitcher's
    view.
    """

    CATCHER_VIEW = "catcher_view"
    PITCHER_VIEW = "pitcher_view"

    @classmethod
    def for_source(cls, source: FeedSource) -> BreakConvention:
        if source is FeedSource.BATCH_CSV:
            return cls.CATCHER_VIEW
        return cls.PITCHER_VIEW


@dataclass(frozen=True)
class Breaks:
    h_break: float | None
    v_break: float | None


def _catcher_view_h_break(pfx_x: float) -> float:
    return -pfx_x * INCHES_PER_FOOT


def _pitcher_view_h_break(pfx_x: float) -> float:
    return pfx_x * INCHES_PER_FOOT


_H_BREAK_ADAPTERS = {
    BreakConvention.CATCHER_VIEW: _catcher_view_h_break,
    BreakConvention.PITCHER_VIEW: _pitcher_view_h_break,
}


def derive_breaks(pfx_x: float | None, pfx_z: float | None, convention: BreakConvention) -> Breaks:
    """Convert raw pfx movement (feet) into inches of horizontal and induced vertical break."""
    h_break = _H_BREAK_ADAPTERS[convention](pfx_x) if pfx_x is not None else None
    v_break = pfx_z * INCHES_PER_FOOT if pfx_z is not None else None
    return Breaks(h_break=h_break, v_break=v_break)


def arm_side_sign(throws: str | None) -> int:
    """+1 for right-handed pitchers, -1 for left-handed."""
    if throws is not None and throws.strip().upper() == "L":
        return -1
    return 1


def to_arm_side(h_break: float, throws: str | None) -> float:
    """Re-orient horizontal break so positive always points to the pitcher's arm side."""
    return h_break * arm_side_sign(throws)
