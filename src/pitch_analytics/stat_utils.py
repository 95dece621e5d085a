"""Shared numeric helpers for pitch aggregates and decision scores."""

import math
from collections.abc import Sequence


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going toward +infinity, matching the dashboard's published numbers."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    return math.floor(value + 0.5)


def mean(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def rounded_mean(values: Sequence[float], digits: int) -> float | None:
    avg = mean(values)
    return round_half_up(avg, digits) if avg is not None else None


def pct(numerator: int, denominator: int) -> float | None:
    """Percentage to one decimal, or None for an empty denominator."""
    if denominator <= 0:
        return None
    return round_half_up(numerator / denominator * 100.0, 1)
