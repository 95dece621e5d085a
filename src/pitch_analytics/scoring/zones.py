from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from pitch_analytics.domain.pitch import RawPitchRecord
from pitch_analytics.stat_utils import round_half_up

IN_ZONE = tuple(range(1, 10))


class ZoneType(enum.Enum):
    STRIKE = "strike"
    SHADOW = "shadow"
    CHASE = "chase"


def classify_zone(zone: int | None) -> ZoneType | None:
    """Strike zone 1-9, shadow border 11-19, chase region 21 and up."""
    if zone is None:
        return None
    if 1 <= zone <= 9:
        return ZoneType.STRIKE
    if 11 <= zone <= 19:
        return ZoneType.SHADOW
    if zone >= 21:
        return ZoneType.CHASE
    return None


@dataclass(frozen=True)
class ZoneValueProfile:
    """Batted-ball expected value per zone for one batter's population."""

    zone_sums: dict[int, float]
    zone_counts: dict[int, int]
    overall_sum: float
    overall_count: int

    def zone_mean(self, zone: int, min_samples: int = 1) -> float | None:
        n = self.zone_counts.get(zone, 0)
        if n < max(min_samples, 1):
            return None
        return self.zone_sums[zone] / n

    def overall_mean(self, min_samples: int = 1) -> float | None:
        if self.overall_count < max(min_samples, 1):
            return None
        return self.overall_sum / self.overall_count


def zone_value_profile(records: Iterable[RawPitchRecord]) -> ZoneValueProfile:
    zone_values: dict[int, list[float]] = {}
    overall: list[float] = []
    for record in records:
        value = record.batted_ball_value
        if value is None:
            continue
        overall.append(value)
        if record.zone is not None:
            zone_values.setdefault(record.zone, []).append(value)
    return ZoneValueProfile(
        zone_sums={zone: sum(values) for zone, values in zone_values.items()},
        zone_counts={zone: len(values) for zone, values in zone_values.items()},
        overall_sum=sum(overall),
        overall_count=len(overall),
    )


def hot_zones(
    profile: ZoneValueProfile,
    *,
    margin: float,
    min_zone_samples: int,
    min_overall_samples: int,
) -> frozenset[int]:
    """Strike-zone cells where the batter's value beats their own overall mean by ``margin``."""
    overall = profile.overall_mean(min_overall_samples)
    if overall is None:
        return frozenset()
    hot: set[int] = set()
    for zone in IN_ZONE:
        zone_avg = profile.zone_mean(zone, min_zone_samples)
        if zone_avg is not None and zone_avg >= overall + margin:
            hot.add(zone)
    return frozenset(hot)


def overall_batted_ball_value(records: Iterable[RawPitchRecord], min_samples: int = 10) -> float | None:
    values = [r.batted_ball_value for r in records if r.batted_ball_value is not None]
    if len(values) < min_samples:
        return None
    return round_half_up(sum(values) / len(values), 3)
