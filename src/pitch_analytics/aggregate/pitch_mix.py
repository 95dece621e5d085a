from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING

from pitch_analytics.classify.batted_balls import is_barrel, is_batted_ball
from pitch_analytics.classify.outcomes import outcome_classifier_for
from pitch_analytics.classify.pitch_types import display_name
from pitch_analytics.domain.pitch_mix import MovementPoint, PitchMixSummary, PitchTypeAggregate
from pitch_analytics.kinematics.approach_angle import derive_vaa
from pitch_analytics.kinematics.breaks import BreakConvention, derive_breaks, to_arm_side
from pitch_analytics.stat_utils import mean, pct, round_half_up, round_to_int, rounded_mean

if TYPE_CHECKING:
    from pitch_analytics.domain.pitch import PitchBatch

logger = logging.getLogger(__name__)

# Pitch types thrown less often than this (percent) are hidden from the output.
MIN_DISPLAY_USAGE = 1.0
# Barrel rate needs at least this many batted balls of a pitch type.
MIN_BARREL_SAMPLE = 5


@dataclass
class _PitchGroup:
    count: int = 0
    swings: int = 0
    whiffs: int = 0
    strikes: int = 0
    vs_lhh: int = 0
    vs_rhh: int = 0
    batted_balls: int = 0
    barrels: int = 0
    velos: list[float] = field(default_factory=list)
    spins: list[float] = field(default_factory=list)
    h_breaks: list[float] = field(default_factory=list)
    v_breaks: list[float] = field(default_factory=list)
    vaas: list[float] = field(default_factory=list)
    release_xs: list[float] = field(default_factory=list)
    release_zs: list[float] = field(default_factory=list)
    extensions: list[float] = field(default_factory=list)


def _append(samples: list[float], value: float | None) -> None:
    if value is not None:
        samples.append(value)


def aggregate_pitch_mix(batch: PitchBatch, throws: str | None = None) -> PitchMixSummary:
    """Roll a batch of pitches up into per-pitch-type statistics.

    Suppressed and unrecognised pitch types are dropped before anything is
    counted, so they shrink every denominator including strike and whiff
    rates. Usage splits against left- and right-handed batters are taken over
    the same filtered pitches. ``throws`` orients movement points toward the
    pitcher's arm side; when omitted, each record's own ``pitcher_throws``
    is used.
    """
    classifier = outcome_classifier_for(batch.source)
    convention = BreakConvention.for_source(batch.source)

    groups: dict[str, _PitchGroup] = {}
    total_pitches = 0
    strikes = 0
    whiffs = 0
    faced: dict[str, int] = {"L": 0, "R": 0}
    arm_angles: list[float] = []
    points: list[MovementPoint] = []

    for record in batch.records:
        name = display_name(record.pitch_type_code)
        if name is None:
            continue
        total_pitches += 1

        outcome = classifier.classify(record.description)
        group = groups.setdefault(name, _PitchGroup())
        group.count += 1
        if outcome.is_strike:
            strikes += 1
            group.strikes += 1
        if outcome.is_swing:
            group.swings += 1
        if outcome.is_whiff:
            whiffs += 1
            group.whiffs += 1

        stand = (record.batter_stand or "").upper()
        if stand in faced:
            faced[stand] += 1
            if stand == "L":
                group.vs_lhh += 1
            else:
                group.vs_rhh += 1

        if is_batted_ball(record.launch_speed):
            group.batted_balls += 1
            if is_barrel(record.launch_speed, record.launch_angle):
                group.barrels += 1

        breaks = derive_breaks(record.pfx_x, record.pfx_z, convention)
        _append(group.velos, record.release_speed)
        _append(group.spins, record.release_spin_rate)
        _append(group.h_breaks, breaks.h_break)
        _append(group.v_breaks, breaks.v_break)
        _append(group.vaas, derive_vaa(record))
        _append(group.release_xs, record.release_pos_x)
        _append(group.release_zs, record.release_pos_z)
        _append(group.extensions, record.extension)
        _append(arm_angles, record.arm_angle)

        if breaks.h_break is not None and breaks.v_break is not None:
            points.append(
                MovementPoint(
                    pitch_type=name,
                    h_break=round_half_up(to_arm_side(breaks.h_break, throws or record.pitcher_throws), 1),
                    v_break=round_half_up(breaks.v_break, 1),
                    plate_x=record.plate_x,
                    plate_z=record.plate_z,
                    is_whiff=outcome.is_whiff,
                )
            )

    pitch_types: list[PitchTypeAggregate] = []
    for name, group in groups.items():
        usage = group.count / total_pitches * 100.0
        if usage < MIN_DISPLAY_USAGE:
            logger.debug("Hiding %s at %.2f%% usage", name, usage)
            continue
        spin = mean(group.spins)
        pitch_types.append(
            PitchTypeAggregate(
                name=name,
                count=group.count,
                usage=round_half_up(usage, 1),
                velo=rounded_mean(group.velos, 1),
                spin=round_to_int(spin) if spin is not None else None,
                h_movement=rounded_mean(group.h_breaks, 1),
                v_movement=rounded_mean(group.v_breaks, 1),
                vaa=rounded_mean(group.vaas, 2),
                swings=group.swings,
                whiffs=group.whiffs,
                whiff_pct=pct(group.whiffs, group.swings),
                strike_pct=pct(group.strikes, group.count),
                release_x=rounded_mean(group.release_xs, 1),
                release_z=rounded_mean(group.release_zs, 1),
                extension=rounded_mean(group.extensions, 1),
                usage_vs_lhh=pct(group.vs_lhh, faced["L"]),
                usage_vs_rhh=pct(group.vs_rhh, faced["R"]),
                batted_balls=group.batted_balls,
                barrels=group.barrels,
                barrel_pct=pct(group.barrels, group.batted_balls) if group.batted_balls >= MIN_BARREL_SAMPLE else None,
            )
        )

    pitch_types.sort(key=lambda p: p.count, reverse=True)
    logger.debug("Aggregated %d of %d pitches into %d pitch types", total_pitches, len(batch), len(pitch_types))

    return PitchMixSummary(
        total_pitches=total_pitches,
        pitch_types=tuple(pitch_types),
        strike_pct=pct(strikes, total_pitches),
        swing_and_miss_pct=pct(whiffs, total_pitches),
        total_whiffs=whiffs,
        arm_angle=rounded_mean(arm_angles, 1),
        movement_points=tuple(points),
    )


def _backfill[T: (PitchTypeAggregate, PitchMixSummary)](primary: T, fallback: T) -> T:
    missing = {f.name: getattr(fallback, f.name) for f in fields(primary) if getattr(primary, f.name) is None}
    return replace(primary, **missing) if missing else primary


def merge_pitch_mix(primary: PitchMixSummary, fallback: PitchMixSummary) -> PitchMixSummary:
    """Fill gaps in ``primary`` from ``fallback``.

    Primary's pitch type list is authoritative: matching types (by name) get
    their missing fields backfilled, and types only the fallback saw are not
    added. A primary summary that retained no pitches has no rates to fill,
    so its scalar fields are left untouched.
    """
    fallback_types = {p.name: p for p in fallback.pitch_types}
    merged_types = tuple(
        _backfill(p, fallback_types[p.name]) if p.name in fallback_types else p for p in primary.pitch_types
    )
    merged = _backfill(primary, fallback) if primary.total_pitches else primary
    return replace(
        merged,
        pitch_types=merged_types,
        movement_points=primary.movement_points or fallback.movement_points,
    )
