"""Vertical approach angle (VAA) at the front of home plate.

Two formulas are kept. ``vaa_from_kinematics`` integrates the constant
acceleration pitch trajectory from the release measurement to the plate and is
preferred whenever its inputs are present. ``vaa_from_release`` only uses the
release velocity components and is the fallback for feeds without
acceleration data.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pitch_analytics.domain.pitch import RawPitchRecord

# Front of home plate, feet from the back tip.
Y_PLATE = 1.417


def vaa_from_kinematics(
    vy0: float,
    vz0: float,
    ay: float,
    az: float,
    release_distance: float,
) -> float | None:
    if ay == 0:
        return None
    discriminant = vy0 * vy0 + 2 * ay * (Y_PLATE - release_distance)
    if discriminant < 0:
        return None
    t = (-vy0 - math.sqrt(discriminant)) / ay
    vz_plate = vz0 + az * t
    vy_plate = vy0 + ay * t
    return math.degrees(math.atan2(vz_plate, abs(vy_plate)))


def vaa_from_release(vy0: float, vz0: float) -> float | None:
    if vy0 == 0:
        return None
    return math.degrees(math.atan2(vz0, abs(vy0)))


def derive_vaa(record: RawPitchRecord) -> float | None:
    vy0, vz0 = record.vy0, record.vz0
    if vy0 is None or vz0 is None:
        return None
    if record.ay is not None and record.az is not None and record.release_distance is not None:
        return vaa_from_kinematics(vy0, vz0, record.ay, record.az, record.release_distance)
    return vaa_from_release(vy0, vz0)
