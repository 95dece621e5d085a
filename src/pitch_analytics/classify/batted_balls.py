"""Statcast barrel classification from exit velocity and launch angle."""

# Exit velocity (mph) at which a ball can first be barreled, with its launch-angle window.
BARREL_MIN_EXIT_VELO = 98.0
_BASE_MIN_ANGLE = 26.0
_BASE_MAX_ANGLE = 30.0
# The window stops widening 18 mph above the minimum and never leaves 8..50 degrees.
_MAX_WIDENING = 18.0
_ANGLE_FLOOR = 8.0
_ANGLE_CEILING = 50.0


def is_batted_ball(exit_velo: float | None) -> bool:
    """A pitch put in play carries a non-zero exit velocity."""
    return exit_velo is not None and exit_velo != 0


def is_barrel(exit_velo: float | None, launch_angle: float | None) -> bool:
    if exit_velo is None or launch_angle is None or exit_velo < BARREL_MIN_EXIT_VELO:
        return False
    widening = min(exit_velo - BARREL_MIN_EXIT_VELO, _MAX_WIDENING)
    min_angle = max(_ANGLE_FLOOR, _BASE_MIN_ANGLE - widening)
    max_angle = min(_ANGLE_CEILING, _BASE_MAX_ANGLE + widening)
    return min_angle <= launch_angle <= max_angle
