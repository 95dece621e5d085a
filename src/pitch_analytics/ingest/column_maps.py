import math
from collections.abc import Mapping
from typing import Any

from pitch_analytics.domain.pitch import RawPitchRecord

# Savant search CSV column names, keyed by RawPitchRecord field.
SAVANT_CSV_COLUMNS: dict[str, tuple[str, ...]] = {
    "pitch_type_code": ("pitch_type",),
    "description": ("description",),
    "release_speed": ("release_speed",),
    "release_spin_rate": ("release_spin_rate",),
    "pfx_x": ("pfx_x",),
    "pfx_z": ("pfx_z",),
    "vx0": ("vx0",),
    "vy0": ("vy0",),
    "vz0": ("vz0",),
    "ax": ("ax",),
    "ay": ("ay",),
    "az": ("az",),
    "release_distance": ("release_pos_y",),
    "plate_x": ("plate_x",),
    "plate_z": ("plate_z",),
    "release_pos_x": ("release_pos_x",),
    "release_pos_z": ("release_pos_z",),
    "extension": ("release_extension",),
    "arm_angle": ("arm_angle",),
    "zone": ("zone",),
    "balls": ("balls",),
    "strikes": ("strikes",),
    "batted_ball_value": ("estimated_woba_using_speedangle",),
    "launch_speed": ("launch_speed",),
    "launch_angle": ("launch_angle",),
    "game_pk": ("game_pk",),
    "pitcher_id": ("pitcher",),
    "batter_id": ("batter",),
    "batter_stand": ("stand",),
    "pitcher_throws": ("p_throws",),
}

# Savant /gf pitch objects. Earlier names in a tuple take priority.
GAME_FEED_FIELDS: dict[str, tuple[str, ...]] = {
    "pitch_type_code": ("pitch_type",),
    "description": ("description", "call_name"),
    "release_speed": ("start_speed", "release_speed"),
    "release_spin_rate": ("spin_rate", "release_spin_rate"),
    "pfx_x": ("pfxX", "pfx_x"),
    "pfx_z": ("pfxZ", "pfx_z"),
    "vx0": ("vx0",),
    "vy0": ("vy0",),
    "vz0": ("vz0",),
    "ax": ("ax",),
    "ay": ("ay",),
    "az": ("az",),
    "release_distance": ("y0",),
    "plate_x": ("px", "plate_x"),
    "plate_z": ("pz", "plate_z"),
    "release_pos_x": ("x0", "release_pos_x"),
    "release_pos_z": ("z0", "release_pos_z"),
    "extension": ("extension", "release_extension"),
    "arm_angle": ("arm_angle",),
    "zone": ("zone",),
    "balls": ("pre_balls", "balls"),
    "strikes": ("pre_strikes", "strikes"),
    "batted_ball_value": ("estimated_woba_using_speedangle", "xwoba"),
    "launch_speed": ("launch_speed", "hit_speed"),
    "launch_angle": ("launch_angle", "hit_angle"),
    "game_pk": ("game_pk",),
    "pitcher_id": ("pitcher",),
    "batter_id": ("batter",),
    "batter_stand": ("stand",),
    "pitcher_throws": ("p_throws",),
}

_INT_FIELDS = frozenset({"zone", "balls", "strikes", "game_pk", "pitcher_id", "batter_id"})
_STR_FIELDS = frozenset({"pitch_type_code", "description", "batter_stand", "pitcher_throws"})


def _to_optional_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def _to_optional_int(value: Any) -> int | None:
    as_float = _to_optional_float(value)
    if as_float is None:
        return None
    return int(as_float)


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    s = str(value).strip()
    if s == "":
        return None
    return s


def _first_present(row: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None and value != "":
            return value
    return None


def _map_record(row: Mapping[str, Any], columns: dict[str, tuple[str, ...]]) -> RawPitchRecord:
    fields: dict[str, Any] = {}
    for field_name, keys in columns.items():
        value = _first_present(row, keys)
        if field_name in _STR_FIELDS:
            fields[field_name] = _to_optional_str(value)
        elif field_name in _INT_FIELDS:
            fields[field_name] = _to_optional_int(value)
        else:
            fields[field_name] = _to_optional_float(value)
    return RawPitchRecord(**fields)


def savant_row_to_record(row: Mapping[str, Any]) -> RawPitchRecord:
    return _map_record(row, SAVANT_CSV_COLUMNS)


def game_feed_pitch_to_record(pitch: Mapping[str, Any]) -> RawPitchRecord:
    return _map_record(pitch, GAME_FEED_FIELDS)
