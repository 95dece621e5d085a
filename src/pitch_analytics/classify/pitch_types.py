from __future__ import annotations

import enum


class Suppressed(enum.Enum):
    """Marks a recognised pitch code that is deliberately left out of aggregates."""

    KNUCKLEBALL = "KN"
    EEPHUS = "EP"


PITCH_TYPE_NAMES: dict[str, str] = {
    "FF": "4-Seam Fastball",
    "SI": "Sinker",
    "FC": "Cutter",
    "SL": "Slider",
    "ST": "Sweeper",
    "SV": "Slurve",
    "CH": "Changeup",
    "FS": "Splitter",
    "CU": "Curveball",
    "KC": "Knuckle Curve",
}

_SUPPRESSED_CODES: dict[str, Suppressed] = {member.value: member for member in Suppressed}


def classify_pitch_type(code: str | None) -> str | Suppressed | None:
    """Map a two-letter Statcast code to its display name.

    Returns a ``Suppressed`` member for knuckleballs and eephus pitches and
    ``None`` for missing or unrecognised codes.
    """
    if code is None:
        return None
    normalized = code.strip().upper()
    if normalized in _SUPPRESSED_CODES:
        return _SUPPRESSED_CODES[normalized]
    return PITCH_TYPE_NAMES.get(normalized)


def display_name(code: str | None) -> str | None:
    """Canonical name for a code, or None when the pitch is excluded from aggregates."""
    classified = classify_pitch_type(code)
    return classified if isinstance(classified, str) else None
