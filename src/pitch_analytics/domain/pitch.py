from __future__ import annotations

import enum
from dataclasses import dataclass


class FeedSource(enum.Enum):
    """Upstream feed a batch of pitches came from.

    The two feeds report the same pitch with different field names, outcome
    vocabularies and horizontal-break conventions.
    """

    BATCH_CSV = "batch_csv"
    REALTIME_FEED = "realtime_feed"


@dataclass(frozen=True)
class RawPitchRecord:
    pitch_type_code: str | None = None
    description: str | None = None
    release_speed: float | None = None
    release_spin_rate: float | None = None
    pfx_x: float | None = None
    pfx_z: float | None = None
    vx0: float | None = None
    vy0: float | None = None
    vz0: float | None = None
    ax: float | None = None
    ay: float | None = None
    az: float | None = None
    release_distance: float | None = None
    plate_x: float | None = None
    plate_z: float | None = None
    release_pos_x: float | None = None
    release_pos_z: float | None = None
    extension: float | None = None
    arm_angle: float | None = None
    zone: int | None = None
    balls: int | None = None
    strikes: int | None = None
    batted_ball_value: float | None = None
    launch_speed: float | None = None
    launch_angle: float | None = None
    game_pk: int | None = None
    pitcher_id: int | None = None
    batter_id: int | None = None
    batter_stand: str | None = None
    pitcher_throws: str | None = None


@dataclass(frozen=True)
class PitchBatch:
    source: FeedSource
    records: tuple[RawPitchRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def for_game(self, game_pk: int) -> PitchBatch:
        """Keep pitches from one game; records without a game_pk are kept."""
        kept = tuple(r for r in self.records if r.game_pk is None or r.game_pk == game_pk)
        return PitchBatch(source=self.source, records=kept)

    def for_pitcher(self, pitcher_id: int) -> PitchBatch:
        kept = tuple(r for r in self.records if r.pitcher_id == pitcher_id)
        return PitchBatch(source=self.source, records=kept)
