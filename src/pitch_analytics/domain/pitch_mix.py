from dataclasses import dataclass


@dataclass(frozen=True)
class PitchTypeAggregate:
    name: str
    count: int
    usage: float
    velo: float | None = None
    spin: int | None = None
    h_movement: float | None = None
    v_movement: float | None = None
    vaa: float | None = None
    swings: int = 0
    whiffs: int = 0
    whiff_pct: float | None = None
    strike_pct: float | None = None
    release_x: float | None = None
    release_z: float | None = None
    extension: float | None = None
    usage_vs_lhh: float | None = None
    usage_vs_rhh: float | None = None
    batted_balls: int = 0
    barrels: int = 0
    barrel_pct: float | None = None


@dataclass(frozen=True)
class MovementPoint:
    pitch_type: str
    h_break: float
    v_break: float
    plate_x: float | None
    plate_z: float | None
    is_whiff: bool


@dataclass(frozen=True)
class PitchMixSummary:
    total_pitches: int
    pitch_types: tuple[PitchTypeAggregate, ...] = ()
    strike_pct: float | None = None
    swing_and_miss_pct: float | None = None
    total_whiffs: int = 0
    arm_angle: float | None = None
    movement_points: tuple[MovementPoint, ...] = ()

    def pitch_type(self, name: str) -> PitchTypeAggregate | None:
        for aggregate in self.pitch_types:
            if aggregate.name == name:
                return aggregate
        return None


@dataclass(frozen=True)
class PitcherWhiffs:
    pitcher_id: int
    pitches: int
    whiffs: int
