from dataclasses import dataclass

TROUT_PLUS = "trout_plus"
ZONE_DECISION_PLUS = "zone_decision_plus"


@dataclass(frozen=True)
class DecisionScore:
    model: str
    score: int | None
    raw: float | None
    sample_size: int
    min_sample: int

    @property
    def is_qualified(self) -> bool:
        return self.score is not None


@dataclass(frozen=True)
class ZoneContact:
    zone: int
    pitches: int
    swings: int
    contacts: int
    swing_pct: float | None
    contact_pct: float | None
    xwoba: float | None
    xwoba_n: int


@dataclass(frozen=True)
class BatterDecisionReport:
    batter_id: int
    season: int
    trout_plus: DecisionScore
    zone_decision_plus: DecisionScore
    zones: tuple[ZoneContact, ...]
    xwoba: float | None
    pitch_count: int
