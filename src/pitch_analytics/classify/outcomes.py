"""Pitch outcome classification for the two upstream vocabularies.

The batch CSV export uses lower-case snake_case descriptions
(``swinging_strike_blocked``) while the realtime game feed uses Title Case
phrases (``Swinging Strike (Blocked)``). Each vocabulary gets its own
classifier; callers pick one through ``outcome_classifier_for`` using the
batch's ``FeedSource`` rather than inspecting description text.

Strike, swing and in-play checks are substring matches on the lower-cased
text. Whiff and contact checks are exact matches so compound phrases cannot
produce false positives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pitch_analytics.domain.pitch import FeedSource


@dataclass(frozen=True)
class OutcomeFacets:
    is_strike: bool = False
    is_swing: bool = False
    is_whiff: bool = False
    is_contact: bool = False
    is_in_play: bool = False


_NO_OUTCOME = OutcomeFacets()


class OutcomeClassifier(Protocol):
    def classify(self, description: str | None) -> OutcomeFacets: ...


class SavantCsvOutcomes:
    _WHIFFS = frozenset({"swinging_strike", "swinging_strike_blocked"})
    _CONTACT = frozenset({"foul", "hit_into_play", "foul_tip", "bunt_foul_tip"})
    _STRIKE_MARKERS = ("strike", "foul", "swinging")
    _IN_PLAY_MARKER = "hit_into_play"

    def classify(self, description: str | None) -> OutcomeFacets:
        if not description:
            return _NO_OUTCOME
        desc = description.strip().lower()
        is_whiff = desc in self._WHIFFS
        is_in_play = self._IN_PLAY_MARKER in desc
        return OutcomeFacets(
            is_strike=any(marker in desc for marker in self._STRIKE_MARKERS),
            is_swing=is_whiff or "foul" in desc or is_in_play,
            is_whiff=is_whiff,
            is_contact=desc in self._CONTACT,
            is_in_play=is_in_play,
        )


class GameFeedOutcomes:
    _WHIFFS = frozenset({"swinging strike", "swinging strike (blocked)"})
    _CONTACT = frozenset(
        {
            "foul",
            "foul tip",
            "bunt foul tip",
            "in play, out(s)",
            "in play, no out",
            "in play, run(s)",
        }
    )
    _STRIKE_MARKERS = ("strike", "foul", "in play")
    _IN_PLAY_MARKER = "in play"

    def classify(self, description: str | None) -> OutcomeFacets:
        if not description:
            return _NO_OUTCOME
        desc = description.strip().lower()
        is_whiff = desc in self._WHIFFS
        is_in_play = self._IN_PLAY_MARKER in desc
        return OutcomeFacets(
            is_strike=any(marker in desc for marker in self._STRIKE_MARKERS),
            is_swing=is_whiff or "foul" in desc or is_in_play,
            is_whiff=is_whiff,
            is_contact=desc in self._CONTACT,
            is_in_play=is_in_play,
        )


_CLASSIFIERS: dict[FeedSource, OutcomeClassifier] = {
    FeedSource.BATCH_CSV: SavantCsvOutcomes(),
    FeedSource.REALTIME_FEED: GameFeedOutcomes(),
}


def outcome_classifier_for(source: FeedSource) -> OutcomeClassifier:
    return _CLASSIFIERS[source]
