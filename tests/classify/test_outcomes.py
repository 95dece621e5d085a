import pytest

from pitch_analytics.classify.outcomes import (
    GameFeedOutcomes,
    OutcomeFacets,
    SavantCsvOutcomes,
    outcome_classifier_for,
)
from pitch_analytics.domain.pitch import FeedSource


class TestSavantCsvOutcomes:
    classifier = SavantCsvOutcomes()

    @pytest.mark.parametrize("desc", ["swinging_strike", "swinging_strike_blocked"])
    def test_whiffs(self, desc: str) -> None:
        facets = self.classifier.classify(desc)
        assert facets.is_whiff
        assert facets.is_swing
        assert facets.is_strike
        assert not facets.is_contact

    def test_called_strike_is_strike_not_swing(self) -> None:
        facets = self.classifier.classify("called_strike")
        assert facets.is_strike
        assert not facets.is_swing

    def test_foul_is_contact_swing(self) -> None:
        facets = self.classifier.classify("foul")
        assert facets == OutcomeFacets(is_strike=True, is_swing=True, is_contact=True)

    def test_hit_into_play(self) -> None:
        facets = self.classifier.classify("hit_into_play")
        assert facets.is_in_play
        assert facets.is_swing
        assert facets.is_contact

    def test_foul_bunt_is_swing_but_not_listed_contact(self) -> None:
        facets = self.classifier.classify("foul_bunt")
        assert facets.is_swing
        assert not facets.is_contact

    def test_ball_is_nothing(self) -> None:
        assert self.classifier.classify("ball") == OutcomeFacets()

    def test_game_feed_vocabulary_not_recognised_as_whiff(self) -> None:
        assert not self.classifier.classify("Swinging Strike").is_whiff

    def test_missing_description(self) -> None:
        assert self.classifier.classify(None) == OutcomeFacets()
        assert self.classifier.classify("") == OutcomeFacets()


class TestGameFeedOutcomes:
    classifier = GameFeedOutcomes()

    @pytest.mark.parametrize("desc", ["Swinging Strike", "Swinging Strike (Blocked)"])
    def test_whiffs(self, desc: str) -> None:
        facets = self.classifier.classify(desc)
        assert facets.is_whiff
        assert facets.is_swing
        assert facets.is_strike

    @pytest.mark.parametrize("desc", ["In play, out(s)", "In play, no out", "In play, run(s)"])
    def test_in_play_contact(self, desc: str) -> None:
        facets = self.classifier.classify(desc)
        assert facets.is_in_play
        assert facets.is_strike
        assert facets.is_swing
        assert facets.is_contact

    def test_foul_tip(self) -> None:
        facets = self.classifier.classify("Foul Tip")
        assert facets.is_contact
        assert facets.is_swing
        assert not facets.is_whiff

    def test_called_strike(self) -> None:
        facets = self.classifier.classify("Called Strike")
        assert facets.is_strike
        assert not facets.is_swing

    def test_ball(self) -> None:
        assert self.classifier.classify("Ball") == OutcomeFacets()

    def test_csv_vocabulary_not_recognised_as_whiff(self) -> None:
        assert not self.classifier.classify("swinging_strike").is_whiff


class TestOutcomeClassifierFor:
    def test_batch_csv(self) -> None:
        assert isinstance(outcome_classifier_for(FeedSource.BATCH_CSV), SavantCsvOutcomes)

    def test_realtime(self) -> None:
        assert isinstance(outcome_classifier_for(FeedSource.REALTIME_FEED), GameFeedOutcomes)
