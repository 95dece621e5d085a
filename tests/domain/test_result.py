import logging

import pytest

from pitch_analytics.domain.errors import FeedFetchError, PitchAnalyticsError
from pitch_analytics.domain.result import Err, Ok, value_or_warn

logger = logging.getLogger("tests.result")


class TestValueOrWarn:
    def test_ok_unwraps(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tests.result"):
            assert value_or_warn(Ok("csv"), logger, "Feed unavailable for %d: %s", 7) == "csv"
        assert caplog.text == ""

    def test_err_is_none_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        result = Err(FeedFetchError(message="boom", source="savant", detail="game 1"))
        with caplog.at_level(logging.WARNING, logger="tests.result"):
            assert value_or_warn(result, logger, "Feed unavailable for %d: %s", 7) is None
        assert "Feed unavailable for 7: boom" in caplog.text

    def test_match(self) -> None:
        match Ok("csv"):
            case Ok(value):
                assert value == "csv"
            case Err():
                raise AssertionError


class TestErrors:
    def test_feed_fetch_error_is_domain_error(self) -> None:
        error = FeedFetchError(message="boom", source="savant", detail="game 1")
        assert isinstance(error, PitchAnalyticsError)
        assert error.message == "boom"
