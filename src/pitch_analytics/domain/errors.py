from dataclasses import dataclass


@dataclass(frozen=True)
class PitchAnalyticsError:
    message: str


@dataclass(frozen=True)
class FeedFetchError(PitchAnalyticsError):
    source: str
    detail: str
