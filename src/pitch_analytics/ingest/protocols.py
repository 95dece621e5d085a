import datetime
from typing import Any, Protocol, runtime_checkable

from pitch_analytics.domain.result import FeedResult


@runtime_checkable
class PitchFeedSource(Protocol):
    @property
    def source_type(self) -> str: ...

    def pitcher_day_csv(self, player_id: int, day: datetime.date) -> FeedResult[str]: ...

    def pitcher_season_csv(self, player_id: int, season: int) -> FeedResult[str]: ...

    def batter_season_csv(self, player_id: int, season: int) -> FeedResult[str]: ...

    def game_feed(self, game_pk: int) -> FeedResult[dict[str, Any]]: ...
