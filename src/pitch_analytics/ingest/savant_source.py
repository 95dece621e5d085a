from __future__ import annotations

import datetime
import logging
from typing import Any

import httpx

from pitch_analytics.config import FeedSettings
from pitch_analytics.domain.errors import FeedFetchError
from pitch_analytics.domain.result import Err, FeedResult, Ok
from pitch_analytics.ingest._retry import RetryPolicy, savant_retry
from pitch_analytics.ingest.row_parser import strip_bom

logger = logging.getLogger(__name__)

_CSV_PATH = "/statcast_search/csv"
_GAME_FEED_PATH = "/gf"


class SavantSource:
    """Fetches raw pitch feeds from Baseball Savant.

    Returns raw CSV text or decoded /gf JSON; turning either into pitch
    records is left to ``ingest.batches``.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = "https://baseballsavant.mlb.com",
        timeout: float = 60.0,
        connect_timeout: float = 10.0,
        user_agent: str = "Mozilla/5.0",
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            headers={"User-Agent": user_agent, "Accept": "*/*"},
        )
        self._base_url = base_url.rstrip("/")
        self._get = savant_retry("savant request", retry_policy)(self._request)

    @classmethod
    def from_settings(cls, settings: FeedSettings) -> SavantSource:
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            connect_timeout=settings.connect_timeout,
            user_agent=settings.user_agent,
            retry_policy=RetryPolicy(attempts=settings.retry_attempts, max_wait=settings.retry_max_wait),
        )

    def close(self) -> None:
        self._client.close()

    @property
    def source_type(self) -> str:
        return "baseball_savant"

    def _request(self, path: str, params: dict[str, Any]) -> httpx.Response:
        response = self._client.get(f"{self._base_url}{path}", params=params)
        response.raise_for_status()
        return response

    def _fetch_csv(self, params: dict[str, Any], detail: str) -> FeedResult[str]:
        try:
            response = self._get(_CSV_PATH, params)
        except httpx.HTTPError as e:
            logger.warning("Savant CSV fetch failed for %s: %s", detail, e)
            return Err(FeedFetchError(message=str(e), source=self.source_type, detail=detail))
        text = strip_bom(response.text)
        if "pitch_type" not in text:
            logger.info("Savant returned no pitch rows for %s", detail)
            return Ok("")
        return Ok(text)

    def pitcher_day_csv(self, player_id: int, day: datetime.date) -> FeedResult[str]:
        """Pitch-level CSV for one pitcher on one date.

        Savant's date filters are exclusive, so the window is widened by a day
        on each side.
        """
        params = {
            "all": "true",
            "type": "details",
            "player_id": player_id,
            "player_type": "pitcher",
            "game_date_gt": (day - datetime.timedelta(days=1)).isoformat(),
            "game_date_lt": (day + datetime.timedelta(days=1)).isoformat(),
            "hfSea": f"{day.year}|",
            "min_pitches": 0,
            "min_results": 0,
        }
        return self._fetch_csv(params, f"pitcher {player_id} on {day.isoformat()}")

    def pitcher_season_csv(self, player_id: int, season: int) -> FeedResult[str]:
        params = {
            "all": "true",
            "type": "details",
            "player_id": player_id,
            "player_type": "pitcher",
            "season": season,
        }
        return self._fetch_csv(params, f"pitcher {player_id} season {season}")

    def batter_season_csv(self, player_id: int, season: int) -> FeedResult[str]:
        params = {
            "all": "true",
            "type": "details",
            "hfGT": "R|",
            "hfSea": f"{season}|",
            "player_type": "batter",
            "batters_lookup[]": player_id,
            "min_pitches": 0,
            "min_results": 0,
            "min_pas": 0,
        }
        return self._fetch_csv(params, f"batter {player_id} season {season}")

    def game_feed(self, game_pk: int) -> FeedResult[dict[str, Any]]:
        detail = f"game {game_pk}"
        try:
            response = self._get(_GAME_FEED_PATH, {"game_pk": game_pk})
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning("Savant game feed fetch failed for %s: %s", detail, e)
            return Err(FeedFetchError(message=str(e), source=self.source_type, detail=detail))
        except ValueError as e:
            logger.warning("Savant game feed for %s was not JSON: %s", detail, e)
            return Err(FeedFetchError(message=str(e), source=self.source_type, detail=detail))
        if not isinstance(payload, dict):
            return Err(FeedFetchError(message="unexpected game feed shape", source=self.source_type, detail=detail))
        return Ok(payload)
