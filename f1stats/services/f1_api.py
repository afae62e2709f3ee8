"""
Client for the public F1 REST API (https://f1api.dev)

Thin wrapper returning the upstream JSON; models.py turns it into view
models. Core endpoints raise F1ApiError on failure, while the "nice to have"
ones (historic championships, teams, results) fall back to empty values the
way the site has always degraded.
"""

import logging
from typing import Any, List, Optional

import requests

from f1stats.cache_layer import CACHE_KEYS, CACHE_TTL, CacheLayer, cache_key_for
from f1stats.errors import F1ApiError

logger = logging.getLogger(__name__)

F1_API_BASE_URL = "https://f1api.dev/api"


class F1ApiClient:
    """F1 API client with optional response caching"""

    def __init__(self, base_url: str = F1_API_BASE_URL, timeout: float = 10,
                 cache: Optional[CacheLayer] = None, user_agent: str = "F1Stats/1.0",
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache = cache
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": user_agent,
        })

    # ------------------------------------------------------------------
    # plumbing
    # ------------------------------------------------------------------
    def _get_json(self, path: str, cache_name: Optional[str] = None, *key_args) -> Any:
        cache_key = None
        if self.cache is not None and cache_name:
            cache_key = cache_key_for(CACHE_KEYS[cache_name], *key_args)
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise F1ApiError(f"API call failed: {e}") from e

        if r.status_code != 200:
            raise F1ApiError(f"API call failed: {r.status_code}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise F1ApiError(f"Invalid JSON from {url}") from e
        if not isinstance(data, dict):
            raise F1ApiError(f"Unexpected payload from {url}")

        if cache_key is not None:
            self.cache.set(cache_key, data, ttl_seconds=CACHE_TTL[cache_name])
        return data

    # ------------------------------------------------------------------
    # current season
    # ------------------------------------------------------------------
    def get_driver_championship(self, limit: Optional[int] = 10) -> List[dict]:
        try:
            data = self._get_json("current/drivers-championship", "DRIVER_STANDINGS")
        except F1ApiError as e:
            logger.error(f"Error fetching driver championship: {e}")
            raise
        rows = data.get("drivers_championship") or []
        return rows[:limit] if limit is not None else rows

    def get_constructor_championship(self) -> List[dict]:
        try:
            data = self._get_json("current/constructors-championship", "CONSTRUCTOR_STANDINGS")
        except F1ApiError as e:
            logger.error(f"Error fetching constructor championship: {e}")
            raise
        return data.get("constructors_championship") or []

    def get_next_race(self) -> dict:
        try:
            return self._get_json("current/next", "NEXT_RACE")
        except F1ApiError as e:
            logger.error(f"Error fetching next race: {e}")
            raise

    def get_all_drivers(self, limit: Optional[int] = 20) -> List[dict]:
        try:
            data = self._get_json("current/drivers", "DRIVERS")
        except F1ApiError as e:
            logger.error(f"Error fetching all drivers: {e}")
            raise
        rows = data.get("drivers") or []
        return rows[:limit] if limit is not None else rows

    def get_current_season(self) -> dict:
        try:
            return self._get_json("current", "CURRENT_SEASON") or {}
        except F1ApiError as e:
            logger.error(f"Error fetching current season: {e}")
            raise

    def get_circuits(self) -> List[dict]:
        try:
            data = self._get_json("circuits", "CIRCUITS")
        except F1ApiError as e:
            logger.error(f"Error fetching circuits: {e}")
            raise
        return data.get("circuits") or []

    # ------------------------------------------------------------------
    # history
    # ------------------------------------------------------------------
    def get_seasons(self) -> List[dict]:
        try:
            data = self._get_json("seasons", "SEASONS")
        except F1ApiError as e:
            logger.error(f"Error fetching seasons: {e}")
            raise
        return data.get("championships") or []

    def get_driver_championship_by_year(self, year: int) -> dict:
        """Some years have no data upstream; those come back empty"""
        try:
            return self._get_json(f"{year}/drivers-championship", "DRIVER_STANDINGS", year)
        except F1ApiError as e:
            if e.status_code != 404:
                logger.error(f"Error fetching driver championship for {year}: {e}")
            return {"drivers_championship": []}

    def get_constructor_championship_by_year(self, year: int) -> dict:
        try:
            return self._get_json(f"{year}/constructors-championship", "CONSTRUCTOR_STANDINGS", year)
        except F1ApiError as e:
            if e.status_code != 404:
                logger.error(f"Error fetching constructor championship for {year}: {e}")
            return {"constructors_championship": []}

    # ------------------------------------------------------------------
    # teams and results
    # ------------------------------------------------------------------
    def get_teams(self) -> List[dict]:
        try:
            data = self._get_json("current/teams", "TEAMS")
        except F1ApiError as e:
            logger.error(f"Error fetching teams: {e}")
            return []
        return data.get("teams") or []

    def get_team_drivers(self, team_id: str) -> List[dict]:
        try:
            data = self._get_json(f"current/teams/{team_id}/drivers", "TEAM_DRIVERS", team_id)
        except F1ApiError as e:
            logger.error(f"Error fetching drivers of team {team_id}: {e}")
            return []
        return data.get("drivers") or []

    def get_results(self, year: int, round_number: int, session: str) -> Optional[dict]:
        try:
            return self._get_json(f"{year}/{round_number}/{session}", "RESULTS", year, round_number, session)
        except F1ApiError as e:
            logger.error(f"Error fetching {session} results for {year} round {round_number}: {e}")
            return None
