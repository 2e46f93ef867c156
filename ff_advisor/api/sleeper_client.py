"""
Sleeper API client for fantasy football data.
No authentication required - completely free and open API.
"""

from typing import Any, Dict, List, Optional

import aiohttp

from .errors import SleeperAPIError
from .http import JSONClient

SLEEPER_API_BASE = "https://api.sleeper.app/v1"

TRENDING_KINDS = ("add", "drop")


class SleeperClient(JSONClient):
    """Thin typed client for Sleeper's read-only REST API.

    Methods return the decoded JSON untouched; parsing into models happens in
    ``ff_advisor.parsers``.
    """

    error_class = SleeperAPIError

    def __init__(
        self,
        base_url: str = SLEEPER_API_BASE,
        timeout_seconds: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        super().__init__(base_url, timeout_seconds=timeout_seconds, session=session)

    async def get_user(self, username_or_id: str) -> Dict[str, Any]:
        """User object with user_id, username, display_name."""
        return await self._make_request(f"user/{username_or_id}")

    async def get_user_leagues(self, user_id: str, season: str) -> List[Dict[str, Any]]:
        return await self._make_request(f"user/{user_id}/leagues/nfl/{season}")

    async def get_league(self, league_id: str) -> Dict[str, Any]:
        """League object with settings, scoring_settings and roster_positions."""
        return await self._make_request(f"league/{league_id}")

    async def get_league_rosters(self, league_id: str) -> List[Dict[str, Any]]:
        return await self._make_request(f"league/{league_id}/rosters")

    async def get_league_users(self, league_id: str) -> List[Dict[str, Any]]:
        return await self._make_request(f"league/{league_id}/users")

    async def get_matchups(self, league_id: str, week: int) -> List[Dict[str, Any]]:
        return await self._make_request(f"league/{league_id}/matchups/{week}")

    async def get_trending_players(
        self, kind: str = "add", lookback_hours: int = 24, limit: int = 25
    ) -> List[Dict[str, Any]]:
        """
        Get trending players being added or dropped.

        Args:
            kind: "add" for most added, "drop" for most dropped
            lookback_hours: Lookback period in hours
            limit: Number of results

        Returns:
            List of ``{"player_id": ..., "count": ...}`` ordered by count, descending
        """
        if kind not in TRENDING_KINDS:
            raise ValueError(f"kind must be one of {TRENDING_KINDS}, got {kind!r}")
        return await self._make_request(
            f"players/nfl/trending/{kind}",
            params={"lookback_hours": lookback_hours, "limit": limit},
        )

    async def get_all_players(self) -> Dict[str, Dict[str, Any]]:
        """All NFL players keyed by player_id. Large payload; cache it."""
        return await self._make_request("players/nfl")

    async def get_transactions(self, league_id: str, round_: int) -> List[Dict[str, Any]]:
        """Waivers, trades, adds and drops for one round (week)."""
        return await self._make_request(f"league/{league_id}/transactions/{round_}")
