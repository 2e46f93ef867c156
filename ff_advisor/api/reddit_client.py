"""
Reddit JSON API client scoped to one community.
Reads only; no OAuth, but Reddit requires a descriptive User-Agent.
"""

from typing import Any, Dict, List, Optional

import aiohttp

from ..parsers.reddit_parsers import parse_comment_listing, parse_listing
from ..utils.constants import WDIS_QUERY
from .errors import RedditAPIError
from .http import JSONClient

REDDIT_BASE = "https://www.reddit.com"
DEFAULT_USER_AGENT = "FantasyFootballAnalyzer/1.0"

TIME_WINDOWS = ("hour", "day", "week", "month", "year", "all")


class RedditClient(JSONClient):
    """Fetches posts and comment threads from a single subreddit."""

    error_class = RedditAPIError

    def __init__(
        self,
        subreddit: str = "fantasyfootball",
        base_url: str = REDDIT_BASE,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        super().__init__(
            base_url,
            timeout_seconds=timeout_seconds,
            headers={"User-Agent": user_agent},
            session=session,
        )
        self.subreddit = subreddit

    def _endpoint(self, path: str) -> str:
        return f"r/{self.subreddit}/{path}"

    async def get_hot_posts(self, limit: int = 25) -> List[Dict[str, Any]]:
        data = await self._make_request(self._endpoint("hot.json"), params={"limit": limit})
        return parse_listing(data, self.base_url)

    async def get_top_posts(self, time_window: str = "day", limit: int = 25) -> List[Dict[str, Any]]:
        if time_window not in TIME_WINDOWS:
            raise ValueError(f"time_window must be one of {TIME_WINDOWS}, got {time_window!r}")
        data = await self._make_request(
            self._endpoint("top.json"), params={"t": time_window, "limit": limit}
        )
        return parse_listing(data, self.base_url)

    async def search(
        self, query: str, limit: int = 25, sort: str = "relevance", time_window: str = "week"
    ) -> List[Dict[str, Any]]:
        """Keyword search restricted to the subreddit."""
        data = await self._make_request(
            self._endpoint("search.json"),
            params={
                "q": query,
                "restrict_sr": 1,
                "limit": limit,
                "sort": sort,
                "t": time_window,
            },
        )
        return parse_listing(data, self.base_url)

    async def get_wdis_threads(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Who Do I Start (WDIS) index threads from the past week."""
        return await self.search(WDIS_QUERY, limit=limit, sort="new")

    async def get_post_comments(self, post_id: str, limit: int = 50) -> List[Dict[str, Any]]:
        """Flattened comment tree for one post."""
        data = await self._make_request(
            self._endpoint(f"comments/{post_id}.json"), params={"limit": limit}
        )
        # Reddit returns [post listing, comment listing]
        if not isinstance(data, list) or len(data) < 2:
            return []
        return parse_comment_listing(data[1])
