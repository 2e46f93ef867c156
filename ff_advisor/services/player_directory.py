"""Cached access to the full Sleeper player catalog."""

import time
from typing import Callable, Dict, Optional

from loguru import logger

from ..api.sleeper_client import SleeperClient
from ..models.player import Player
from ..parsers.sleeper_parsers import parse_player_directory
from ..utils.cache import TimedCache

DEFAULT_DIRECTORY_TTL = 3600  # 1 hour


class RemotePlayerDirectory:
    """Fetches the player catalog and keeps it for ``ttl_seconds``.

    The cache is owned by this object and expires by wall-clock age only.
    """

    def __init__(
        self,
        client: SleeperClient,
        ttl_seconds: float = DEFAULT_DIRECTORY_TTL,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.cache: TimedCache[Dict[str, Player]] = TimedCache(ttl_seconds, clock=clock)

    async def fetch_player_directory(self) -> Dict[str, Player]:
        """Return the directory, refetching wholesale when the cache is stale."""
        data, is_fresh = self.cache.get()
        if data is not None and is_fresh:
            logger.debug(f"Using cached player directory ({len(data)} players)")
            return data

        logger.info("Fetching NFL player directory from Sleeper")
        raw = await self.client.get_all_players()
        directory = parse_player_directory(raw)
        self.cache.set(directory)
        logger.info(f"Loaded {len(directory)} players")
        return directory

    async def get_player(self, player_id: str) -> Optional[Player]:
        """Lookup by ID; None for unknown players."""
        directory = await self.fetch_player_directory()
        return directory.get(player_id)

    def invalidate(self) -> None:
        self.cache.invalidate()
