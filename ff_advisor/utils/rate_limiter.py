"""
Minimum-interval scheduler for rate-limited upstream calls.

Reddit's public JSON endpoints have an implicit rate limit, so sentiment
lookups are issued one at a time with a fixed gap between them.
"""

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, Optional

from loguru import logger


class MinIntervalScheduler:
    """Serialize callers so consecutive slots start at least ``min_interval`` apart."""

    def __init__(
        self,
        min_interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Args:
            min_interval: Minimum seconds between the start of two slots
            clock: Monotonic clock, injectable for tests
            sleep: Async sleep function, injectable for tests
        """
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_slot: Optional[float] = None
        self._lock = asyncio.Lock()
        self.total_wait = 0.0
        self.slots_granted = 0

    async def acquire(self) -> float:
        """Wait until the next slot is available. Returns the seconds waited."""
        async with self._lock:
            waited = 0.0
            now = self._clock()
            if self._last_slot is not None:
                wait_time = (self._last_slot + self.min_interval) - now
                if wait_time > 0:
                    logger.debug(f"Rate limit: waiting {wait_time:.2f}s before next request")
                    await self._sleep(wait_time)
                    waited = wait_time
                    now = self._clock()

            self._last_slot = now
            self.total_wait += waited
            self.slots_granted += 1
            return waited

    async def run(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """Acquire a slot, then await ``func(*args, **kwargs)``."""
        await self.acquire()
        return await func(*args, **kwargs)

    def reset(self) -> None:
        """Forget the previous slot so the next acquire is immediate."""
        self._last_slot = None

    def get_status(self) -> Dict[str, Any]:
        """Get current scheduler status."""
        return {
            "min_interval": self.min_interval,
            "slots_granted": self.slots_granted,
            "total_wait_seconds": round(self.total_wait, 3),
        }
