"""Single-value cache invalidated purely by wall-clock age."""

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    data: T
    timestamp: float

    def age(self, now: float) -> float:
        return now - self.timestamp


class TimedCache(Generic[T]):
    """Holds one value together with the time it was stored.

    ``get()`` hands back stale data too, flagged as not fresh, so the owner
    decides whether to refetch.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: Optional[CacheEntry[T]] = None

    def get(self) -> Tuple[Optional[T], bool]:
        """Return ``(data, is_fresh)``; ``(None, False)`` when empty."""
        if self._entry is None:
            return None, False
        return self._entry.data, self._entry.age(self._clock()) < self.ttl_seconds

    def set(self, data: T) -> None:
        self._entry = CacheEntry(data=data, timestamp=self._clock())

    def invalidate(self) -> None:
        self._entry = None

    @property
    def age(self) -> Optional[float]:
        """Seconds since the value was stored, or None when empty."""
        if self._entry is None:
            return None
        return self._entry.age(self._clock())
