"""Unit tests for ff_advisor/utils/rate_limiter.py and ff_advisor/utils/cache.py."""

import asyncio

import pytest

from ff_advisor.utils.cache import TimedCache
from ff_advisor.utils.rate_limiter import MinIntervalScheduler


class FakeClock:
    """Manually advanced clock whose sleep moves time forward."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestMinIntervalScheduler:
    """Test request spacing."""

    @pytest.mark.asyncio
    async def test_first_slot_is_immediate(self):
        clock = FakeClock()
        scheduler = MinIntervalScheduler(2.0, clock=clock, sleep=clock.sleep)
        assert await scheduler.acquire() == 0.0
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_back_to_back_slots_wait(self):
        """Test the second slot waits out the remaining interval."""
        clock = FakeClock()
        scheduler = MinIntervalScheduler(2.0, clock=clock, sleep=clock.sleep)

        await scheduler.acquire()
        clock.now += 0.5
        waited = await scheduler.acquire()

        assert waited == pytest.approx(1.5)
        assert clock.sleeps == [pytest.approx(1.5)]

    @pytest.mark.asyncio
    async def test_no_wait_after_interval_elapsed(self):
        clock = FakeClock()
        scheduler = MinIntervalScheduler(2.0, clock=clock, sleep=clock.sleep)

        await scheduler.acquire()
        clock.now += 5
        assert await scheduler.acquire() == 0.0

    @pytest.mark.asyncio
    async def test_slot_starts_are_spaced(self):
        """Test consecutive slot starts are at least the interval apart."""
        clock = FakeClock()
        scheduler = MinIntervalScheduler(2.0, clock=clock, sleep=clock.sleep)
        starts = []

        async def call(i):
            starts.append(clock())
            return i

        results = [await scheduler.run(call, i) for i in range(4)]

        assert results == [0, 1, 2, 3]
        gaps = [b - a for a, b in zip(starts, starts[1:])]
        assert all(gap >= 2.0 for gap in gaps)
        assert scheduler.get_status() == {
            "min_interval": 2.0,
            "slots_granted": 4,
            "total_wait_seconds": 6.0,
        }

    @pytest.mark.asyncio
    async def test_concurrent_callers_are_serialized(self):
        """Test gathered callers still get spaced slots."""
        clock = FakeClock()
        scheduler = MinIntervalScheduler(1.0, clock=clock, sleep=clock.sleep)

        waits = await asyncio.gather(*(scheduler.acquire() for _ in range(3)))

        assert sorted(waits) == [0.0, 1.0, 1.0]
        assert clock.now == pytest.approx(1002.0)

    @pytest.mark.asyncio
    async def test_reset(self):
        clock = FakeClock()
        scheduler = MinIntervalScheduler(2.0, clock=clock, sleep=clock.sleep)
        await scheduler.acquire()
        scheduler.reset()
        assert await scheduler.acquire() == 0.0

    def test_negative_interval_rejected(self):
        with pytest.raises(ValueError):
            MinIntervalScheduler(-1)


class TestTimedCache:
    """Test the single-value TTL cache."""

    def test_empty(self):
        cache = TimedCache(60, clock=FakeClock())
        assert cache.get() == (None, False)
        assert cache.age is None

    def test_fresh_then_stale(self):
        """Test freshness flips once age reaches the TTL."""
        clock = FakeClock()
        cache = TimedCache(60, clock=clock)
        cache.set({"a": 1})

        clock.now += 59
        assert cache.get() == ({"a": 1}, True)

        clock.now += 1
        data, fresh = cache.get()
        assert data == {"a": 1}
        assert fresh is False
        assert cache.age == pytest.approx(60)

    def test_set_resets_age(self):
        clock = FakeClock()
        cache = TimedCache(10, clock=clock)
        cache.set("old")
        clock.now += 30
        cache.set("new")
        assert cache.get() == ("new", True)

    def test_invalidate(self):
        cache = TimedCache(10, clock=FakeClock())
        cache.set("x")
        cache.invalidate()
        assert cache.get() == (None, False)
