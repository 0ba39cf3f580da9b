# seed_scout/crawler/politeness.py
"""
Randomized pre-request delay (base + jitter) applied before outbound requests.
"""
from __future__ import annotations

import asyncio
import random
from collections import deque
from typing import Awaitable, Callable, Deque, Optional

SleepFn = Callable[[float], Awaitable[None]]


class PolitenessClock:
    """Suspends the caller for ``base + uniform(0, jitter)`` seconds.

    ``sleep`` and ``rng`` are injectable so tests can observe the delays
    without waiting on the wall clock. The most recent ``history_size`` delays
    are kept in :attr:`history`; :attr:`waits` counts every wait.
    """

    def __init__(
        self,
        base: float = 1.5,
        jitter: float = 1.5,
        *,
        sleep: SleepFn = asyncio.sleep,
        rng: Optional[random.Random] = None,
        history_size: int = 100,
    ) -> None:
        if base < 0 or jitter < 0:
            raise ValueError("base and jitter must be >= 0")
        self.base = base
        self.jitter = jitter
        self._sleep = sleep
        self._rng = rng or random.Random()
        self.history: Deque[float] = deque(maxlen=history_size)
        self.waits = 0

    def next_delay(self, base: Optional[float] = None, jitter: Optional[float] = None) -> float:
        base = self.base if base is None else base
        jitter = self.jitter if jitter is None else jitter
        return base + self._rng.uniform(0, jitter)

    async def wait(self, base: Optional[float] = None, jitter: Optional[float] = None) -> float:
        """Sleep for one randomized delay and return its length in seconds."""
        delay = self.next_delay(base, jitter)
        self.history.append(delay)
        self.waits += 1
        await self._sleep(delay)
        return delay
