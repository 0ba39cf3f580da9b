# File: tests/test_politeness.py
import random

import pytest

from seed_scout.crawler.politeness import PolitenessClock


@pytest.mark.asyncio()
async def test_wait_sleeps_base_plus_jitter():
    slept = []

    async def fake_sleep(delay):
        slept.append(delay)

    clock = PolitenessClock(1.5, 1.5, sleep=fake_sleep, rng=random.Random(42))
    for _ in range(50):
        await clock.wait()

    assert len(slept) == 50 == clock.waits
    assert slept == list(clock.history)
    assert all(1.5 <= d <= 3.0 for d in slept)
    assert len(set(slept)) > 1


@pytest.mark.asyncio()
async def test_wait_overrides():
    slept = []

    async def fake_sleep(delay):
        slept.append(delay)

    clock = PolitenessClock(sleep=fake_sleep)
    delay = await clock.wait(0.25, 0)
    assert delay == slept[0] == 0.25


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        PolitenessClock(-1, 0)


@pytest.mark.asyncio()
async def test_history_is_bounded():
    async def fake_sleep(_delay):
        return None

    clock = PolitenessClock(0, 1, sleep=fake_sleep, rng=random.Random(7), history_size=10)
    delays = [await clock.wait() for _ in range(250)]

    assert clock.waits == 250
    assert len(clock.history) == 10
    assert list(clock.history) == delays[-10:]
