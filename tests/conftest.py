# File: tests/conftest.py
from __future__ import annotations

from typing import Callable, Dict, List, Union

import pytest

from seed_scout.config import DiscoveryConfig
from seed_scout.crawler.models import FetchResult
from seed_scout.crawler.politeness import PolitenessClock
from seed_scout.logger import configure

Responder = Union[str, FetchResult, Callable[[str], Union[str, FetchResult]]]


class FakeFetcher:
    """Stands in for Fetcher: serves canned bodies by exact URL, 404 otherwise."""

    def __init__(self, config: DiscoveryConfig, responses: Dict[str, Responder] | None = None) -> None:
        self.config = config
        self.responses: Dict[str, Responder] = dict(responses or {})
        self.calls: List[str] = []
        self.timeouts: List[float] = []

    async def fetch(self, url: str, timeout: float) -> FetchResult:
        self.calls.append(url)
        self.timeouts.append(timeout)
        resp = self.responses.get(url)
        if resp is None:
            return FetchResult(url=url, ok=False, status=404, text="")
        if callable(resp):
            resp = resp(url)
        if isinstance(resp, str):
            return FetchResult(url=url, ok=True, status=200, text=resp)
        return resp


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind the project logger to the current stdout after each test."""
    yield
    configure(level="INFO")


@pytest.fixture()
def config() -> DiscoveryConfig:
    """Config with zero delays and the test vendors."""
    return DiscoveryConfig(
        vendors=["v.example", "x.example", "shopify-like.example"],
        delay_base=0,
        delay_jitter=0,
        retry_times=0,
    )


@pytest.fixture()
def clock() -> PolitenessClock:
    async def no_sleep(_delay: float) -> None:
        return None

    return PolitenessClock(0, 0, sleep=no_sleep)


@pytest.fixture()
def make_fetcher(config) -> Callable[..., FakeFetcher]:
    def _make(responses: Dict[str, Responder] | None = None) -> FakeFetcher:
        return FakeFetcher(config, responses)

    return _make
