# seed_scout/crawler/models.py
"""
Data models for the SeedScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Tuple


class Strategy(str, Enum):
    """Label of the technique that produced a vendor's URL list."""

    STRUCTURED_FEED = "structured_feed"
    SITEMAP = "sitemap"
    CATALOG_CRAWL = "catalog_crawl"
    NONE = "none"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class FetchResult:
    """Outcome of one GET. ``status == 0`` means the request never completed."""

    url: str
    ok: bool
    status: int
    text: str = ""

    @classmethod
    def failed(cls, url: str) -> FetchResult:
        return cls(url=url, ok=False, status=0, text="")


@dataclass(slots=True, frozen=True)
class DiscoveryResult:
    """Final product URLs for one vendor and the strategy that found them."""

    urls: Tuple[str, ...] = field(default_factory=tuple)
    strategy: Strategy = Strategy.NONE

    @classmethod
    def from_urls(cls, urls: Iterable[str], strategy: Strategy) -> DiscoveryResult:
        return cls(urls=tuple(dict.fromkeys(urls)), strategy=strategy)

    @classmethod
    def none(cls) -> DiscoveryResult:
        return cls(urls=(), strategy=Strategy.NONE)

    @classmethod
    def error(cls) -> DiscoveryResult:
        return cls(urls=(), strategy=Strategy.ERROR)

    @property
    def discovered(self) -> int:
        return len(self.urls)

    def to_dict(self) -> Dict[str, Any]:
        """Shape persisted in the vendor result store."""
        return {
            "discovered": self.discovered,
            "urls": list(self.urls),
            "strategy": self.strategy.value,
        }
