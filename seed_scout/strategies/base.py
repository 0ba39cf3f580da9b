# File: seed_scout/strategies/base.py
"""seed_scout.strategies.base: common plumbing for the discovery strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from seed_scout.config import DiscoveryConfig
from seed_scout.crawler.fetcher import Fetcher
from seed_scout.crawler.models import Strategy
from seed_scout.crawler.politeness import PolitenessClock
from seed_scout.utils import is_product_url, normalize_url


@dataclass(slots=True)
class UrlAccumulator:
    """Ordered, deduplicated set of normalized product URLs built up by one strategy."""

    _seen: Dict[str, None] = field(default_factory=dict)

    def add_all(self, urls: Iterable[str]) -> int:
        """Add *urls* in order; return how many were not seen before."""
        before = len(self._seen)
        for url in urls:
            self._seen.setdefault(url, None)
        return len(self._seen) - before

    @property
    def urls(self) -> List[str]:
        return list(self._seen)

    def __len__(self) -> int:
        return len(self._seen)


class DiscoveryStrategy(ABC):
    """One way of finding product URLs on a vendor site.

    :meth:`discover` returns the product URLs it found in discovery order,
    or None when the strategy does not apply to the vendor or found nothing.
    Returning None is how the orchestrator knows to fall back to the next
    strategy; it is never used for errors that should stop the run.
    """

    name: Strategy

    def __init__(
        self,
        vendor: str,
        config: DiscoveryConfig,
        fetcher: Fetcher,
        clock: PolitenessClock,
    ) -> None:
        self.vendor = vendor
        self.config = config
        self.fetcher = fetcher
        self.clock = clock
        self.base_url = config.base_url(vendor)

    @abstractmethod
    async def discover(self) -> Optional[List[str]]:
        raise NotImplementedError

    def classify(self, candidates: Iterable[str]) -> List[str]:
        """Normalized product URLs among *candidates*, first occurrence order.

        Classification runs on the normalized form, so every returned URL
        passes :func:`is_product_url` as it is stored.
        """
        normalized = (normalize_url(url) for url in candidates)
        accepted = (
            url
            for url in normalized
            if is_product_url(url, self.vendor, self.config.extra_junk_patterns)
        )
        return list(dict.fromkeys(accepted))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} vendor={self.vendor}>"
