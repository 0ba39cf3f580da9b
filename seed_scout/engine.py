# File: seed_scout/engine.py
"""seed_scout.engine: orchestration of per-vendor discovery and the batch run."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Type

from aiohttp import ClientSession

from seed_scout.config import DiscoveryConfig
from seed_scout.crawler.fetcher import Fetcher, open_session
from seed_scout.crawler.models import DiscoveryResult
from seed_scout.crawler.politeness import PolitenessClock
from seed_scout.crawler.robots import fetch_disallowed_paths
from seed_scout.logger import logger
from seed_scout.report.store import ResultStore
from seed_scout.strategies import DEFAULT_STRATEGIES, DiscoveryStrategy

__all__ = ["Engine", "discover_vendor"]

FetcherFactory = Callable[[ClientSession, DiscoveryConfig, str], Fetcher]


async def discover_vendor(
    vendor: str,
    config: DiscoveryConfig,
    fetcher: Fetcher,
    clock: PolitenessClock,
    strategies: Sequence[Type[DiscoveryStrategy]] = DEFAULT_STRATEGIES,
) -> DiscoveryResult:
    """Run robots check, then each strategy in order until one yields URLs.

    Strategies run one after another; a strategy returning None (or an
    empty list) hands over to the next one. The winning URL list is filtered
    against the vendor's robots.txt rules and deduplicated.
    """
    logger.info("%s", vendor)
    rules = await fetch_disallowed_paths(fetcher, config.base_url(vendor))
    if rules:
        logger.info("  [robots.txt] %d disallowed paths", len(rules))

    for strategy_cls in strategies:
        strategy = strategy_cls(vendor, config, fetcher, clock)
        urls = await strategy.discover()
        if not urls:
            continue

        allowed, dropped = rules.filter(urls)
        if dropped:
            logger.info("  [robots.txt] filtered %d disallowed URLs", dropped)
        result = DiscoveryResult.from_urls(allowed, strategy.name)
        logger.info("  %d product URLs via %s", result.discovered, result.strategy.value)
        return result

    logger.warning("  no product URLs found for %s", vendor)
    return DiscoveryResult.none()


class Engine:
    """Facade for the CLI and tests: runs discovery vendor by vendor and updates the store."""

    def __init__(
        self,
        config: DiscoveryConfig,
        *,
        clock: Optional[PolitenessClock] = None,
        strategies: Sequence[Type[DiscoveryStrategy]] = DEFAULT_STRATEGIES,
        fetcher_factory: FetcherFactory = Fetcher,
    ) -> None:
        self.config = config
        self.clock = clock or PolitenessClock(config.delay_base, config.delay_jitter)
        self.strategies = strategies
        self.fetcher_factory = fetcher_factory

    async def discover(self, session: ClientSession, vendor: str) -> DiscoveryResult:
        """Discovery for one vendor; unexpected failures become an ``error`` result."""
        fetcher = self.fetcher_factory(session, self.config, vendor)
        try:
            return await discover_vendor(vendor, self.config, fetcher, self.clock, self.strategies)
        except Exception as exc:
            logger.exception("  error for %s: %s", vendor, exc)
            return DiscoveryResult.error()

    async def run(
        self,
        vendors: Iterable[str],
        store: Optional[ResultStore] = None,
        session: Optional[ClientSession] = None,
    ) -> Dict[str, DiscoveryResult]:
        """Process *vendors* strictly one at a time.

        When a *store* is given, each vendor's result is merged in and the
        store saved as soon as that vendor completes.
        """
        vendor_list: List[str] = list(vendors)
        logger.info("Discovering product URLs for %d vendor(s)...", len(vendor_list))
        if session is None:
            async with open_session() as own_session:
                return await self._run(vendor_list, store, own_session)
        return await self._run(vendor_list, store, session)

    async def _run(
        self, vendors: List[str], store: Optional[ResultStore], session: ClientSession
    ) -> Dict[str, DiscoveryResult]:
        results: Dict[str, DiscoveryResult] = {}
        for vendor in vendors:
            result = await self.discover(session, vendor)
            results[vendor] = result
            if store is not None:
                store.merge(vendor, result)
                store.save()
        return results
