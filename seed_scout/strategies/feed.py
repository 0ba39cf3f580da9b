# File: seed_scout/strategies/feed.py
"""seed_scout.strategies.feed: discovery through the vendor's paginated ``/products.json`` feed."""

from __future__ import annotations

from typing import List, Optional

from seed_scout.crawler.models import Strategy
from seed_scout.logger import logger
from seed_scout.parser.feed_parser import FeedPage, parse_feed_page
from seed_scout.strategies.base import DiscoveryStrategy, UrlAccumulator


class StructuredFeedStrategy(DiscoveryStrategy):
    """Walks ``/products.json`` page by page and turns handles into product URLs."""

    name = Strategy.STRUCTURED_FEED

    def feed_url(self, limit: int, page: int) -> str:
        return f"{self.base_url}/products.json?limit={limit}&page={page}"

    def product_url(self, handle: str) -> str:
        return f"{self.base_url}/products/{handle}"

    async def probe(self) -> bool:
        """True when the vendor answers the feed URL with a products array."""
        res = await self.fetcher.fetch(self.feed_url(1, 1), timeout=self.config.probe_timeout)
        return res.ok and parse_feed_page(res.text) is not None

    def collect(self, acc: UrlAccumulator, page: FeedPage) -> UrlAccumulator:
        acc.add_all(self.classify(self.product_url(h) for h in page.handles()))
        return acc

    async def discover(self) -> Optional[List[str]]:
        if not await self.probe():
            return None

        logger.info("  [feed] detected for %s, paginating...", self.vendor)
        page_size = self.config.feed_page_size
        acc = UrlAccumulator()

        for page_no in range(1, self.config.feed_max_pages + 1):
            if page_no > 1:
                await self.clock.wait()
            res = await self.fetcher.fetch(
                self.feed_url(page_size, page_no), timeout=self.config.feed_timeout
            )
            if not res.ok:
                break
            page = parse_feed_page(res.text)
            if page is None or not page.item_count:
                break

            acc = self.collect(acc, page)
            logger.info(
                "    page %d: %d products (%d total)", page_no, page.item_count, len(acc)
            )
            if page.skipped:
                logger.warning("    page %d: skipped %d malformed entries", page_no, page.skipped)
            if page.item_count < page_size:
                break
        else:
            logger.info(
                "    hit safety cap (%d pages) for %s", self.config.feed_max_pages, self.vendor
            )

        return acc.urls or None
