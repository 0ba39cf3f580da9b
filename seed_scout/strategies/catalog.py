# File: seed_scout/strategies/catalog.py
"""seed_scout.strategies.catalog: fallback discovery by reading catalog landing pages."""

from __future__ import annotations

from typing import List, Optional

from seed_scout.crawler.models import Strategy
from seed_scout.logger import logger
from seed_scout.parser.html_parser import extract_links
from seed_scout.strategies.base import DiscoveryStrategy, UrlAccumulator


class CatalogCrawlStrategy(DiscoveryStrategy):
    """Collects product links from catalog paths and their ``?page=N`` continuations."""

    name = Strategy.CATALOG_CRAWL

    async def product_links(self, url: str) -> Optional[List[str]]:
        """Classified links of the page at *url*; None if the request failed."""
        res = await self.fetcher.fetch(url, timeout=self.config.catalog_timeout)
        if not res.ok:
            return None
        return self.classify(extract_links(res.text, url))

    async def paginate(self, catalog_url: str, acc: UrlAccumulator) -> UrlAccumulator:
        for page_no in range(2, self.config.catalog_max_pages + 1):
            await self.clock.wait()
            links = await self.product_links(f"{catalog_url}?page={page_no}")
            if links is None:
                break
            added = acc.add_all(links)
            if not added:
                break
            logger.info("    page %d: %d links (%d total)", page_no, len(links), len(acc))
        return acc

    async def discover(self) -> Optional[List[str]]:
        acc = UrlAccumulator()

        for path in self.config.catalog_paths:
            catalog_url = f"{self.base_url}{path}"
            await self.clock.wait()
            links = await self.product_links(catalog_url)
            if not links:
                continue

            acc.add_all(links)
            logger.info("  [catalog] %s: %d product links", path, len(links))
            acc = await self.paginate(catalog_url, acc)

        logger.info("  [catalog] %d product URLs total", len(acc))
        return acc.urls or None
