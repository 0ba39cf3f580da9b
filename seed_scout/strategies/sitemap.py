# File: seed_scout/strategies/sitemap.py
"""seed_scout.strategies.sitemap: discovery through conventional sitemap locations."""

from __future__ import annotations

from typing import List, Optional

from seed_scout.crawler.models import Strategy
from seed_scout.logger import logger
from seed_scout.parser.sitemap_parser import SitemapLocEntry, extract_locs
from seed_scout.strategies.base import DiscoveryStrategy


class SitemapStrategy(DiscoveryStrategy):
    """Reads the first working sitemap (and its child sitemaps) and filters product URLs."""

    name = Strategy.SITEMAP

    async def fetch_locs(self, url: str) -> List[SitemapLocEntry]:
        res = await self.fetcher.fetch(url, timeout=self.config.sitemap_timeout)
        if not res.ok:
            return []
        return extract_locs(res.text)

    async def follow_children(self, children: List[SitemapLocEntry], candidates: List[str]) -> List[str]:
        for child in children[: self.config.max_child_sitemaps]:
            await self.clock.wait()
            candidates = candidates + [e.url for e in await self.fetch_locs(child.url)]
        return candidates

    async def discover(self) -> Optional[List[str]]:
        candidates: List[str] = []

        for path in self.config.sitemap_paths:
            await self.clock.wait()
            entries = await self.fetch_locs(f"{self.base_url}{path}")
            if not entries:
                continue

            children = [e for e in entries if e.is_sitemap]
            candidates = candidates + [e.url for e in entries if not e.is_sitemap]
            candidates = await self.follow_children(children, candidates)

            if candidates:
                logger.info("  [sitemap] %d raw URLs from %s", len(candidates), path)
                break

        if not candidates:
            return None

        urls = self.classify(candidates)
        logger.info("  [sitemap] %d product URLs after filtering", len(urls))
        return urls or None
