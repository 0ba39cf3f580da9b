# File: seed_scout/strategies/__init__.py
"""seed_scout.strategies: the three product-URL discovery techniques, in priority order."""

from .base import DiscoveryStrategy, UrlAccumulator
from .catalog import CatalogCrawlStrategy
from .feed import StructuredFeedStrategy
from .sitemap import SitemapStrategy

DEFAULT_STRATEGIES = (StructuredFeedStrategy, SitemapStrategy, CatalogCrawlStrategy)

__all__ = [
    "DiscoveryStrategy",
    "UrlAccumulator",
    "StructuredFeedStrategy",
    "SitemapStrategy",
    "CatalogCrawlStrategy",
    "DEFAULT_STRATEGIES",
]
