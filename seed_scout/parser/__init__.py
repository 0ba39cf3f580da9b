# File: seed_scout/parser/__init__.py
"""seed_scout.parser: boundary parsers for vendor payloads (JSON feeds, sitemaps, HTML)."""

from .feed_parser import FeedPage, FeedProduct, parse_feed_page
from .html_parser import extract_links
from .sitemap_parser import SitemapLocEntry, extract_locs

__all__ = [
    "FeedPage",
    "FeedProduct",
    "parse_feed_page",
    "extract_links",
    "SitemapLocEntry",
    "extract_locs",
]
