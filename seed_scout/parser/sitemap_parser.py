# File: seed_scout/parser/sitemap_parser.py
"""seed_scout.parser.sitemap_parser: extraction of ``<loc>`` entries from sitemaps and sitemap indexes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from lxml import etree

_LOC_RE = re.compile(r"<loc>\s*(https?://[^<]+?)\s*</loc>", re.IGNORECASE)


@dataclass(slots=True, frozen=True)
class SitemapLocEntry:
    """A single ``<loc>`` value."""

    url: str

    @property
    def is_sitemap(self) -> bool:
        """Entries ending in ``.xml`` point at child sitemaps."""
        return self.url.lower().endswith(".xml")


def _is_http(url: str) -> bool:
    return url.lower().startswith(("http://", "https://"))


def _scan_locs(xml_content: str) -> List[str]:
    return [m.group(1) for m in _LOC_RE.finditer(xml_content)]


def _parse_locs(xml_content: str) -> List[str]:
    parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False, no_network=True)
    root = etree.fromstring(xml_content.lstrip().encode("utf-8"), parser=parser)
    if root is None:
        raise ValueError("empty document")
    return [loc.text.strip() for loc in root.iterfind(".//{*}loc") if loc.text]


def extract_locs(xml_content: str) -> List[SitemapLocEntry]:
    """Return the absolute http(s) ``<loc>`` entries of a sitemap in document order.

    Vendor sitemaps vary a lot, so lxml runs in recover mode without any
    schema checks. A plain regex scan for ``<loc>...</loc>`` backs it up and
    wins whenever it finds more entries than the parsed tree.

    Example:
    ```python
    entries = extract_locs(response_text)
    children = [e.url for e in entries if e.is_sitemap]
    ```
    """
    if not xml_content or not xml_content.strip():
        return []
    try:
        urls = [u for u in _parse_locs(xml_content) if _is_http(u)]
    except (etree.XMLSyntaxError, ValueError):
        urls = []
    # a truncated document can leave lxml with fewer entries than the raw text holds
    scanned = _scan_locs(xml_content)
    if len(scanned) > len(urls):
        urls = scanned
    return [SitemapLocEntry(u) for u in urls]
