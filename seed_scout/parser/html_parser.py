# === FILE: seed_scout/parser/html_parser.py ===
"""HTML link extraction for the catalog crawl.

:func:`extract_links` is the only place that looks at markup. It accepts
arbitrary third-party HTML: every element carrying an ``href``
is considered, relative targets are resolved against the page URL, and
anything that cannot be resolved is skipped silently. Classification of the
resulting URLs happens elsewhere.
"""
from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

__all__: Sequence[str] = ("extract_links",)

_SKIP_SCHEMES = ("mailto:", "javascript:", "tel:", "data:")


def extract_links(html: str, page_url: str) -> list[str]:
    """Return absolute http(s) URLs of every ``href`` in *html*, in document order."""
    soup = BeautifulSoup(html, "html.parser")
    links: list[str] = []
    for tag in soup.find_all(href=True):
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        raw = href.strip()
        if not raw or raw.lower().startswith(_SKIP_SCHEMES):
            continue
        try:
            absolute = urljoin(page_url, raw)
            scheme = urlsplit(absolute).scheme
        except ValueError:
            continue
        if scheme in ("http", "https"):
            links.append(absolute)
    return links
