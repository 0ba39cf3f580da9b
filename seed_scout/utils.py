# File: seed_scout/utils.py
"""seed_scout.utils: URL normalization, product-URL classification and small helpers.

The classifier is a denylist: any same-vendor URL with a non-empty path is a
product candidate unless its path matches one of :data:`JUNK_PATH_PATTERNS`.
The list is heuristic and vendor-specific; new vendors and site redesigns
are handled by extending it (or ``extra_junk_patterns`` in the config).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Collection, Iterable, List, Pattern, Sequence, Tuple
from urllib.parse import urlsplit, urlunsplit

from seed_scout.logger import logger

__all__: Sequence[str] = (
    "JUNK_PATH_PATTERNS",
    "normalize_url",
    "is_product_url",
    "strip_www",
    "remove_duplicates",
    "pick_user_agent",
)


def _rx(pattern: str) -> Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


JUNK_PATH_PATTERNS: Tuple[Pattern[str], ...] = tuple(
    _rx(p)
    for p in (
        # store plumbing and site sections
        r"/cart", r"/account", r"/blog", r"/pages/", r"/policies/",
        r"/gift[-_]?card", r"/merch", r"/apparel", r"/tool", r"/book",
        r"/workshop", r"/class", r"/event", r"/subscription",
        # media and feeds
        r"\.pdf$", r"\.jpg$", r"\.png$", r"\.xml$",
        # bare listing indexes
        r"/collections/?$", r"/products/?$",
        # articles, how-to and resources
        r"/resources/", r"/how-to[- ]", r"/growing-milkweed-from-seed",
        r"/gallery", r"/seed-swap", r"/ask-the-experts",
        r"/directory/",
        # editorial slugs published without a /blog/ prefix
        r"/the-seasonal-flower", r"/this-moment-", r"/pretty-in-pink",
        r"/super-green-love", r"/behind-the-scenes", r"/reasons-love", r"/bouquet-mania",
        # non-seed merchandise
        r"/liquid-hand-soap", r"/trucker-mesh-hat", r"/easy-net-tunnel",
        r"/mushroom-fruiting", r"/wholesale-display-stand",
        r"/botanical-teas-recipe-book", r"/pickled-pantry", r"/find-me-in-the-garden-apron",
        r"/grow-bags-lined", r"/broadfork", r"/digital-gift-card",
        r"/vegetable-garden-mix-mini",
        r"/shirt", r"/v-neck", r"/germination-tray", r"/earring", r"/gift-basket",
        r"/plant-marker", r"/fermented-vegetables", r"/cup-coffee-combo",
        r"/seed-box-gift-pack",
        r"/hanging-basket", r"/hose-nozzle",
    )
)


def strip_www(host: str) -> str:
    host = host.lower()
    return host[4:] if host.startswith("www.") else host


def normalize_url(url: str) -> str:
    """Canonical form used as the dedup key.

    Query and fragment are dropped, trailing slashes removed from any path
    longer than ``/`` and the whole URL lowercased. Never raises: input that
    is not an absolute URL is lowercased and loses one trailing slash.
    """
    raw = url.strip()
    try:
        parts = urlsplit(raw)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"not an absolute URL: {raw!r}")
        path = parts.path or "/"
        if len(path) > 1:
            path = path.rstrip("/") or "/"
        return urlunsplit((parts.scheme, parts.netloc, path, "", "")).lower()
    except ValueError:
        fallback = raw.lower()
        return fallback[:-1] if fallback.endswith("/") else fallback


@lru_cache(maxsize=32)
def _compile_extra(patterns: Tuple[str, ...]) -> Tuple[Pattern[str], ...]:
    return tuple(_rx(p) for p in patterns)


def is_product_url(url: str, vendor: str, extra_patterns: Iterable[str] = ()) -> bool:
    """Return True when *url* plausibly points at a product page of *vendor*."""
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return False
    if not host:
        return False
    if strip_www(vendor) not in strip_www(host):
        return False

    path = parts.path.lower()
    if path in ("", "/"):
        return False

    denylist = JUNK_PATH_PATTERNS + _compile_extra(tuple(extra_patterns))
    if any(rx.search(path) for rx in denylist):
        return False

    segments = [s for s in path.split("/") if s]
    return bool(segments)


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Drop duplicate URLs, keeping first-seen order."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique


def pick_user_agent(vendor: str, agents: Sequence[str]) -> str:
    """Deterministic agent string for *vendor* (32-bit rolling hash of the domain)."""
    if not agents:
        raise ValueError("user agent pool is empty")
    h = 0
    for ch in vendor:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return agents[abs(h) % len(agents)]
