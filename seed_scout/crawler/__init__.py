# File: seed_scout/crawler/__init__.py
"""seed_scout.crawler: HTTP access, politeness and robots.txt handling."""

from .fetcher import Fetcher, build_headers, open_session
from .models import DiscoveryResult, FetchResult, Strategy
from .politeness import PolitenessClock
from .robots import RobotsRuleSet, fetch_disallowed_paths, is_disallowed, parse_disallowed_paths

__all__ = [
    "Fetcher",
    "build_headers",
    "open_session",
    "DiscoveryResult",
    "FetchResult",
    "Strategy",
    "PolitenessClock",
    "RobotsRuleSet",
    "fetch_disallowed_paths",
    "is_disallowed",
    "parse_disallowed_paths",
]
