# seed_scout/crawler/robots.py
"""
robots.txt gate: Disallow prefixes of the wildcard user-agent block.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple
from urllib.parse import urlsplit

from seed_scout.crawler.fetcher import Fetcher
from seed_scout.logger import logger


def parse_disallowed_paths(text: str) -> List[str]:
    """Collect non-empty ``Disallow`` values from ``User-agent: *`` blocks.

    Lines are lowercased before matching; other agents' blocks and unknown
    directives are ignored.
    """
    disallowed: List[str] = []
    in_wildcard = False
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip().lower()
        if line.startswith("user-agent:"):
            in_wildcard = line[len("user-agent:"):].strip() == "*"
        elif in_wildcard and line.startswith("disallow:"):
            path = line[len("disallow:"):].strip()
            if path:
                disallowed.append(path)
    return disallowed


def is_disallowed(url: str, rules: Sequence[str]) -> bool:
    """True iff the lowercased path of *url* starts with any rule prefix."""
    if not rules:
        return False
    try:
        path = urlsplit(url).path.lower()
    except ValueError:
        return False
    return any(path.startswith(rule.lower()) for rule in rules)


@dataclass(slots=True, frozen=True)
class RobotsRuleSet:
    """Disallowed path prefixes for one vendor, built once per run."""

    disallowed: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.disallowed)

    def is_disallowed(self, url: str) -> bool:
        return is_disallowed(url, self.disallowed)

    def filter(self, urls: Iterable[str]) -> Tuple[List[str], int]:
        """Split *urls* into the allowed list and the number dropped."""
        allowed: List[str] = []
        dropped = 0
        for url in urls:
            if self.is_disallowed(url):
                dropped += 1
            else:
                allowed.append(url)
        return allowed, dropped


async def fetch_disallowed_paths(fetcher: Fetcher, base_url: str) -> RobotsRuleSet:
    """Fetch ``{base_url}/robots.txt``; any failure yields an empty rule set."""
    robots_url = f"{base_url}/robots.txt"
    res = await fetcher.fetch(robots_url, timeout=fetcher.config.robots_timeout)
    if not res.ok:
        logger.debug("robots.txt %s -> HTTP %s, no rules applied", robots_url, res.status)
        return RobotsRuleSet()
    return RobotsRuleSet(tuple(parse_disallowed_paths(res.text)))
