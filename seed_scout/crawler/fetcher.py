# seed_scout/crawler/fetcher.py
"""
Fetcher module: vendor-scoped GET requests with per-request timeout and
retry/backoff. Failures come back as a non-ok FetchResult, never as exceptions.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from seed_scout.config import DiscoveryConfig
from seed_scout.crawler.models import FetchResult
from seed_scout.logger import logger
from seed_scout.utils import pick_user_agent

ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "application/json;q=0.8,*/*;q=0.7"
)
ACCEPT_LANGUAGE = "en-US,en;q=0.9"
REFERER = "https://www.google.com/"

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)


def build_headers(vendor: str, agents: Sequence[str]) -> Dict[str, str]:
    """Browser-like headers; the agent string is fixed per vendor."""
    return {
        "User-Agent": pick_user_agent(vendor, agents),
        "Accept": ACCEPT,
        "Accept-Language": ACCEPT_LANGUAGE,
        "Referer": REFERER,
    }


@asynccontextmanager
async def open_session() -> AsyncIterator[ClientSession]:
    """Shared client session for a run; headers and timeouts are set per request."""
    async with ClientSession(raise_for_status=False) as session:
        yield session


class Fetcher:
    """Sends GET requests on behalf of one vendor."""

    def __init__(
        self,
        session: ClientSession,
        config: DiscoveryConfig,
        vendor: str,
        retry_status: Sequence[int] = RETRY_STATUS,
    ) -> None:
        self.session = session
        self.config = config
        self.vendor = vendor
        self.headers = build_headers(vendor, config.user_agents)
        self._retry_status = retry_status
        self.request_count = 0

    async def fetch(self, url: str, timeout: float) -> FetchResult:
        """
        GET *url* bounded by *timeout* seconds.

        Timeouts, connection errors and undecodable bodies yield
        ``FetchResult.failed``; 429/5xx are retried ``retry_times`` times.
        """
        attempts = 0
        while True:
            self.request_count += 1
            try:
                async with self.session.get(
                    url,
                    headers=self.headers,
                    timeout=ClientTimeout(total=timeout),
                    allow_redirects=True,
                ) as resp:
                    if resp.status in self._retry_status:
                        raise ClientError(f"Retryable status {resp.status}")
                    text = await resp.text(errors="replace")
                    return FetchResult(url=url, ok=200 <= resp.status < 300, status=resp.status, text=text)
            except asyncio.TimeoutError:
                # no retry on timeout
                logger.debug("Timeout after %.1fs: %s", timeout, url)
                return FetchResult.failed(url)
            except (ClientError, UnicodeDecodeError, LookupError) as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    logger.debug("Request failed %s: %s", url, exc)
                    return FetchResult.failed(url)
                backoff = min(2**attempts, 60)
                logger.debug(
                    "Retry %d/%d for %s after %ds", attempts, self.config.retry_times, url, backoff
                )
                await asyncio.sleep(backoff)
