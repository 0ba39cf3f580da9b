# File: tests/test_fetcher.py
# Fetcher and full-engine tests against a local aiohttp server
from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web

from seed_scout.config import DEFAULT_USER_AGENTS, DiscoveryConfig
from seed_scout.crawler.fetcher import ACCEPT, ACCEPT_LANGUAGE, REFERER, Fetcher
from seed_scout.crawler.models import Strategy
from seed_scout.crawler.politeness import PolitenessClock
from seed_scout.engine import Engine
from seed_scout.report.store import ResultStore
from seed_scout.utils import pick_user_agent


# --------------------------------------------------------------------------- #
#                               Helper utilities                              #
# --------------------------------------------------------------------------- #


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def local_config(port: int, **overrides) -> DiscoveryConfig:
    values = dict(
        vendors=["localhost"],
        base_url_template=f"http://{{vendor}}:{port}",
        delay_base=0,
        delay_jitter=0,
        retry_times=0,
    )
    values.update(overrides)
    return DiscoveryConfig(**values)


# --------------------------------------------------------------------------- #
#                            Test-server fixtures                             #
# --------------------------------------------------------------------------- #


@pytest.fixture()
def hits() -> dict[str, int]:
    return {}


@pytest_asyncio.fixture
async def vendor_server(unused_tcp_port: int, hits: dict[str, int]) -> AsyncIterator[str]:
    app = web.Application()

    def count(request: web.Request) -> None:
        hits[request.path] = hits.get(request.path, 0) + 1

    async def handle_echo(request):
        count(request)
        return web.json_response(dict(request.headers))

    async def handle_missing(request):
        count(request)
        return web.Response(status=404, text="not found")

    async def handle_slow(request):
        count(request)
        await asyncio.sleep(2)
        return web.Response(text="late")

    async def handle_flaky(request):
        count(request)
        if hits[request.path] == 1:
            return web.Response(status=503, text="busy")
        return web.Response(text="recovered")

    async def handle_robots(request):
        count(request)
        return web.Response(
            text="User-agent: Googlebot\nDisallow: /\n\nUser-agent: *\nDisallow: /products/hidden\n",
            content_type="text/plain",
        )

    async def handle_sitemap(request):
        count(request)
        port = request.url.port
        body = "".join(
            f"<url><loc>http://localhost:{port}{path}</loc></url>"
            for path in ("/products/basil", "/products/hidden-gem", "/blog/spring", "/products/basil/")
        )
        return web.Response(
            text=f'<?xml version="1.0"?><urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{body}</urlset>',
            content_type="application/xml",
        )

    app.router.add_get("/echo", handle_echo)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/slow", handle_slow)
    app.router.add_get("/flaky", handle_flaky)
    app.router.add_get("/robots.txt", handle_robots)
    app.router.add_get("/sitemap.xml", handle_sitemap)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


# --------------------------------------------------------------------------- #
#                                   Tests                                     #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_fetch_sends_browser_headers(vendor_server: str, unused_tcp_port: int):
    config = local_config(unused_tcp_port)
    async with aiohttp.ClientSession() as session:
        fetcher = Fetcher(session, config, "localhost")
        res = await fetcher.fetch(f"{vendor_server}/echo", timeout=5)

    assert res.ok and res.status == 200
    headers = json.loads(res.text)
    assert headers["User-Agent"] == pick_user_agent("localhost", DEFAULT_USER_AGENTS)
    assert headers["Accept"] == ACCEPT
    assert headers["Accept-Language"] == ACCEPT_LANGUAGE
    assert headers["Referer"] == REFERER


@pytest.mark.asyncio()
async def test_fetch_non_2xx_is_not_ok(vendor_server: str, unused_tcp_port: int):
    async with aiohttp.ClientSession() as session:
        fetcher = Fetcher(session, local_config(unused_tcp_port), "localhost")
        res = await fetcher.fetch(f"{vendor_server}/missing", timeout=5)

    assert not res.ok
    assert res.status == 404
    assert res.text == "not found"


@pytest.mark.asyncio()
async def test_fetch_timeout_is_failed_result(vendor_server: str, unused_tcp_port: int):
    async with aiohttp.ClientSession() as session:
        fetcher = Fetcher(session, local_config(unused_tcp_port), "localhost")
        res = await fetcher.fetch(f"{vendor_server}/slow", timeout=0.3)

    assert not res.ok
    assert res.status == 0
    assert res.text == ""


@pytest.mark.asyncio()
async def test_fetch_retries_server_errors(vendor_server: str, unused_tcp_port: int, hits):
    async with aiohttp.ClientSession() as session:
        fetcher = Fetcher(session, local_config(unused_tcp_port, retry_times=1), "localhost")
        res = await fetcher.fetch(f"{vendor_server}/flaky", timeout=5)

    assert res.ok and res.text == "recovered"
    assert hits["/flaky"] == 2
    assert fetcher.request_count == 2


@pytest.mark.asyncio()
async def test_fetch_server_error_without_retries(vendor_server: str, unused_tcp_port: int, hits):
    async with aiohttp.ClientSession() as session:
        fetcher = Fetcher(session, local_config(unused_tcp_port), "localhost")
        res = await fetcher.fetch(f"{vendor_server}/flaky", timeout=5)

    assert not res.ok and res.status == 0
    assert hits["/flaky"] == 1


@pytest.mark.asyncio()
async def test_fetch_connection_refused(unused_tcp_port: int):
    async with aiohttp.ClientSession() as session:
        fetcher = Fetcher(session, local_config(unused_tcp_port), "localhost")
        res = await fetcher.fetch(f"http://localhost:{unused_tcp_port}/nothing", timeout=2)

    assert not res.ok
    assert res.status == 0


@pytest.mark.asyncio()
async def test_engine_against_live_server(vendor_server: str, unused_tcp_port: int, tmp_path, hits):
    config = local_config(unused_tcp_port)

    async def no_sleep(_delay: float) -> None:
        return None

    store = ResultStore(tmp_path / "vendor-urls.json")
    engine = Engine(config, clock=PolitenessClock(0, 0, sleep=no_sleep))
    results = await engine.run(["localhost"], store)

    result = results["localhost"]
    assert result.strategy is Strategy.SITEMAP
    assert list(result.urls) == [f"{vendor_server}/products/basil"]
    assert hits["/robots.txt"] == 1

    saved = json.loads(store.path.read_text(encoding="utf-8"))
    assert saved == {
        "localhost": {
            "discovered": 1,
            "urls": [f"{vendor_server}/products/basil"],
            "strategy": "sitemap",
        }
    }
