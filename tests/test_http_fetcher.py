"""Tests for the HTTP fetcher against a local aiohttp server."""

import asyncio

import pytest
from aiohttp import web
from aiohttp import test_utils

from fakes import cambridge_page, make_config
from wordfetch.core.errors import HttpStatusError, NetworkError, NetworkTimeout
from wordfetch.core.models import SourceOrigin
from wordfetch.scrapers.cambridge_source import CambridgeSource
from wordfetch.scrapers.fallback_resolver import FallbackResolver
from wordfetch.scrapers.http_fetcher import HttpFetcher
from wordfetch.scrapers.longman_source import LongmanSource

UNDECODABLE_BODY = b'<div class="dictionary">\xff\xfe broken</div>'


async def _echo_headers(request):
    return web.json_response({
        "user_agent": request.headers.get("User-Agent"),
        "accept_language": request.headers.get("Accept-Language"),
        "q": request.query.get("q"),
    })


async def _page(request):
    return web.Response(text="<div class='dictionary'>ok</div>", content_type="text/html")


async def _missing(request):
    return web.Response(status=404, text="not here")


async def _slow(request):
    await asyncio.sleep(2)
    return web.Response(text="too late")


async def _undecodable(request):
    return web.Response(body=UNDECODABLE_BODY, content_type="text/html", charset="utf-8")


async def _cambridge_entry(request):
    return web.Response(text=cambridge_page("a small animal"), content_type="text/html")


def _app():
    app = web.Application()
    app.router.add_get("/headers", _echo_headers)
    app.router.add_get("/page", _page)
    app.router.add_get("/missing", _missing)
    app.router.add_get("/slow", _slow)
    app.router.add_get("/undecodable", _undecodable)
    app.router.add_get("/dictionary/cat", _undecodable)
    app.router.add_get("/dictionary/english/cat", _cambridge_entry)
    return app


def _with_server(scenario):
    async def runner():
        async with test_utils.TestServer(_app()) as server:
            async with HttpFetcher(make_config(user_agent="TestAgent/1.0")) as fetcher:
                return await scenario(server, fetcher)
    return asyncio.run(runner())


def _local_source(source_class, server):
    source = source_class()
    source.origin = str(server.make_url("/")).rstrip("/")
    return source


class TestFetch:
    """Test single GET requests"""

    def test_fetch_returns_body(self):
        """Test a 200 response returns the page text"""
        async def scenario(server, fetcher):
            return await fetcher.fetch(str(server.make_url("/page")), timeout=5)

        assert "dictionary" in _with_server(scenario)

    def test_identity_headers_and_params_are_sent(self):
        """Test browser headers and query params reach the server"""
        async def scenario(server, fetcher):
            return await fetcher.fetch(str(server.make_url("/headers")), timeout=5, params={"q": "cat"})

        body = _with_server(scenario)
        assert '"user_agent": "TestAgent/1.0"' in body
        assert '"accept_language": "en-US,en;q=0.9"' in body
        assert '"q": "cat"' in body


class TestFetchErrors:
    """Test mapping of transport failures onto pipeline errors"""

    def test_non_200_raises_status_error(self):
        """Test a 404 becomes HttpStatusError carrying the status"""
        async def scenario(server, fetcher):
            with pytest.raises(HttpStatusError) as exc_info:
                await fetcher.fetch(str(server.make_url("/missing")), timeout=5)
            return exc_info.value.status

        assert _with_server(scenario) == 404

    def test_slow_response_raises_timeout(self):
        """Test exceeding the per-call timeout raises NetworkTimeout"""
        async def scenario(server, fetcher):
            with pytest.raises(NetworkTimeout):
                await fetcher.fetch(str(server.make_url("/slow")), timeout=0.2)
            return True

        assert _with_server(scenario)

    def test_connection_failure_raises_network_error(self):
        """Test an unreachable host raises NetworkError"""
        async def scenario():
            async with HttpFetcher(make_config()) as fetcher:
                with pytest.raises(NetworkError):
                    await fetcher.fetch("http://127.0.0.1:9/unreachable", timeout=2)

        asyncio.run(scenario())

    def test_undecodable_body_raises_network_error(self):
        """Test bytes invalid in the declared charset raise NetworkError"""
        async def scenario(server, fetcher):
            with pytest.raises(NetworkError, match="Undecodable"):
                await fetcher.fetch(str(server.make_url("/undecodable")), timeout=5)
            return True

        assert _with_server(scenario)

    def test_undecodable_primary_page_falls_back_to_secondary(self):
        """Test a garbled primary page still lets the secondary source answer"""
        async def scenario(server, fetcher):
            resolver = FallbackResolver(
                fetcher,
                primary=_local_source(LongmanSource, server),
                secondary=_local_source(CambridgeSource, server),
                config=make_config(),
            )
            return await resolver.resolve("cat")

        record = _with_server(scenario)
        assert record.source_origin is SourceOrigin.SECONDARY
        assert record.senses[0].definition == "a small animal"


class TestSessionLifecycle:
    """Test session ownership"""

    def test_close_releases_session(self):
        """Test close() closes and forgets the session"""
        async def scenario():
            fetcher = HttpFetcher(make_config())
            session = fetcher._get_session()
            await fetcher.close()
            return session.closed, fetcher.session

        closed, session = asyncio.run(scenario())
        assert closed is True
        assert session is None
