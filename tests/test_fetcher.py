"""Tests for app.services.fetcher.fetch_document.

The real ``httpx.AsyncClient`` is kept but every client the fetcher builds is
wired to an ``httpx.MockTransport``, so no network access is needed.
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from app.services.fetcher import TIMEOUT, USER_AGENT, fetch_document

_RealAsyncClient = httpx.AsyncClient


def _mock_client(handler):
    """Return an ``AsyncClient`` factory that routes every request to *handler*."""

    def factory(**kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    return factory


def _fetch(url: str, handler) -> str:
    with patch("app.services.fetcher.httpx.AsyncClient", new=_mock_client(handler)):
        return asyncio.run(fetch_document(url))


class TestFetchDocument:
    def test_returns_body_text(self):
        html = "<html><head><title>Hi</title></head></html>"
        assert _fetch("http://example.com", lambda request: httpx.Response(200, text=html)) == html

    def test_sends_user_agent(self):
        seen = {}

        def handler(request):
            seen["user_agent"] = request.headers["User-Agent"]
            return httpx.Response(200, text="ok")

        _fetch("http://example.com", handler)
        assert seen["user_agent"] == USER_AGENT == "DevSEOTools/1.0"

    def test_uses_ten_second_timeout(self):
        seen = {}

        def handler(request):
            seen["timeout"] = request.extensions["timeout"]
            return httpx.Response(200, text="ok")

        _fetch("http://example.com", handler)
        assert TIMEOUT == 10
        assert seen["timeout"]["connect"] == 10
        assert seen["timeout"]["read"] == 10

    def test_follows_redirects(self):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "http://example.com/new"})
            return httpx.Response(200, text="moved here")

        assert _fetch("http://example.com/old", handler) == "moved here"

    def test_non_success_status_raises(self):
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            _fetch("http://example.com/missing", lambda request: httpx.Response(404))
        assert exc_info.value.response.status_code == 404

    def test_timeout_propagates(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(httpx.TimeoutException):
            _fetch("http://example.com", handler)
