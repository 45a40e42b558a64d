"""Unit tests for AiohttpImageFetcher."""

from unittest.mock import patch

import pytest

from kp_trades_bot.adapters.http.image_fetcher import AiohttpImageFetcher
from kp_trades_bot.ports.outbound import ImageFetcherPort


def _mock_aiohttp_session(body=b"", error=None):
    """Return a mock that replaces aiohttp.ClientSession context manager."""
    requested = []

    class FakeResponse:
        def raise_for_status(self):
            if error:
                raise error

        async def read(self):
            return body

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, **kwargs):
            pass

        def get(self, url, **kwargs):
            requested.append(url)
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession, requested


class TestFetch:
    @pytest.mark.asyncio
    async def test_returns_bytes(self):
        session, requested = _mock_aiohttp_session(body=b"\x89PNG data")
        with patch("kp_trades_bot.adapters.http.image_fetcher.aiohttp.ClientSession", session):
            data = await AiohttpImageFetcher().fetch("https://cdn.discordapp.com/a.png")
        assert data == b"\x89PNG data"
        assert requested == ["https://cdn.discordapp.com/a.png"]

    @pytest.mark.asyncio
    async def test_http_error_propagates(self):
        session, _ = _mock_aiohttp_session(error=RuntimeError("404 Not Found"))
        with patch("kp_trades_bot.adapters.http.image_fetcher.aiohttp.ClientSession", session):
            with pytest.raises(RuntimeError, match="404"):
                await AiohttpImageFetcher().fetch("https://cdn.discordapp.com/gone.png")


def test_implements_fetcher_port():
    assert isinstance(AiohttpImageFetcher(), ImageFetcherPort)
