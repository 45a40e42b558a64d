"""Attachment downloader using aiohttp."""

import aiohttp

DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)


class AiohttpImageFetcher:
    """Downloads attachment bytes. Implements ImageFetcherPort protocol."""

    def __init__(self, timeout: aiohttp.ClientTimeout = DEFAULT_TIMEOUT):
        self._timeout = timeout

    async def fetch(self, url: str) -> bytes:
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.read()
