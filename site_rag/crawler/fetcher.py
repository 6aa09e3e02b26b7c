# site_rag/crawler/fetcher.py
"""
Fetcher module: plain HTTP GET of a page over a shared aiohttp session.

There is no retry and no backoff. Any transport error or non-2xx status is
raised to the caller.
"""
from __future__ import annotations

from aiohttp import ClientSession

from site_rag.crawler.models import PageData


class Fetcher:
    """Fetches page markup through *session*."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its body as text.

        Raises aiohttp.ClientResponseError for error statuses and other
        aiohttp.ClientError subclasses for transport failures.
        """
        async with self.session.get(url) as resp:
            resp.raise_for_status()
            text = await resp.text(errors="replace")
            return PageData(url, text)
