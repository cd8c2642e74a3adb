"""Async HTTP client utilities."""

import aiohttp
from typing import Optional, Dict, Any


class AsyncHTTPClient:
    """Reusable async JSON client."""

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.default_headers = {"Accept": "application/json", **(headers or {})}
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(headers=self.default_headers)
        return self.session

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """GET request, decoded as JSON whatever the content type."""
        session = self._ensure_session()
        async with session.get(url, headers=headers) as resp:
            resp.raise_for_status()
            return await resp.json(content_type=None)
