"""HTTP client port and its httpx implementation.

The transport is injected, so one ``httpx.AsyncClient`` can be shared by
every loader that needs it without a process-wide singleton.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class HTTPResponse:
    status_code: int
    body: bytes


class HTTPClient(ABC):
    @abstractmethod
    async def get(self, url: str) -> HTTPResponse:
        """Fetch ``url``. Raises on transport failure, never on HTTP status."""
        ...


class HttpxHTTPClient(HTTPClient):
    """``HTTPClient`` backed by an ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @classmethod
    def create(cls, timeout: float = 15) -> "HttpxHTTPClient":
        return cls(httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": "feedcache/1.0"},
        ))

    async def get(self, url: str) -> HTTPResponse:
        response = await self._client.get(url)
        return HTTPResponse(status_code=response.status_code, body=response.content)

    async def close(self):
        await self._client.aclose()
