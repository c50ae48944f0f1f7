"""
Shared HTTP client handling for the lookup services.
"""

import asyncio

import httpx

from netdash.config import get_config


class ServiceClient:
    """Base for API clients holding a pooled httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout if timeout is not None else get_config().http_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=5.0),
                limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
                headers={"Accept": "application/json"},
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _run(self, coro):
        """Run a coroutine to completion, closing the client afterwards.

        Each call gets its own event loop, so the pooled client cannot be
        carried over to the next call.
        """
        async def runner():
            try:
                return await coro
            finally:
                await self.close()

        return asyncio.run(runner())
