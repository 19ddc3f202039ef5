"""httpx-backed transport."""

from __future__ import annotations

import logging
from typing import Any

from httpx import AsyncClient, HTTPError

from torn_api.client.base import ApiClient
from torn_api.errors import TornTransportError

logger = logging.getLogger(__name__)


class HttpxApiClient(ApiClient):
    """Async transport built on ``httpx.AsyncClient``.

    Example:
        async with HttpxApiClient() as client:
            response = await client.torn_api(key).user().send()
    """

    def __init__(self, timeout: float = 30.0, client: AsyncClient | None = None):
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds (default: 30.0)
            client: Existing AsyncClient to use. It is not closed by this
                wrapper.
        """
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpxApiClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the pooled AsyncClient if none exists yet."""
        if self._client is None:
            self._client = AsyncClient(timeout=self.timeout)
            self._owns_client = True
            logger.debug("httpx client connected")

    async def close(self) -> None:
        """Close the AsyncClient if this wrapper created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("httpx client closed")

    async def request(self, url: str) -> Any:
        if self._client is None:
            raise TornTransportError("Client not connected. Call connect() first.")

        try:
            response = await self._client.get(url)
            return response.json()
        except HTTPError as e:
            logger.warning("HTTP error: %s", e)
            raise TornTransportError() from e
        except ValueError as e:
            # body was not JSON
            logger.warning("Failed to read response payload: %s", e)
            raise TornTransportError("api request failed to read payload") from e
