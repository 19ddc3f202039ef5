"""aiohttp-backed transport."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from torn_api.client.base import ApiClient
from torn_api.errors import TornTransportError

logger = logging.getLogger(__name__)


class AiohttpApiClient(ApiClient):
    """Async transport built on ``aiohttp.ClientSession``.

    Example:
        async with AiohttpApiClient() as client:
            response = await client.torn_api(key).faction().send()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Total request timeout in seconds (default: 30.0)
            session: Existing ClientSession to use. It is not closed by this
                wrapper.
        """
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> AiohttpApiClient:
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
        """Create the ClientSession if none exists yet."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
            self._owns_session = True
            logger.debug("aiohttp session opened")

    async def close(self) -> None:
        """Close the ClientSession if this wrapper created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
            logger.debug("aiohttp session closed")

    async def request(self, url: str) -> Any:
        if self._session is None:
            raise TornTransportError("Client not connected. Call connect() first.")

        try:
            async with self._session.get(url) as response:
                body = await response.text()
                if not body.strip():
                    logger.warning("Empty response body")
                    raise TornTransportError("api request failed to read payload")
                # the API does not always label its JSON bodies
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("HTTP error: %s", e)
            raise TornTransportError() from e
        except ValueError as e:
            logger.warning("Failed to read response payload: %s", e)
            raise TornTransportError("api request failed to read payload") from e
