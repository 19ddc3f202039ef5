"""Transport capability consumed by the request builder.

An ``ApiClient`` issues one HTTP GET for a fully assembled URL and returns the
parsed JSON body. Implementations adapt a specific HTTP library and must turn
that library's failures into ``TornTransportError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from torn_api.request import DEFAULT_BASE_URL, TornApi


class ApiClient(ABC):
    """Abstract base class for HTTP transports.

    The request builder only ever calls ``request``; connection pooling,
    timeouts and cancellation belong to the concrete implementation.
    """

    @abstractmethod
    async def request(self, url: str) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Args:
            url: Complete request URL including the query string.

        Returns:
            The parsed JSON document.

        Raises:
            TornTransportError: If the request or the body read fails.
        """
        ...

    def torn_api(self, key: str, base_url: str = DEFAULT_BASE_URL) -> TornApi:
        """Bind this client and an API key into a ``TornApi`` facade."""
        return TornApi(self, key, base_url=base_url)
