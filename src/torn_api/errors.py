"""Error taxonomy for Torn API requests.

Every failure surfaced by ``ApiRequestBuilder.send()`` is a ``TornClientError``
whose ``kind`` names exactly one member of ``ErrorKind``:

- API: the server answered with an ``error`` object (code + reason)
- TRANSPORT: no JSON was obtained (connection, send, or body read failure)
- DECODE: JSON was obtained but did not match the requested type
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Closed set of failure kinds for a single request."""

    API = "api"
    TRANSPORT = "transport"
    DECODE = "decode"


class TornClientError(Exception):
    """Base exception for all Torn API client errors."""

    kind: ClassVar[ErrorKind]


class TornAPIError(TornClientError):
    """Raised when the Torn API reports an error in the response body."""

    kind = ErrorKind.API

    def __init__(self, code: int, reason: str):
        super().__init__(f"api returned error '{reason}', code = '{code}'")
        self.code = code
        self.reason = reason


class TornTransportError(TornClientError):
    """Raised when the HTTP transport fails before any JSON is obtained."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str = "api request failed with network error"):
        super().__init__(message)


class TornDecodeError(TornClientError):
    """Raised when a response (or one of its fields) fails to decode."""

    kind = ErrorKind.DECODE

    def __init__(self, detail: str):
        super().__init__(f"api response couldn't be deserialized: {detail}")
        self.detail = detail

    @classmethod
    def missing_field(cls, field: str) -> TornDecodeError:
        """Create the error raised when a requested field is absent."""
        return cls(f"missing field `{field}`")
