"""Response envelope separating API error payloads from success payloads.

The envelope holds one raw JSON document. Construction fails with
``TornAPIError`` when the document carries a top-level ``error`` object, so a
successfully built ``ApiResponse`` is always a success payload. Decoding never
mutates the held document; every decode works on an independent copy.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from torn_api.errors import TornAPIError, TornDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiErrorPayload(BaseModel):
    """The ``error`` object returned by the API on failure."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    code: int = Field(ge=0, le=255)
    reason: str = Field(alias="error")


def _validate(target: Any, value: Any) -> Any:
    try:
        return TypeAdapter(target).validate_python(value)
    except ValidationError as e:
        missing = [error for error in e.errors() if error["type"] == "missing"]
        if missing:
            field = ".".join(str(part) for part in missing[0]["loc"])
            raise TornDecodeError.missing_field(field) from e
        raise TornDecodeError(str(e)) from e


class ApiResponse:
    """A successful (non-error) API response document."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    @classmethod
    def from_value(cls, value: Any) -> ApiResponse:
        """Triage a raw JSON document.

        Args:
            value: Parsed JSON body as returned by the transport.

        Returns:
            An ApiResponse wrapping a copy of the document.

        Raises:
            TornAPIError: If the document contains an ``error`` object.
            TornDecodeError: If the ``error`` object itself is malformed.
        """
        if isinstance(value, dict) and "error" in value:
            payload = _validate(ApiErrorPayload, value["error"])
            logger.warning("API returned error %d: %s", payload.code, payload.reason)
            raise TornAPIError(payload.code, payload.reason)

        return cls(copy.deepcopy(value))

    @property
    def value(self) -> Any:
        """A copy of the raw JSON document."""
        return copy.deepcopy(self._value)

    def decode(self, target: type[T]) -> T:
        """Decode the whole document into ``target``.

        Raises:
            TornDecodeError: If the document does not match ``target``.
        """
        return _validate(target, copy.deepcopy(self._value))

    def decode_field(self, field: str, target: type[T]) -> T:
        """Decode a single top-level field into ``target``.

        Raises:
            TornDecodeError: If the field is absent or does not match ``target``.
        """
        if not isinstance(self._value, dict) or field not in self._value:
            raise TornDecodeError.missing_field(field)

        return _validate(target, copy.deepcopy(self._value[field]))

    def __repr__(self) -> str:
        return f"ApiResponse({self._value!r})"
