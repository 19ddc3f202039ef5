"""Shared field types for Torn API schemas.

The API encodes "no value" inconsistently: timestamps use ``0`` and some
strings are sent empty. These annotated types normalize both to ``None``.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator


def _zero_is_none(value: Any) -> Any:
    if value == 0:
        return None
    return value


def _empty_is_none(value: Any) -> Any:
    if value == "":
        return None
    return value


# Unix-second timestamp where 0 means "not set"
OptionalTimestamp = Annotated[datetime | None, BeforeValidator(_zero_is_none)]

# String where "" means "not set"
OptionalString = Annotated[str | None, BeforeValidator(_empty_is_none)]

# Id where 0 means "none" (e.g. faction_id of a factionless player)
OptionalId = Annotated[int | None, BeforeValidator(_zero_is_none)]
