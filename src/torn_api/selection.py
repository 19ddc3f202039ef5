"""Selections and category responses.

Each API category (user, faction, key) defines:

- a Selection enumeration, subclassing ``ApiSelection`` and tagged with its
  category token through ``@api_category``; member values are the wire tokens
  sent in the ``selections=`` query parameter
- a response class, subclassing ``ApiCategoryResponse[Selection]`` and naming
  its selection enumeration in ``selection_type``

The generic parameter ties a response type to exactly one selection type, so a
type checker rejects a faction selection on a user request. The request
builder repeats the check at runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, ClassVar, Generic, TypeVar

from torn_api.response import ApiResponse


class ApiSelection(Enum):
    """Base class for per-category selection enumerations."""

    @property
    def raw_value(self) -> str:
        """Wire-level token for this selection."""
        return self.value

    @classmethod
    def category(cls) -> str:
        """Wire-level token of the category owning this selection type."""
        try:
            return cls.__dict__["_category"]
        except KeyError:
            raise TypeError(
                f"{cls.__name__} is not bound to a category; decorate it with @api_category"
            ) from None


SelectionT = TypeVar("SelectionT", bound=ApiSelection)
S = TypeVar("S", bound=ApiSelection)
R = TypeVar("R", bound="ApiCategoryResponse")


def api_category(token: str) -> Callable[[type[SelectionT]], type[SelectionT]]:
    """Bind a selection enumeration to a category token.

    Example:
        @api_category("faction")
        class FactionSelection(ApiSelection):
            BASIC = "basic"
    """

    def decorator(cls: type[SelectionT]) -> type[SelectionT]:
        if not issubclass(cls, ApiSelection):
            raise TypeError(f"{cls.__name__} must subclass ApiSelection")
        cls._category = token
        return cls

    return decorator


class ApiCategoryResponse(Generic[S]):
    """Typed response for one category.

    Subclasses set ``selection_type`` and expose one accessor per selection.
    Accessors only succeed for selections that were part of the request;
    anything else raises ``TornDecodeError`` (missing field).
    """

    selection_type: ClassVar[type[ApiSelection]]

    def __init__(self, response: ApiResponse):
        self._response = response

    @classmethod
    def from_response(cls: type[R], response: ApiResponse) -> R:
        """Materialize the category response from a success envelope."""
        return cls(response)

    @property
    def response(self) -> ApiResponse:
        """The underlying response envelope."""
        return self._response

    @classmethod
    def category(cls) -> str:
        """Wire-level token of this response's category."""
        return cls.selection_type.category()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._response!r})"
