"""Request building and the ``TornApi`` facade.

A request is assembled by an immutable ``ApiRequestBuilder``: every
configuration method returns a new builder and only ``send()`` touches the
network. The resulting URL has the shape::

    https://api.torn.com/<category>/<id>?selections=<a,b>&key=<key>[&from=..][&to=..][&comment=..]

An absent id leaves the id segment empty (``/user/?...``). An empty selection
list still sends ``selections=`` with an empty value.
"""

from __future__ import annotations

import copy
import logging
import math
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Generic, Iterable, TypeVar
from urllib.parse import quote

from torn_api.faction import FactionResponse, FactionSelection
from torn_api.key import KeyResponse, KeySelection
from torn_api.response import ApiResponse
from torn_api.selection import ApiCategoryResponse, ApiSelection
from torn_api.user import UserResponse, UserSelection

if TYPE_CHECKING:
    from torn_api.client.base import ApiClient

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.torn.com"

S = TypeVar("S", bound=ApiSelection)
R = TypeVar("R", bound=ApiCategoryResponse)


def _unix_seconds(value: datetime) -> int:
    """Convert a datetime to Unix seconds, reading naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return math.floor(value.timestamp())


class ApiRequestBuilder(Generic[S, R]):
    """Accumulates the parameters of one request to a single category.

    Example:
        response = await (
            client.torn_api(key)
            .user()
            .selections([UserSelection.BASIC])
            .send()
        )
        basic = response.basic()
    """

    def __init__(
        self,
        client: ApiClient,
        key: str,
        response_type: type[R],
        entity_id: int | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        """Initialize a builder with no selections.

        Args:
            client: Transport used by ``send()``.
            key: API key, sent as the ``key`` query parameter.
            response_type: Category response class to materialize.
            entity_id: Target entity id; None queries the key owner.
            base_url: Scheme and host of the API.

        Raises:
            TypeError: If ``response_type`` is not bound to a categorized
                selection enumeration.
        """
        selection_type = getattr(response_type, "selection_type", None)
        if not (
            isinstance(selection_type, type) and issubclass(selection_type, ApiSelection)
        ):
            raise TypeError(
                f"{response_type.__name__} does not declare an ApiSelection selection_type"
            )
        # raises TypeError when the enumeration was never bound to a category
        selection_type.category()

        self._client = client
        self._key = key
        self._response_type = response_type
        self._entity_id = entity_id
        self._base_url = base_url.rstrip("/")
        self._selections: tuple[str, ...] = ()
        self._from: datetime | None = None
        self._to: datetime | None = None
        self._comment: str | None = None

    def _evolve(self, **changes: object) -> ApiRequestBuilder[S, R]:
        builder = copy.copy(self)
        for name, value in changes.items():
            setattr(builder, name, value)
        return builder

    @property
    def category(self) -> str:
        """Wire-level token of the target category."""
        return self._response_type.category()

    @property
    def entity_id(self) -> int | None:
        return self._entity_id

    @property
    def selection_tokens(self) -> tuple[str, ...]:
        """Accumulated selection tokens in request order."""
        return self._selections

    def selections(self, selections: Iterable[S]) -> ApiRequestBuilder[S, R]:
        """Append selections, keeping their order and any duplicates.

        Raises:
            TypeError: If a selection belongs to another category.
        """
        selection_type = self._response_type.selection_type
        tokens = []
        for selection in selections:
            if not isinstance(selection, selection_type):
                raise TypeError(
                    f"{selection!r} is not a {selection_type.__name__}; "
                    f"{self.category} requests only accept their own selections"
                )
            tokens.append(selection.raw_value)
        return self._evolve(_selections=self._selections + tuple(tokens))

    def from_(self, from_time: datetime) -> ApiRequestBuilder[S, R]:
        """Only include entries at or after ``from_time``."""
        return self._evolve(_from=from_time)

    def to(self, to_time: datetime) -> ApiRequestBuilder[S, R]:
        """Only include entries at or before ``to_time``."""
        return self._evolve(_to=to_time)

    def comment(self, comment: str) -> ApiRequestBuilder[S, R]:
        """Attach a free-text comment shown in the key's access log."""
        return self._evolve(_comment=comment)

    def _url(self, key_fragment: str) -> str:
        query_fragments = [
            f"selections={','.join(self._selections)}",
            f"key={key_fragment}",
        ]

        if self._from is not None:
            query_fragments.append(f"from={_unix_seconds(self._from)}")

        if self._to is not None:
            query_fragments.append(f"to={_unix_seconds(self._to)}")

        if self._comment is not None:
            query_fragments.append(f"comment={quote(self._comment, safe='')}")

        id_fragment = "" if self._entity_id is None else str(self._entity_id)
        query = "&".join(query_fragments)
        return f"{self._base_url}/{self.category}/{id_fragment}?{query}"

    def build_url(self) -> str:
        """Assemble the request URL without sending it."""
        return self._url(quote(self._key, safe=""))

    async def send(self) -> R:
        """Execute the request.

        Returns:
            The category response built from the returned document.

        Raises:
            TornAPIError: If the API returned an error object.
            TornTransportError: If the transport failed.
            TornDecodeError: If the API error object could not be decoded.
        """
        url = self.build_url()
        logger.debug("Request GET %s", self._url("***"))

        value = await self._client.request(url)
        response = ApiResponse.from_value(value)
        return self._response_type.from_response(response)


class TornApi:
    """Entry point binding a transport and an API key.

    Each category method returns a fresh builder; the facade holds no state
    besides the client reference and the key, so it can issue any number of
    independent requests.
    """

    def __init__(self, client: ApiClient, key: str, base_url: str = DEFAULT_BASE_URL):
        self.client = client
        self.key = key
        self.base_url = base_url

    def user(
        self, user_id: int | None = None
    ) -> ApiRequestBuilder[UserSelection, UserResponse]:
        """Build a request for the ``user`` category."""
        return ApiRequestBuilder(
            self.client, self.key, UserResponse, user_id, base_url=self.base_url
        )

    def faction(
        self, faction_id: int | None = None
    ) -> ApiRequestBuilder[FactionSelection, FactionResponse]:
        """Build a request for the ``faction`` category."""
        return ApiRequestBuilder(
            self.client, self.key, FactionResponse, faction_id, base_url=self.base_url
        )

    def key_info(self) -> ApiRequestBuilder[KeySelection, KeyResponse]:
        """Build a request for the ``key`` category (the key itself)."""
        return ApiRequestBuilder(
            self.client, self.key, KeyResponse, base_url=self.base_url
        )
