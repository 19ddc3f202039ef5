"""The ``faction`` category: selections and typed response."""

from torn_api.models import FactionBasic
from torn_api.selection import ApiCategoryResponse, ApiSelection, api_category


@api_category("faction")
class FactionSelection(ApiSelection):
    """Selections available on ``/faction``."""

    BASIC = "basic"


class FactionResponse(ApiCategoryResponse[FactionSelection]):
    """Response to a ``faction`` request."""

    selection_type = FactionSelection

    def basic(self) -> FactionBasic:
        return self._response.decode(FactionBasic)
