"""The ``key`` category: information about the API key itself."""

from torn_api.models import KeyInfo
from torn_api.selection import ApiCategoryResponse, ApiSelection, api_category


@api_category("key")
class KeySelection(ApiSelection):
    INFO = "info"


class KeyResponse(ApiCategoryResponse[KeySelection]):
    selection_type = KeySelection

    def info(self) -> KeyInfo:
        return self._response.decode(KeyInfo)
