"""The ``user`` category: selections and typed response."""

from torn_api.models import Basic, Discord, PersonalStats, Profile
from torn_api.selection import ApiCategoryResponse, ApiSelection, api_category


@api_category("user")
class UserSelection(ApiSelection):
    """Selections available on ``/user``."""

    BASIC = "basic"
    PROFILE = "profile"
    DISCORD = "discord"
    PERSONAL_STATS = "personalstats"


class UserResponse(ApiCategoryResponse[UserSelection]):
    """Response to a ``user`` request.

    ``basic`` and ``profile`` read the top-level document; ``discord`` and
    ``personal_stats`` read their own field.
    """

    selection_type = UserSelection

    def basic(self) -> Basic:
        return self._response.decode(Basic)

    def profile(self) -> Profile:
        return self._response.decode(Profile)

    def discord(self) -> Discord:
        return self._response.decode_field("discord", Discord)

    def personal_stats(self) -> PersonalStats:
        return self._response.decode_field("personalstats", PersonalStats)
