"""Schemas for the ``faction`` category."""

from pydantic import BaseModel, ConfigDict, Field

from torn_api.models.user import LastAction, Status


class Member(BaseModel):
    """A faction member as listed by the ``basic`` selection."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    level: int
    days_in_faction: int
    position: str
    status: Status
    last_action: LastAction


class FactionBasic(BaseModel):
    """Fields returned by the faction ``basic`` selection."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    name: str
    leader: int

    respect: int
    age: int
    capacity: int
    best_chain: int

    # member player id -> member
    members: dict[int, Member]
