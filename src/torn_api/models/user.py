"""Schemas for the ``user`` category."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from torn_api.models.common import OptionalId, OptionalString, OptionalTimestamp

# =============================================================================
# Shared
# =============================================================================


class Status(BaseModel):
    """Current player status (okay, hospital, traveling, ...)."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    details: OptionalString = None
    state: str
    color: str
    until: OptionalTimestamp = None


class LastAction(BaseModel):
    """Most recent activity of a player."""

    model_config = ConfigDict(populate_by_name=True)

    status: str  # Online, Idle or Offline
    timestamp: datetime
    relative: str


# =============================================================================
# Basic
# =============================================================================


class Basic(BaseModel):
    """Fields returned by the ``basic`` selection."""

    model_config = ConfigDict(populate_by_name=True)

    player_id: int
    name: str
    level: int
    gender: str
    status: Status


# =============================================================================
# Profile
# =============================================================================


class Life(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current: int
    maximum: int
    increment: int
    interval: int
    ticktime: int
    fulltime: int


class ProfileFaction(BaseModel):
    """Faction membership as shown on a profile."""

    model_config = ConfigDict(populate_by_name=True)

    faction_id: OptionalId = None
    faction_name: OptionalString = None
    faction_tag: OptionalString = None
    position: OptionalString = None
    days_in_faction: int = 0


class Married(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    spouse_id: OptionalId = None
    spouse_name: OptionalString = None
    duration: int = 0


class Profile(BaseModel):
    """Fields returned by the ``profile`` selection."""

    model_config = ConfigDict(populate_by_name=True)

    player_id: int
    name: str
    rank: str
    level: int
    gender: str
    age: int
    signup: str
    role: str
    donator: bool
    karma: int
    awards: int
    friends: int
    enemies: int
    forum_posts: int | None = None
    property: str
    property_id: int
    life: Life
    status: Status
    last_action: LastAction
    faction: ProfileFaction | None = None
    married: Married | None = None


# =============================================================================
# Discord
# =============================================================================


class Discord(BaseModel):
    """Fields returned by the ``discord`` selection."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userID")
    discord_id: OptionalString = Field(default=None, alias="discordID")


# =============================================================================
# Personal Stats
# =============================================================================


class PersonalStats(BaseModel):
    """Fields returned by the ``personalstats`` selection.

    The API returns well over a hundred counters; the common ones are typed
    and the rest are kept as extra attributes.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    attacks_won: int = Field(default=0, alias="attackswon")
    attacks_lost: int = Field(default=0, alias="attackslost")
    defends_won: int = Field(default=0, alias="defendswon")
    defends_lost: int = Field(default=0, alias="defendslost")
    networth: int = 0
    refills: int = 0
    xan_taken: int = Field(default=0, alias="xantaken")
    user_activity: int = Field(default=0, alias="useractivity")
