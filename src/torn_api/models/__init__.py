"""Pydantic schemas for Torn API categories.

Usage:
    from torn_api.models import Basic, Discord, FactionBasic, KeyInfo
"""

from torn_api.models.common import OptionalId, OptionalString, OptionalTimestamp
from torn_api.models.faction import FactionBasic, Member
from torn_api.models.key import KeyInfo
from torn_api.models.user import (
    Basic,
    Discord,
    LastAction,
    Life,
    Married,
    PersonalStats,
    Profile,
    ProfileFaction,
    Status,
)

__all__ = [
    # Common
    "OptionalId",
    "OptionalString",
    "OptionalTimestamp",
    # User
    "Status",
    "LastAction",
    "Basic",
    "Life",
    "ProfileFaction",
    "Married",
    "Profile",
    "Discord",
    "PersonalStats",
    # Faction
    "Member",
    "FactionBasic",
    # Key
    "KeyInfo",
]
