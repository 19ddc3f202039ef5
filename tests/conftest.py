"""Shared fixtures and utilities for torn-api tests.

This module provides:
- A stub transport recording requested URLs and returning canned JSON
- Sample API documents for the user, faction and key categories
"""

import copy
from typing import Any

import pytest

from torn_api import ApiClient


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests requiring an API key"
    )


class StubApiClient(ApiClient):
    """Transport returning a fixed document (or raising) for every request."""

    def __init__(self, document: Any = None, error: Exception | None = None):
        self.document = document
        self.error = error
        self.urls: list[str] = []

    async def __aenter__(self) -> "StubApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def request(self, url: str) -> Any:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.document)


@pytest.fixture
def status_json() -> dict:
    """Sample status object."""
    return {
        "description": "Okay",
        "details": "",
        "state": "Okay",
        "color": "green",
        "until": 0,
    }


@pytest.fixture
def last_action_json() -> dict:
    """Sample last_action object."""
    return {
        "status": "Offline",
        "timestamp": 1700000000,
        "relative": "2 hours ago",
    }


@pytest.fixture
def user_basic_json(status_json: dict) -> dict:
    """Sample response to /user/?selections=basic."""
    return {
        "level": 42,
        "gender": "Female",
        "player_id": 2111649,
        "name": "Pyrit",
        "status": status_json,
    }


@pytest.fixture
def user_profile_json(user_basic_json: dict, last_action_json: dict) -> dict:
    """Sample response to /user/?selections=basic,profile,discord."""
    return {
        **user_basic_json,
        "rank": "Reasonable Hustler",
        "age": 1500,
        "signup": "2019-01-01 12:00:00",
        "role": "Civilian",
        "donator": 1,
        "karma": 120,
        "awards": 150,
        "friends": 10,
        "enemies": 2,
        "forum_posts": 300,
        "property": "Private Island",
        "property_id": 123456,
        "life": {
            "current": 5000,
            "maximum": 5000,
            "increment": 300,
            "interval": 300,
            "ticktime": 120,
            "fulltime": 0,
        },
        "last_action": last_action_json,
        "faction": {
            "position": "Member",
            "faction_id": 0,
            "days_in_faction": 0,
            "faction_name": "None",
            "faction_tag": "",
        },
        "married": {
            "spouse_id": 0,
            "spouse_name": "",
            "duration": 0,
        },
        "discord": {
            "userID": 2111649,
            "discordID": "123456789012345678",
        },
    }


@pytest.fixture
def faction_basic_json(status_json: dict, last_action_json: dict) -> dict:
    """Sample response to /faction/?selections=basic."""
    return {
        "ID": 9036,
        "name": "Test Faction",
        "tag": 0,
        "leader": 2111649,
        "co-leader": 0,
        "respect": 1234567,
        "age": 2000,
        "capacity": 100,
        "best_chain": 2500,
        "members": {
            "2111649": {
                "name": "Pyrit",
                "level": 42,
                "days_in_faction": 700,
                "position": "Leader",
                "status": status_json,
                "last_action": last_action_json,
            },
            "1": {
                "name": "Chedburn",
                "level": 15,
                "days_in_faction": 10,
                "position": "Member",
                "status": {
                    "description": "In hospital for 2 mins",
                    "details": "Hospitalized by someone",
                    "state": "Hospital",
                    "color": "red",
                    "until": 1700000120,
                },
                "last_action": last_action_json,
            },
        },
    }


@pytest.fixture
def key_info_json() -> dict:
    """Sample response to /key/?selections=info."""
    return {
        "access_level": 4,
        "access_type": "Full Access",
        "selections": {
            "user": ["basic", "profile", "discord", "personalstats"],
            "faction": ["basic"],
        },
    }


@pytest.fixture
def api_error_json() -> dict:
    """Sample API error document."""
    return {"error": {"code": 2, "error": "incorrect key"}}


@pytest.fixture
def stub_client() -> type[StubApiClient]:
    """Provide the stub transport class so tests can configure instances."""
    return StubApiClient
