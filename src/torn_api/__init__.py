"""Typed async client for the Torn API.

Usage:
    from torn_api import HttpxApiClient, UserSelection

    async with HttpxApiClient() as client:
        response = await (
            client.torn_api(key)
            .user()
            .selections([UserSelection.BASIC])
            .send()
        )
        print(response.basic().name)
"""

from torn_api.client import AiohttpApiClient, ApiClient, HttpxApiClient
from torn_api.config import TornConfig
from torn_api.errors import (
    ErrorKind,
    TornAPIError,
    TornClientError,
    TornDecodeError,
    TornTransportError,
)
from torn_api.faction import FactionResponse, FactionSelection
from torn_api.key import KeyResponse, KeySelection
from torn_api.request import DEFAULT_BASE_URL, ApiRequestBuilder, TornApi
from torn_api.response import ApiResponse
from torn_api.selection import ApiCategoryResponse, ApiSelection, api_category
from torn_api.user import UserResponse, UserSelection

__version__ = "0.1.0"

__all__ = [
    # Transports
    "ApiClient",
    "HttpxApiClient",
    "AiohttpApiClient",
    # Core
    "TornApi",
    "ApiRequestBuilder",
    "ApiResponse",
    "ApiSelection",
    "ApiCategoryResponse",
    "api_category",
    "DEFAULT_BASE_URL",
    # Categories
    "UserSelection",
    "UserResponse",
    "FactionSelection",
    "FactionResponse",
    "KeySelection",
    "KeyResponse",
    # Errors
    "ErrorKind",
    "TornClientError",
    "TornAPIError",
    "TornTransportError",
    "TornDecodeError",
    # Config
    "TornConfig",
]
