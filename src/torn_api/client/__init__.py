"""HTTP transports for the Torn API client.

Usage:
    from torn_api.client import HttpxApiClient

    async with HttpxApiClient() as client:
        user = await client.torn_api(key).user().send()
"""

from torn_api.client.aiohttp_client import AiohttpApiClient
from torn_api.client.base import ApiClient
from torn_api.client.httpx_client import HttpxApiClient

__all__ = [
    "ApiClient",
    "AiohttpApiClient",
    "HttpxApiClient",
]
