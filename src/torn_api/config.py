"""Client configuration with Pydantic validation.

Configuration sources, later ones overriding earlier ones:
- defaults
- a YAML file: ``TornConfig.from_yaml("torn.yaml")``
- environment variables: ``TornConfig.from_env()``
- explicit overrides: ``config.with_overrides(api_key=...)``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field

from torn_api.client import AiohttpApiClient, ApiClient, HttpxApiClient
from torn_api.request import DEFAULT_BASE_URL, TornApi

Backend = Literal["httpx", "aiohttp"]

ENV_PREFIX = "TORN_API_"


class TornConfig(BaseModel):
    """Settings for connecting to the Torn API.

    All fields have defaults except the API key, which is required only
    when a request is actually made.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(
        None,
        description="Torn API key",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Scheme and host of the API",
    )
    timeout: float = Field(
        30.0,
        gt=0,
        description="Request timeout in seconds",
    )
    backend: Backend = Field(
        "httpx",
        description="HTTP library used for requests",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> TornConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated TornConfig instance.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValidationError: If the configuration is invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    @classmethod
    def from_env(
        cls, base: TornConfig | None = None, environ: Mapping[str, str] | None = None
    ) -> TornConfig:
        """Apply ``TORN_API_*`` environment variables on top of ``base``.

        Recognized variables: TORN_API_KEY, TORN_API_BASE_URL,
        TORN_API_TIMEOUT, TORN_API_BACKEND.
        """
        environ = os.environ if environ is None else environ
        overrides = {
            "api_key": environ.get(f"{ENV_PREFIX}KEY"),
            "base_url": environ.get(f"{ENV_PREFIX}BASE_URL"),
            "timeout": environ.get(f"{ENV_PREFIX}TIMEOUT"),
            "backend": environ.get(f"{ENV_PREFIX}BACKEND"),
        }
        return (base or cls()).with_overrides(**overrides)

    def with_overrides(self, **overrides: Any) -> TornConfig:
        """Return a validated copy with every non-None override applied."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).model_validate(data)

    def create_client(self) -> HttpxApiClient | AiohttpApiClient:
        """Create the transport selected by ``backend``."""
        if self.backend == "aiohttp":
            return AiohttpApiClient(timeout=self.timeout)
        return HttpxApiClient(timeout=self.timeout)

    def torn_api(self, client: ApiClient) -> TornApi:
        """Bind ``client`` to the configured key and base URL.

        Raises:
            ValueError: If no API key is configured.
        """
        if not self.api_key:
            raise ValueError(
                f"No API key configured (set {ENV_PREFIX}KEY or pass --key)"
            )
        return client.torn_api(self.api_key, base_url=self.base_url)
