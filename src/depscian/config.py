"""Transport configuration for the Depscian client.

Two layers live here:

- ``TransportSettings`` plus the option functions (``with_base_url``,
  ``with_timeout``, ``with_http_client``) that mutate it in order during
  client construction.
- ``ClientConfig``, a validated declarative config that can be loaded from
  YAML or the environment and converted into an option list.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import httpx
import yaml
from pydantic import BaseModel, ConfigDict, Field

from depscian.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.depscian.tech/v2"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "DEPSCIAN_API_KEY"
ENV_BASE_URL = "DEPSCIAN_BASE_URL"
ENV_TIMEOUT = "DEPSCIAN_TIMEOUT"


@dataclass
class TransportSettings:
    """Mutable transport settings assembled while a client is constructed.

    Attributes:
        base_url: Versioned API root every endpoint path is appended to.
        timeout: Request timeout in seconds. ``None`` means the timeout
            configured on ``http_client`` applies.
        http_client: Caller-supplied client replacing the default one.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT
    http_client: httpx.AsyncClient | None = None

    def build_http_client(self) -> httpx.AsyncClient:
        """Return the custom client if one was set, else a new default client."""
        if self.http_client is not None:
            return self.http_client
        return httpx.AsyncClient(timeout=self.timeout)


Option = Callable[[TransportSettings], None]


def with_base_url(url: str) -> Option:
    """Replace the API base URL."""

    def apply(settings: TransportSettings) -> None:
        settings.base_url = url

    return apply


def with_timeout(seconds: float) -> Option:
    """Replace the request timeout, in seconds."""

    def apply(settings: TransportSettings) -> None:
        if seconds <= 0:
            raise ValueError(f"timeout must be positive, got {seconds}")
        settings.timeout = seconds

    return apply


def with_http_client(client: httpx.AsyncClient) -> Option:
    """Replace the whole HTTP client.

    This is a full replacement: the default client and any timeout set by an
    earlier option are discarded, so ``client``'s own timeout applies unless
    a later ``with_timeout`` overrides it.
    """

    def apply(settings: TransportSettings) -> None:
        settings.http_client = client
        settings.timeout = None

    return apply


class ClientConfig(BaseModel):
    """Declarative client configuration.

    Can be:
    - Created with defaults: ``ClientConfig(api_key="...")``
    - Loaded from YAML: ``ClientConfig.from_yaml("depscian.yaml")``
    - Loaded from the environment: ``ClientConfig.from_env()``
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(
        ...,
        description="API key sent in the X-API-Key header",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        min_length=1,
        description="Versioned API root",
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )

    @classmethod
    def from_yaml(cls, path: str | os.PathLike[str]) -> ClientConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated ClientConfig instance.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValidationError: If the configuration is invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Load configuration from ``DEPSCIAN_*`` environment variables.

        Raises:
            ConfigurationError: If ``DEPSCIAN_API_KEY`` is not set.
            ValidationError: If ``DEPSCIAN_TIMEOUT`` is not a positive number.
        """
        env = os.environ if environ is None else environ
        api_key = env.get(ENV_API_KEY)
        if not api_key:
            raise ConfigurationError(f"{ENV_API_KEY} is not set")

        data: dict[str, str] = {"api_key": api_key}
        if env.get(ENV_BASE_URL):
            data["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            data["timeout"] = env[ENV_TIMEOUT]
        return cls.model_validate(data)

    def to_yaml(self, path: str | os.PathLike[str]) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def options(self) -> list[Option]:
        """Convert to the option list accepted by ``DepscianClient``."""
        return [with_base_url(self.base_url), with_timeout(self.timeout)]
