"""Typed async client for the Depscian game statistics API.

Usage:
    from depscian import DepscianClient, NotFoundError, with_timeout

    async with DepscianClient("api-key", with_timeout(10)) as client:
        try:
            player = await client.player.find(1, "Nick_Name")
        except NotFoundError:
            player = None
"""

from depscian.api import API_KEY_HEADER
from depscian.client import DepscianClient, new_client
from depscian.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    Option,
    TransportSettings,
    with_base_url,
    with_http_client,
    with_timeout,
)
from depscian.exceptions import (
    ClientExecutionError,
    ConfigurationError,
    DepscianError,
    NotFoundError,
    StatusError,
)

__version__ = "0.1.0"

__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
    "ClientExecutionError",
    "ConfigurationError",
    "DepscianClient",
    "DepscianError",
    "NotFoundError",
    "Option",
    "StatusError",
    "TransportSettings",
    "new_client",
    "with_base_url",
    "with_http_client",
    "with_timeout",
    "__version__",
]
