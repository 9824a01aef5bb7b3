"""Low-level access to the Depscian REST API.

Usage:
    from depscian.api import APIKeyAuth, EndpointClient, unpack

    endpoints = EndpointClient(base_url, http_client=client, auth=APIKeyAuth(key))
    response = await endpoints.get_status()
    status = unpack(response.parsed, response)
"""

from depscian.api.auth import API_KEY_HEADER, APIKeyAuth
from depscian.api.endpoints import ApiResponse, EndpointClient
from depscian.api.unpack import unpack

__all__ = [
    "API_KEY_HEADER",
    "APIKeyAuth",
    "ApiResponse",
    "EndpointClient",
    "unpack",
]
