"""Request authentication for the Depscian API."""

from collections.abc import Generator

import httpx

API_KEY_HEADER = "X-API-Key"


class APIKeyAuth(httpx.Auth):
    """Attach a static API key to every outgoing request.

    Applied per request by ``EndpointClient``, so the header is present
    whichever ``httpx.AsyncClient`` carries the request.
    """

    def __init__(self, api_key: str, header: str = API_KEY_HEADER):
        self.api_key = api_key
        self.header = header

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[self.header] = self.api_key
        yield request
