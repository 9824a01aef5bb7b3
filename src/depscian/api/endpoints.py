"""Low-level endpoint client for the Depscian REST API.

One coroutine per API operation. Each issues a single GET request and
returns an ``ApiResponse`` envelope; transport failures propagate as
``httpx.HTTPError``. Classifying the outcome is left to
``depscian.api.unpack``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from depscian.models import (
    AdminsResponse,
    FamiliesResponse,
    FamilyParams,
    FamilyResponse,
    FractionMembersParams,
    FractionMembersResponse,
    FractionsResponse,
    GhettoResponse,
    LeadersResponse,
    MapResponse,
    OnlineResponse,
    PlayerFindParams,
    PlayerResponse,
    QueryParams,
    ServerParams,
    SobesResponse,
    StatusResponse,
    SubleadersResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Outcome of a single endpoint call that produced an HTTP response.

    Attributes:
        parsed: Decoded body. Set only for a 200 JSON response matching the
            expected model, otherwise None.
        status_code: HTTP status code.
        status_text: Reason phrase for the status (e.g. "Not Found").
        http_response: The raw httpx response, if available.
    """

    parsed: T | None
    status_code: int
    status_text: str = ""
    http_response: httpx.Response | None = None


class EndpointClient:
    """Issues Depscian API requests over a shared ``httpx.AsyncClient``.

    Example:
        endpoints = EndpointClient(
            "https://api.depscian.tech/v2",
            http_client=httpx.AsyncClient(),
            auth=APIKeyAuth("secret"),
        )
        result = await endpoints.get_online_list(ServerParams(server_id=1))
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient,
        timeout: float | None = None,
        auth: httpx.Auth | None = None,
    ):
        """Initialize the endpoint client.

        Args:
            base_url: API root that endpoint paths are appended to.
            http_client: Client used to send every request.
            timeout: Timeout in seconds applied to each request. None keeps
                the timeout configured on ``http_client``.
            auth: Authentication applied to each request.
        """
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.timeout = timeout
        self._auth = auth

    # =========================================================================
    # Status / Online / Player
    # =========================================================================

    async def get_status(
        self, *, timeout: float | None = None
    ) -> ApiResponse[StatusResponse]:
        return await self._get("/status", StatusResponse, timeout=timeout)

    async def get_online_list(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[OnlineResponse]:
        return await self._get("/online", OnlineResponse, params, timeout=timeout)

    async def find_player(
        self, params: PlayerFindParams, *, timeout: float | None = None
    ) -> ApiResponse[PlayerResponse]:
        return await self._get("/player/find", PlayerResponse, params, timeout=timeout)

    # =========================================================================
    # Organizations
    # =========================================================================

    async def get_fractions_list(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[FractionsResponse]:
        return await self._get("/fractions", FractionsResponse, params, timeout=timeout)

    async def get_fraction_members(
        self, params: FractionMembersParams, *, timeout: float | None = None
    ) -> ApiResponse[FractionMembersResponse]:
        return await self._get(
            "/fraction", FractionMembersResponse, params, timeout=timeout
        )

    async def get_families(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[FamiliesResponse]:
        return await self._get("/families", FamiliesResponse, params, timeout=timeout)

    async def get_family(
        self, params: FamilyParams, *, timeout: float | None = None
    ) -> ApiResponse[FamilyResponse]:
        return await self._get("/family", FamilyResponse, params, timeout=timeout)

    async def get_leaders_list(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[LeadersResponse]:
        return await self._get("/leaders", LeadersResponse, params, timeout=timeout)

    async def get_subleaders_list(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[SubleadersResponse]:
        return await self._get(
            "/subleaders", SubleadersResponse, params, timeout=timeout
        )

    async def get_ghetto_list(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[GhettoResponse]:
        return await self._get("/ghetto", GhettoResponse, params, timeout=timeout)

    async def get_sobes_list(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[SobesResponse]:
        return await self._get("/sobes", SobesResponse, params, timeout=timeout)

    async def get_server_admins(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[AdminsResponse]:
        return await self._get("/admins", AdminsResponse, params, timeout=timeout)

    # =========================================================================
    # Map
    # =========================================================================

    async def get_property_map_with_poi(
        self, params: ServerParams, *, timeout: float | None = None
    ) -> ApiResponse[MapResponse]:
        return await self._get("/map", MapResponse, params, timeout=timeout)

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    async def _get(
        self,
        path: str,
        response_model: type[M],
        params: QueryParams | None = None,
        *,
        timeout: float | None = None,
    ) -> ApiResponse[M]:
        """Send a GET request and wrap the response.

        Args:
            path: Endpoint path relative to the base URL (e.g. "/online").
            response_model: Pydantic model the 200 body is decoded into.
            params: Query parameters, if the endpoint takes any.
            timeout: Per-call timeout in seconds, overriding the default.

        Returns:
            The response envelope.

        Raises:
            httpx.HTTPError: If the request fails before a response arrives.
        """
        request_kwargs: dict[str, Any] = {}
        if params is not None:
            request_kwargs["params"] = params.to_query()
        effective_timeout = timeout if timeout is not None else self.timeout
        if effective_timeout is not None:
            request_kwargs["timeout"] = effective_timeout

        request = self.http_client.build_request(
            "GET", f"{self.base_url}{path}", **request_kwargs
        )
        logger.debug("Request GET %s", request.url)

        if self._auth is not None:
            response = await self.http_client.send(request, auth=self._auth)
        else:
            response = await self.http_client.send(request)
        logger.debug("Response GET %s -> %d", request.url, response.status_code)

        return ApiResponse(
            parsed=self._decode(response, response_model),
            status_code=response.status_code,
            status_text=response.reason_phrase,
            http_response=response,
        )

    @staticmethod
    def _decode(response: httpx.Response, response_model: type[M]) -> M | None:
        """Decode a 200 JSON body, returning None when it is absent or invalid."""
        if response.status_code != 200:
            return None
        if "json" not in response.headers.get("content-type", ""):
            return None
        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug(
                "Discarding %s body that does not match %s: %s",
                response.url,
                response_model.__name__,
                e,
            )
            return None
