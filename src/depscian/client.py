"""Top-level Depscian API client.

``DepscianClient`` builds the HTTP transport from a chain of options, owns
one ``EndpointClient`` and exposes one service facade per API resource.

Usage:
    async with DepscianClient("api-key", with_timeout(10)) as client:
        player = await client.player.find(1, "Nick_Name")
        online = await client.online.get(1)
"""

from __future__ import annotations

import logging

import httpx

from depscian.api import APIKeyAuth, EndpointClient
from depscian.config import ClientConfig, Option, TransportSettings
from depscian.exceptions import ConfigurationError
from depscian.services import (
    AdminsService,
    FamiliesService,
    FractionsService,
    GhettoService,
    LeadershipService,
    MapService,
    OnlineService,
    PlayerService,
    SobesService,
    StatusService,
)

logger = logging.getLogger(__name__)


class DepscianClient:
    """Client for the Depscian game statistics API.

    All facades share the same endpoint client. The client keeps no per-call
    state and can be shared between tasks on the same event loop.

    Attributes:
        admins: Server administrators.
        families: Player families.
        fractions: Factions and their members.
        ghetto: Gang territories.
        leadership: Faction leaders and deputies.
        map: Property map with points of interest.
        online: Online players.
        player: Player lookup.
        sobes: Faction interview listings.
        status: Global server status.
    """

    def __init__(self, api_key: str, *options: Option):
        """Build the client.

        Options are applied in order; a later option overrides an earlier
        one touching the same setting.

        Args:
            api_key: Key sent in the X-API-Key header of every request.
            *options: Transport options such as ``with_timeout(10)``.

        Raises:
            ConfigurationError: If an option cannot be applied.
        """
        settings = TransportSettings()
        for option in options:
            try:
                option(settings)
            except Exception as e:
                raise ConfigurationError(f"failed to apply option: {e}") from e

        self._owns_http_client = settings.http_client is None
        self._endpoints = EndpointClient(
            settings.base_url,
            http_client=settings.build_http_client(),
            timeout=settings.timeout,
            auth=APIKeyAuth(api_key),
        )

        self.admins = AdminsService(self._endpoints)
        self.families = FamiliesService(self._endpoints)
        self.fractions = FractionsService(self._endpoints)
        self.ghetto = GhettoService(self._endpoints)
        self.leadership = LeadershipService(self._endpoints)
        self.map = MapService(self._endpoints)
        self.online = OnlineService(self._endpoints)
        self.player = PlayerService(self._endpoints)
        self.sobes = SobesService(self._endpoints)
        self.status = StatusService(self._endpoints)

        logger.debug("Depscian client created for %s", self._endpoints.base_url)

    @classmethod
    def from_config(cls, config: ClientConfig, *options: Option) -> DepscianClient:
        """Build a client from a declarative config.

        Extra options are applied after the config's own.
        """
        return cls(config.api_key, *config.options(), *options)

    @property
    def base_url(self) -> str:
        return self._endpoints.base_url

    @property
    def timeout(self) -> httpx.Timeout:
        """Timeout every request is sent with."""
        if self._endpoints.timeout is not None:
            return httpx.Timeout(self._endpoints.timeout)
        return self._endpoints.http_client.timeout

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._endpoints.http_client

    async def aclose(self) -> None:
        """Release pooled connections.

        A caller-supplied ``httpx.AsyncClient`` is left open for its owner.
        """
        if self._owns_http_client:
            await self._endpoints.http_client.aclose()
            logger.debug("HTTP client closed")

    async def __aenter__(self) -> DepscianClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.aclose()


def new_client(api_key: str, *options: Option) -> DepscianClient:
    """Build a ``DepscianClient``; see its constructor."""
    return DepscianClient(api_key, *options)
