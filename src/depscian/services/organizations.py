"""Services for factions, families and other player organizations."""

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
    ServerParams,
    SobesResponse,
    SubleadersResponse,
)
from depscian.services.base import Service


class FractionsService(Service):
    """In-game factions ("fractions") and their members."""

    async def list(
        self, server_id: int, *, timeout: float | None = None
    ) -> FractionsResponse:
        """List the factions of a server."""
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_fractions_list(params, timeout=timeout)
        )

    async def get_members(
        self, server_id: int, fraction_id: str, *, timeout: float | None = None
    ) -> FractionMembersResponse:
        """Get the member roster of a faction.

        Args:
            server_id: Game server identifier.
            fraction_id: Faction identifier as used by the API.
            timeout: Per-call timeout in seconds.
        """
        params = FractionMembersParams(server_id=server_id, fraction_id=fraction_id)
        return await self._call(
            self._endpoints.get_fraction_members(params, timeout=timeout)
        )


class FamiliesService(Service):
    """Player families."""

    async def list(
        self, server_id: int, *, timeout: float | None = None
    ) -> FamiliesResponse:
        """List the families of a server."""
        params = ServerParams(server_id=server_id)
        return await self._call(self._endpoints.get_families(params, timeout=timeout))

    async def get(
        self, server_id: int, fam_id: int, *, timeout: float | None = None
    ) -> FamilyResponse:
        """Get a single family, including its members."""
        params = FamilyParams(server_id=server_id, fam_id=fam_id)
        return await self._call(self._endpoints.get_family(params, timeout=timeout))


class LeadershipService(Service):
    """Faction leaders and their deputies."""

    async def get_leaders(
        self, server_id: int, *, timeout: float | None = None
    ) -> LeadersResponse:
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_leaders_list(params, timeout=timeout)
        )

    async def get_subleaders(
        self, server_id: int, *, timeout: float | None = None
    ) -> SubleadersResponse:
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_subleaders_list(params, timeout=timeout)
        )


class GhettoService(Service):
    async def get(
        self, server_id: int, *, timeout: float | None = None
    ) -> GhettoResponse:
        """Get gang territory ownership."""
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_ghetto_list(params, timeout=timeout)
        )


class SobesService(Service):
    async def get(
        self, server_id: int, *, timeout: float | None = None
    ) -> SobesResponse:
        """Get scheduled faction interviews."""
        params = ServerParams(server_id=server_id)
        return await self._call(self._endpoints.get_sobes_list(params, timeout=timeout))


class AdminsService(Service):
    async def get(
        self, server_id: int, *, timeout: float | None = None
    ) -> AdminsResponse:
        """Get the administrator roster of a server."""
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_server_admins(params, timeout=timeout)
        )
