"""Server-wide services: global status and the property map."""

from depscian.models import MapResponse, ServerParams, StatusResponse
from depscian.services.base import Service


class StatusService(Service):
    """Global API status. Not scoped to a server."""

    async def get(self, *, timeout: float | None = None) -> StatusResponse:
        """Get the status of all game servers."""
        return await self._call(self._endpoints.get_status(timeout=timeout))


class MapService(Service):
    """Property map with points of interest."""

    async def get(self, server_id: int, *, timeout: float | None = None) -> MapResponse:
        """Get houses, businesses and points of interest of a server."""
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_property_map_with_poi(params, timeout=timeout)
        )
