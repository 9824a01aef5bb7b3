"""Player-facing services: online list and player lookup."""

from depscian.models import (
    OnlineResponse,
    PlayerFindParams,
    PlayerResponse,
    ServerParams,
)
from depscian.services.base import Service


class OnlineService(Service):
    """Players currently online on a server."""

    async def get(
        self, server_id: int, *, timeout: float | None = None
    ) -> OnlineResponse:
        """Get the online player list of a server.

        Args:
            server_id: Game server identifier.
            timeout: Per-call timeout in seconds.

        Returns:
            OnlineResponse with the connected players.

        Raises:
            NotFoundError: If the server has no online list.
            StatusError: If the API returns another error status.
            ClientExecutionError: If the request fails.
        """
        params = ServerParams(server_id=server_id)
        return await self._call(
            self._endpoints.get_online_list(params, timeout=timeout)
        )


class PlayerService(Service):
    """Player lookup by nickname."""

    async def find(
        self, server_id: int, nickname: str, *, timeout: float | None = None
    ) -> PlayerResponse:
        """Find a player by nickname on a server.

        Args:
            server_id: Game server identifier.
            nickname: Exact in-game nickname.
            timeout: Per-call timeout in seconds.

        Returns:
            PlayerResponse describing the player.

        Raises:
            NotFoundError: If no such player exists.
            StatusError: If the API returns another error status.
            ClientExecutionError: If the request fails.
        """
        params = PlayerFindParams(server_id=server_id, nickname=nickname)
        return await self._call(self._endpoints.find_player(params, timeout=timeout))
