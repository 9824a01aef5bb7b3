"""Query parameter models for Depscian API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class QueryParams(BaseModel):
    """Base model for endpoint query parameters."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_query(self) -> dict[str, Any]:
        """Serialize to the query-string mapping sent with the request."""
        return self.model_dump(exclude_none=True)


class ServerParams(QueryParams):
    """Parameters for endpoints scoped to a single game server."""

    server_id: int


class FamilyParams(ServerParams):
    """Parameters for GET /family."""

    fam_id: int


class FractionMembersParams(ServerParams):
    """Parameters for GET /fraction."""

    fraction_id: str


class PlayerFindParams(ServerParams):
    """Parameters for GET /player/find."""

    nickname: str
