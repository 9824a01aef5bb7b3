"""Response payload models for Depscian API endpoints.

Only the commonly used fields are declared. Every model accepts extra
fields, so anything else the server sends stays available through
``model_extra`` and ``model_dump()``.
"""

from pydantic import BaseModel, ConfigDict, Field


class DepscianModel(BaseModel):
    """Base model for decoded API payloads."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


# =============================================================================
# Status API
# =============================================================================


class ServerStatus(DepscianModel):
    """Availability of a single game server."""

    id: int | None = None
    name: str | None = None
    online: int | None = None
    max_online: int | None = None


class StatusResponse(DepscianModel):
    """Response from GET /status."""

    servers: list[ServerStatus] = Field(default_factory=list)


# =============================================================================
# Online / Player API
# =============================================================================


class OnlinePlayer(DepscianModel):
    """A player currently connected to a server."""

    id: int | None = None
    name: str | None = None
    level: int | None = None
    ping: int | None = None


class OnlineResponse(DepscianModel):
    """Response from GET /online."""

    server_id: int | None = None
    online: int | None = None
    players: list[OnlinePlayer] = Field(default_factory=list)


class PlayerResponse(DepscianModel):
    """Response from GET /player/find."""

    id: int | None = None
    name: str | None = None
    level: int | None = None
    is_online: bool | None = None
    fraction: str | None = None
    rank: int | None = None


# =============================================================================
# Fractions API
# =============================================================================


class Fraction(DepscianModel):
    """An in-game faction."""

    id: str | None = None
    name: str | None = None
    members_count: int | None = None


class FractionsResponse(DepscianModel):
    """Response from GET /fractions."""

    fractions: list[Fraction] = Field(default_factory=list)


class FractionMember(DepscianModel):
    """A member of a faction."""

    id: int | None = None
    name: str | None = None
    rank: int | None = None
    rank_name: str | None = None
    is_online: bool | None = None


class FractionMembersResponse(DepscianModel):
    """Response from GET /fraction."""

    fraction_id: str | None = None
    members: list[FractionMember] = Field(default_factory=list)


# =============================================================================
# Families API
# =============================================================================


class Family(DepscianModel):
    """A player family."""

    id: int | None = None
    name: str | None = None
    leader: str | None = None
    members_count: int | None = None


class FamiliesResponse(DepscianModel):
    """Response from GET /families."""

    families: list[Family] = Field(default_factory=list)


class FamilyMember(DepscianModel):
    """A member of a family."""

    id: int | None = None
    name: str | None = None
    rank: int | None = None


class FamilyResponse(Family):
    """Response from GET /family."""

    members: list[FamilyMember] = Field(default_factory=list)


# =============================================================================
# Leadership API
# =============================================================================


class Leader(DepscianModel):
    """The leader or deputy of a faction."""

    fraction: str | None = None
    name: str | None = None
    is_online: bool | None = None


class LeadersResponse(DepscianModel):
    """Response from GET /leaders."""

    leaders: list[Leader] = Field(default_factory=list)


class SubleadersResponse(DepscianModel):
    """Response from GET /subleaders."""

    subleaders: list[Leader] = Field(default_factory=list)


# =============================================================================
# Map API
# =============================================================================


class MapProperty(DepscianModel):
    """A house or business on the property map."""

    id: int | None = None
    type: str | None = None
    owner: str | None = None
    x: float | None = None
    y: float | None = None


class PointOfInterest(DepscianModel):
    """A named location on the map."""

    name: str | None = None
    x: float | None = None
    y: float | None = None


class MapResponse(DepscianModel):
    """Response from GET /map."""

    properties: list[MapProperty] = Field(default_factory=list)
    poi: list[PointOfInterest] = Field(default_factory=list)


# =============================================================================
# Admins / Ghetto / Sobes API
# =============================================================================


class Admin(DepscianModel):
    """A server administrator."""

    name: str | None = None
    level: int | None = None
    is_online: bool | None = None


class AdminsResponse(DepscianModel):
    """Response from GET /admins."""

    admins: list[Admin] = Field(default_factory=list)


class GhettoSquare(DepscianModel):
    """A gang territory square."""

    id: int | None = None
    owner: str | None = None


class GhettoResponse(DepscianModel):
    """Response from GET /ghetto."""

    squares: list[GhettoSquare] = Field(default_factory=list)


class Sobes(DepscianModel):
    """A scheduled faction interview."""

    fraction: str | None = None
    time: str | None = None
    place: str | None = None


class SobesResponse(DepscianModel):
    """Response from GET /sobes."""

    sobes: list[Sobes] = Field(default_factory=list)
