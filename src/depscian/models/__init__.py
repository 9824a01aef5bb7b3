"""Pydantic models for the Depscian API.

Usage:
    from depscian.models import ServerParams, PlayerFindParams
    from depscian.models import OnlineResponse, PlayerResponse
"""

# Query parameter models
from depscian.models.params import (
    FamilyParams,
    FractionMembersParams,
    PlayerFindParams,
    QueryParams,
    ServerParams,
)

# Response payload models
from depscian.models.responses import (
    Admin,
    AdminsResponse,
    DepscianModel,
    FamiliesResponse,
    Family,
    FamilyMember,
    FamilyResponse,
    Fraction,
    FractionMember,
    FractionMembersResponse,
    FractionsResponse,
    GhettoResponse,
    GhettoSquare,
    Leader,
    LeadersResponse,
    MapProperty,
    MapResponse,
    OnlinePlayer,
    OnlineResponse,
    PlayerResponse,
    PointOfInterest,
    ServerStatus,
    Sobes,
    SobesResponse,
    StatusResponse,
    SubleadersResponse,
)

__all__ = [
    # Params
    "QueryParams",
    "ServerParams",
    "FamilyParams",
    "FractionMembersParams",
    "PlayerFindParams",
    # Responses
    "DepscianModel",
    "Admin",
    "AdminsResponse",
    "Family",
    "FamilyMember",
    "FamiliesResponse",
    "FamilyResponse",
    "Fraction",
    "FractionMember",
    "FractionMembersResponse",
    "FractionsResponse",
    "GhettoSquare",
    "GhettoResponse",
    "Leader",
    "LeadersResponse",
    "SubleadersResponse",
    "MapProperty",
    "PointOfInterest",
    "MapResponse",
    "OnlinePlayer",
    "OnlineResponse",
    "PlayerResponse",
    "ServerStatus",
    "StatusResponse",
    "Sobes",
    "SobesResponse",
]
