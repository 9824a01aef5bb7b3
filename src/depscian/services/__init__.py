"""Resource-scoped service facades over the Depscian endpoint client."""

from depscian.services.base import Service
from depscian.services.organizations import (
    AdminsService,
    FamiliesService,
    FractionsService,
    GhettoService,
    LeadershipService,
    SobesService,
)
from depscian.services.players import OnlineService, PlayerService
from depscian.services.world import MapService, StatusService

__all__ = [
    "Service",
    "AdminsService",
    "FamiliesService",
    "FractionsService",
    "GhettoService",
    "LeadershipService",
    "MapService",
    "OnlineService",
    "PlayerService",
    "SobesService",
    "StatusService",
]
