#Marks routing as a package.
#Re-exports the public API (OSRMClient, RouteAggregator, rank_routes,
#is_valid_coordinate, models) so other modules import from routing without
#knowing internal file names.
#No business logic.

from .coordinates import is_valid_coordinate, all_valid_coordinates
from .models import (
    AggregateOutcome,
    LookupFailure,
    LookupFailureKind,
    RouteQuery,
    RouteResult,
)
from .osrm_client import OSRMClient, osrm_client_from_env
from .policy import RoutingPolicy, default_routing_policy, routing_policy_from_env
from .ranking import rank_routes, sort_outcome
from .route_service import RouteAggregator

__all__ = [
           "is_valid_coordinate",
             "all_valid_coordinates",
             "AggregateOutcome",
             "LookupFailure",
             "LookupFailureKind",
             "RouteQuery",
             "RouteResult",
             "OSRMClient",
             "osrm_client_from_env",
             "RoutingPolicy",
             "default_routing_policy",
             "routing_policy_from_env",
             "rank_routes",
             "sort_outcome",
             "RouteAggregator",
             ]
