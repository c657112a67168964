"""
Purpose: Domain models for the routing capability.
What it does:
- Defines the data structures that flow through a /routes request:
- RouteQuery (source + ordered destinations)
- RouteResult (destination, duration, distance) for one successful lookup
- LookupFailure (kind + detail) for one failed lookup
- AggregateOutcome (source + ranked results), what the handler serializes

Defines enums/constants:
- LookupFailureKind = NETWORK | RATE_LIMITED | PROVIDER_STATUS | PROVIDER_LOGICAL

Rule: No OSRM calls, no threading. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from routing.coordinates import Coordinate


class LookupFailureKind(str, Enum):
    NETWORK = "network"
    RATE_LIMITED = "rate_limited"
    PROVIDER_STATUS = "provider_status"
    PROVIDER_LOGICAL = "provider_logical"


@dataclass(frozen=True)
class RouteQuery:
    """
    One incoming request: a source and the destinations to fan out to.
    Duplicated destinations are kept, each one is looked up on its own.
    """
    source: Coordinate
    destinations: Tuple[Coordinate, ...]

    @classmethod
    def new(cls, source: Coordinate, destinations: List[Coordinate]) -> RouteQuery:
        return cls(source=source, destinations=tuple(destinations))


@dataclass(frozen=True)
class RouteResult:
    """
    Output of a successful lookup.
    duration is in seconds, distance in meters, both straight from OSRM.
    """
    destination: Coordinate
    duration: float
    distance: float


@dataclass(frozen=True)
class LookupFailure:
    """
    Output of a failed lookup. Never shown to API callers, the destination
    is just left out of the routes list.

    status_code is set for PROVIDER_STATUS (and for PROVIDER_LOGICAL when the
    provider answered with a body we could read).
    """
    destination: Coordinate
    kind: LookupFailureKind
    detail: str = ""
    status_code: Optional[int] = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.kind.value} (HTTP {self.status_code}): {self.detail}"
        return f"{self.kind.value}: {self.detail}"


# what OSRMClient.lookup_route hands back, callers branch with isinstance
LookupOutcome = Union[RouteResult, LookupFailure]


@dataclass
class AggregateOutcome:
    """
    Response body for one request.
    results is filled by the aggregator and then reordered in place by the ranker.
    """
    source: Coordinate
    results: List[RouteResult] = field(default_factory=list)
