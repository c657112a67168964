#Purpose: Ordering of collected routes.
#Fastest first (duration asc), shortest breaks exact duration ties (distance asc).
#list.sort is stable, so routes equal on both keys keep their input order.

from typing import Iterable, List

from routing.models import AggregateOutcome, RouteResult


def route_sort_key(route: RouteResult):
    return (route.duration, route.distance) #primary sort by duration, secondary by distance


def rank_routes(routes: Iterable[RouteResult]) -> List[RouteResult]:
    """Return a new list of `routes` ordered fastest first. Pure, input untouched."""
    return sorted(routes, key=route_sort_key)


def sort_outcome(outcome: AggregateOutcome) -> AggregateOutcome:
    """Reorder `outcome.results` in place and hand the same object back."""
    outcome.results.sort(key=route_sort_key)
    return outcome
