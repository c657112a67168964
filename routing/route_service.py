#Purpose: Fan-out of one source to many destinations.
#Issues one OSRMClient.lookup_route per destination in parallel threads,
#waits for every one of them, and keeps the successful RouteResults.
#A failed destination is logged and dropped, it never fails the whole call.
#Ordering is NOT decided here (see routing.ranking).

from concurrent.futures import ThreadPoolExecutor
import logging
import threading
from typing import List, Sequence, Tuple

from routing.models import Coordinate, LookupFailure, LookupFailureKind, LookupOutcome, RouteResult
from routing.osrm_client import OSRMClient

logger = logging.getLogger(__name__)


class RouteAggregator:
    """
    Runs concurrent OSRM lookups for a single request.

    Worker count is one per destination unless the client's policy sets
    max_workers. Either way every lookup has finished before a public method
    returns.
    """
    def __init__(self, osrm_client: OSRMClient):
        self.osrm_client = osrm_client

    def _worker_count(self, destination_count: int) -> int:
        cap = self.osrm_client.policy.max_workers
        if cap is None:
            return destination_count
        return min(cap, destination_count)

    def _lookup_one(self, source: Coordinate, destination: Coordinate) -> LookupOutcome:
        try:
            outcome = self.osrm_client.lookup_route(source, destination)
        except Exception as e:
            # lookup_route reports provider problems as values, anything raised is a bug
            logger.exception("Unexpected error looking up %s -> %s", source, destination)
            outcome = LookupFailure(destination, LookupFailureKind.NETWORK, repr(e))

        if isinstance(outcome, LookupFailure):
            logger.warning("Dropping destination %s: %s", destination, outcome)
        return outcome

    def _fan_out(self, source: Coordinate,
                 destinations: Sequence[Coordinate]) -> List[Tuple[int, LookupOutcome]]:
        """
        Returns (input index, outcome) pairs in completion order.
        """
        if not destinations:
            return []

        completed: List[Tuple[int, LookupOutcome]] = []
        lock = threading.Lock()

        def lookup(index: int, destination: Coordinate) -> None:
            outcome = self._lookup_one(source, destination)
            with lock:
                completed.append((index, outcome))

        # leaving the with block joins every worker
        with ThreadPoolExecutor(max_workers=self._worker_count(len(destinations)),
                                thread_name_prefix="osrm-lookup") as executor:
            for index, destination in enumerate(destinations):
                executor.submit(lookup, index, destination)

        return completed

    def lookup_all(self, source: Coordinate,
                   destinations: Sequence[Coordinate]) -> List[LookupOutcome]:
        """
        Every outcome, successes and failures, aligned with `destinations`.
        For callers that want to report which destinations failed and why.
        """
        completed = self._fan_out(source, destinations)
        completed.sort(key=lambda pair: pair[0])
        return [outcome for _, outcome in completed]

    def aggregate(self, source: Coordinate,
                  destinations: Sequence[Coordinate]) -> List[RouteResult]:
        """
        Successful RouteResults only, in completion order (not stable across
        runs, rank them before use).
        """
        completed = self._fan_out(source, destinations)
        results = [outcome for _, outcome in completed if isinstance(outcome, RouteResult)]

        logger.info("Routed %s to %d/%d destinations", source, len(results), len(destinations))
        return results
