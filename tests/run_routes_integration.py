#Manual check against a real OSRM server (OSRM_BASE_URL in .env).
#Not collected by pytest: python tests/run_routes_integration.py
import logging

from routing import RouteAggregator, osrm_client_from_env, rank_routes, routing_policy_from_env


def main():
    logging.basicConfig(level=logging.INFO)
    osrm = osrm_client_from_env(routing_policy_from_env())

    source = "13.388860,52.517037"
    destinations = [
        "13.397634,52.529407",
        "13.428555,52.523219",
        "13.428555,48.523219",  # far outside Berlin, usually no route
    ]

    routes = rank_routes(RouteAggregator(osrm).aggregate(source, destinations))

    print(f"\nReturned {len(routes)} of {len(destinations)} routes:\n")
    for route in routes:
        print(f"{route.destination}: {route.duration:.1f}s, {route.distance:.1f}m")

if __name__ == "__main__":
    main()
