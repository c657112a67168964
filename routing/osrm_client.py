#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#URL construction (/route/v1/{profile}/{src};{dst})
#timeouts / the 429 retry loop
#parsing response JSON into RouteResult, or a LookupFailure when anything goes wrong
#It should not contain fan-out, ranking or request validation.


from dotenv import load_dotenv
import logging
import os
import time
from typing import Any, Optional
import requests

from routing.models import Coordinate, LookupFailure, LookupFailureKind, LookupOutcome, RouteResult
from routing.policy import RoutingPolicy, default_routing_policy

logger = logging.getLogger(__name__)

# Public demo server, override with OSRM_BASE_URL in .env
# Example in .env:
# OSRM_BASE_URL=http://localhost:5000
DEFAULT_BASE_URL = "http://router.project-osrm.org"

# OSRM answers 400 (with a JSON body) for "valid request, no route", so the
# body is still inspected for those.
READABLE_STATUS_CODES = (200, 400)
TOO_MANY_REQUESTS = 429
OSRM_OK = "Ok"


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Retry on HTTP 429 with a fixed backoff
    - Return RouteResult on success, LookupFailure otherwise (never raises
      for provider problems)

    One requests.Session is shared by every thread that uses this client, it
    is not mutated after construction.
    """
    def __init__(self,
                 base_url: str = DEFAULT_BASE_URL,
                 policy: Optional[RoutingPolicy] = None,
                 session: Optional[requests.Session] = None):
        if not base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

        self.base_url = base_url.rstrip("/")
        self.policy = policy or default_routing_policy()
        self.policy.validate()
        self.session = session or requests.Session()

        #----------------
        # Internal helper methods for URL construction and response parsing
        #----------------
    def format_coordinates(self, source: Coordinate, destination: Coordinate) -> str:
        """Join source and destination in OSRM's 'a;b' path form, text is passed through as-is."""
        return f"{source};{destination}"

    def route_url(self, source: Coordinate, destination: Coordinate) -> str:
        coordinates = self.format_coordinates(source, destination)
        return f"{self.base_url}/route/v1/{self.policy.profile}/{coordinates}"

    def _get_with_429_retries(self, url: str):
        """
        GET `url`, sleeping `retry_backoff_seconds` after every 429.

        Returns the first non-429 response, or None once `retry_attempts`
        responses in a row were 429. Network errors propagate immediately,
        they are not retried.
        """
        attempts = self.policy.retry_attempts
        for attempt in range(1, attempts + 1):
            response = self.session.get(
                url,
                params={
                    "overview": "false", # we don't need the geometry of the route
                },
                timeout=self.policy.request_timeout_seconds,
            )

            if response.status_code != TOO_MANY_REQUESTS:
                return response

            logger.debug("OSRM rate limited %s (attempt %d/%d)", url, attempt, attempts)
            time.sleep(self.policy.retry_backoff_seconds)

        return None

    @staticmethod
    def _parse_route(destination: Coordinate, status_code: int, data: Any) -> LookupOutcome:
        """Turn a decoded OSRM body into a RouteResult, or a PROVIDER_LOGICAL failure."""
        if not isinstance(data, dict):
            return LookupFailure(destination, LookupFailureKind.PROVIDER_LOGICAL,
                                 "response body is not a JSON object", status_code)

        if data.get("code") != OSRM_OK:
            message = data.get("message", "Unknown error")
            return LookupFailure(destination, LookupFailureKind.PROVIDER_LOGICAL,
                                 f"{data.get('code')}: {message}", status_code)

        routes = data.get("routes") or []
        if not routes:
            return LookupFailure(destination, LookupFailureKind.PROVIDER_LOGICAL,
                                 "no routes in response", status_code)

        route = routes[0] #take the first route (OSRM may return alternatives)
        try:
            duration = float(route["duration"])
            distance = float(route["distance"])
        except (KeyError, TypeError, ValueError):
            return LookupFailure(destination, LookupFailureKind.PROVIDER_LOGICAL,
                                 "route is missing duration/distance", status_code)

        #Normalize output to internal format
        return RouteResult(destination=destination, duration=duration, distance=distance)

        #----------------
        # Public methods
        #----------------
    def lookup_route(self, source: Coordinate, destination: Coordinate) -> LookupOutcome:
        """
        calls the OSRM /route endpoint for source -> destination.

        Returns:
            RouteResult(destination, duration (s), distance (m)) on success
            LookupFailure(kind=NETWORK | RATE_LIMITED | PROVIDER_STATUS | PROVIDER_LOGICAL) otherwise
        """
        url = self.route_url(source, destination)

        try:
            response = self._get_with_429_retries(url)
        except requests.RequestException as e:
            return LookupFailure(destination, LookupFailureKind.NETWORK, str(e))

        if response is None:
            logger.warning("OSRM still rate limiting after %d attempts: %s",
                           self.policy.retry_attempts, url)
            return LookupFailure(destination, LookupFailureKind.RATE_LIMITED,
                                 f"gave up after {self.policy.retry_attempts} attempts",
                                 TOO_MANY_REQUESTS)

        if response.status_code not in READABLE_STATUS_CODES:
            return LookupFailure(destination, LookupFailureKind.PROVIDER_STATUS,
                                 f"response code: {response.status_code}", response.status_code)

        try:
            data = response.json() #OSRM returns a JSON response with code and routes
        except ValueError as e:
            return LookupFailure(destination, LookupFailureKind.PROVIDER_LOGICAL,
                                 f"invalid JSON: {e}", response.status_code)
        except requests.RequestException as e:
            # body read failed midway
            return LookupFailure(destination, LookupFailureKind.NETWORK, str(e))

        return self._parse_route(destination, response.status_code, data)


def osrm_client_from_env(policy: Optional[RoutingPolicy] = None) -> OSRMClient:
    """
    Build a client from OSRM_BASE_URL (read from the environment / .env).
    """
    load_dotenv()
    return OSRMClient(
        base_url=os.getenv("OSRM_BASE_URL", DEFAULT_BASE_URL),
        policy=policy,
    )
