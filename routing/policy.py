"""
Purpose: Central configuration for OSRM lookups and request fan-out.
What it does:

Stores all tunable thresholds/caps for talking to OSRM:

REQUEST_TIMEOUT_SECONDS = 10
RETRY_ATTEMPTS = 20          (only HTTP 429 is retried)
RETRY_BACKOFF_SECONDS = 1    (fixed, no jitter)

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class RoutingPolicy:
    """
    Central configuration for the OSRM client and the route aggregator.
    """

    # --- Provider request shape ---
    profile: str = "driving"

    # --- Transport ---
    # How long a single GET may take before it counts as a network failure.
    request_timeout_seconds: float = 10.0

    # --- Rate limiting ---
    # Total GETs per destination while OSRM keeps answering 429.
    # Worst case per destination is roughly timeout + attempts * backoff.
    retry_attempts: int = 20
    retry_backoff_seconds: float = 1.0

    # --- Fan-out ---
    # None means one worker per destination.
    max_workers: Optional[int] = None

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not self.profile:
            raise ValueError("profile must not be empty")

        if self.request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        if self.retry_attempts < 1:
            raise ValueError("retry_attempts must be >= 1")

        if self.retry_backoff_seconds < 0:
            raise ValueError("retry_backoff_seconds must be >= 0")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be >= 1 when set")


def default_routing_policy() -> RoutingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = RoutingPolicy()
    p.validate()
    return p


def routing_policy_from_env() -> RoutingPolicy:
    """
    Build a policy from the environment (and .env when present).
    Unset variables keep the dataclass defaults.
    """
    load_dotenv()
    defaults = RoutingPolicy()

    max_workers = os.getenv("ROUTES_MAX_WORKERS")

    p = RoutingPolicy(
        profile=os.getenv("OSRM_PROFILE", defaults.profile),
        request_timeout_seconds=float(os.getenv("OSRM_TIMEOUT", defaults.request_timeout_seconds)),
        retry_attempts=int(os.getenv("OSRM_RETRY_ATTEMPTS", defaults.retry_attempts)),
        retry_backoff_seconds=float(os.getenv("OSRM_RETRY_BACKOFF", defaults.retry_backoff_seconds)),
        max_workers=int(max_workers) if max_workers else None,
    )
    p.validate()
    return p
