"""Application rate limiting – store port, limiter and location-update policy."""
from roamease_realtime.application.rate_limit.policies import (
    LOCATION_UPDATE_KEY,
    LOCATION_UPDATE_MESSAGE,
    LOCATION_UPDATE_QUOTA,
    location_update_identifier,
    location_update_limiter,
    location_update_quota,
)
from roamease_realtime.application.rate_limit.rate_limiter import (
    Quota,
    RateLimitDecision,
    RateLimitResult,
    RateLimiter,
)
from roamease_realtime.application.rate_limit.store import (
    InMemoryRateLimitStore,
    RateLimitStore,
    WindowState,
)

__all__ = [
    "InMemoryRateLimitStore",
    "LOCATION_UPDATE_KEY",
    "LOCATION_UPDATE_MESSAGE",
    "LOCATION_UPDATE_QUOTA",
    "Quota",
    "RateLimitDecision",
    "RateLimitResult",
    "RateLimitStore",
    "RateLimiter",
    "WindowState",
    "location_update_identifier",
    "location_update_limiter",
    "location_update_quota",
]
