"""Application rate limiting – location-update throttling policy."""
from __future__ import annotations

from roamease_realtime.application.rate_limit.rate_limiter import Quota, RateLimiter
from roamease_realtime.application.rate_limit.store import RateLimitStore
from roamease_realtime.config.settings import LocationRateLimitSettings
from roamease_realtime.kernel.time import Clock

LOCATION_UPDATE_KEY = "location_update"
LOCATION_UPDATE_MESSAGE = (
    "Location update rate limit exceeded. Please wait before sending another update."
)

# 1 update every 5 seconds per (user, shipment)
LOCATION_UPDATE_QUOTA = Quota(key=LOCATION_UPDATE_KEY, limit=1, window_seconds=5)


def location_update_identifier(user_id: str, shipment_id: str) -> str:
    """Scope throttling to the (user, shipment) pair, not the user alone."""
    return f"{user_id}:{shipment_id}"


def location_update_quota(settings: LocationRateLimitSettings) -> Quota:
    return Quota(
        key=LOCATION_UPDATE_KEY,
        limit=settings.max_requests,
        window_seconds=settings.window_seconds,
    )


def location_update_limiter(
    store: RateLimitStore,
    settings: LocationRateLimitSettings | None = None,
    clock: Clock | None = None,
) -> RateLimiter:
    quota = location_update_quota(settings) if settings is not None else LOCATION_UPDATE_QUOTA
    return RateLimiter(store, quota, clock=clock)


__all__ = [
    "LOCATION_UPDATE_KEY",
    "LOCATION_UPDATE_MESSAGE",
    "LOCATION_UPDATE_QUOTA",
    "location_update_identifier",
    "location_update_limiter",
    "location_update_quota",
]
