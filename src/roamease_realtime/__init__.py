"""
roamease_realtime – real-time event delivery core for the RoamEase marketplace.

Import path convention::

    from roamease_realtime.application.notifications import PushDispatcher, Notification
    from roamease_realtime.application.rate_limit import RateLimiter, LOCATION_UPDATE_QUOTA
    from roamease_realtime.adapters.fastapi import RateLimitMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
