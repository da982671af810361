"""Application – push delivery and rate limiting use cases (framework-agnostic)."""

from roamease_realtime.application.notifications import (
    BulkPushDispatcher,
    Notification,
    PushDispatcher,
    PushNotificationService,
    Subscription,
)
from roamease_realtime.application.rate_limit import Quota, RateLimitDecision, RateLimiter

__all__ = [
    "BulkPushDispatcher",
    "Notification",
    "PushDispatcher",
    "PushNotificationService",
    "Quota",
    "RateLimitDecision",
    "RateLimiter",
    "Subscription",
]
