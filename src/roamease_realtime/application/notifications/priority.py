"""Application notifications – priority classification."""
from __future__ import annotations

from roamease_realtime.application.notifications.models import Notification, NotificationType, Priority

HIGH_PRIORITY_TYPES: frozenset[str] = frozenset(
    {
        NotificationType.BID_RECEIVED.value,
        NotificationType.BID_ACCEPTED.value,
        NotificationType.SHIPMENT_DELIVERED.value,
        NotificationType.VERIFICATION_APPROVED.value,
        NotificationType.PAYMENT_FAILED.value,
        NotificationType.DISPUTE_CREATED.value,
    }
)

HIGH_PRIORITY_LEVELS: frozenset[str] = frozenset({Priority.HIGH.value, Priority.URGENT.value})


def is_high_priority(notification: Notification) -> bool:
    """True when the browser should keep the notification on screen until acted on."""
    return (
        notification.type_value in HIGH_PRIORITY_TYPES
        or notification.priority_value in HIGH_PRIORITY_LEVELS
    )


__all__ = ["HIGH_PRIORITY_LEVELS", "HIGH_PRIORITY_TYPES", "is_high_priority"]
