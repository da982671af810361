"""Application notifications – Web Push payloads, dispatch and fan-out."""
from roamease_realtime.application.notifications.bulk import BulkPushDispatcher, DeliveryReport, summarize
from roamease_realtime.application.notifications.dispatcher import SUBSCRIPTION_EXPIRED, PushDispatcher
from roamease_realtime.application.notifications.models import (
    Action,
    DeliveryErrorKind,
    DeliveryResult,
    Notification,
    NotificationType,
    Payload,
    PayloadAction,
    PayloadData,
    Priority,
    Subscription,
    SubscriptionKeys,
)
from roamease_realtime.application.notifications.payload import (
    DEFAULT_ROUTE,
    DEFAULT_TYPE_ROUTES,
    PayloadBuilder,
)
from roamease_realtime.application.notifications.priority import HIGH_PRIORITY_TYPES, is_high_priority
from roamease_realtime.application.notifications.service import PushNotificationService
from roamease_realtime.application.notifications.subscriptions import (
    InMemorySubscriptionRepository,
    SubscriptionRepository,
)
from roamease_realtime.application.notifications.transport import GONE, PushTransport, TransportOutcome

__all__ = [
    "Action",
    "BulkPushDispatcher",
    "DEFAULT_ROUTE",
    "DEFAULT_TYPE_ROUTES",
    "DeliveryErrorKind",
    "DeliveryReport",
    "DeliveryResult",
    "GONE",
    "HIGH_PRIORITY_TYPES",
    "InMemorySubscriptionRepository",
    "Notification",
    "NotificationType",
    "Payload",
    "PayloadAction",
    "PayloadBuilder",
    "PayloadData",
    "Priority",
    "PushDispatcher",
    "PushNotificationService",
    "PushTransport",
    "SUBSCRIPTION_EXPIRED",
    "Subscription",
    "SubscriptionKeys",
    "SubscriptionRepository",
    "TransportOutcome",
    "is_high_priority",
    "summarize",
]
