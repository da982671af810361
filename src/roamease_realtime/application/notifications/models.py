"""Application notifications – subscription, notification, payload and delivery models."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class NotificationType(str, Enum):
    """Marketplace events that can produce a user notification."""

    SHIPMENT_CREATED = "shipment_created"
    SHIPMENT_UPDATED = "shipment_updated"
    SHIPMENT_DELETED = "shipment_deleted"
    SHIPMENT_CANCELLED = "shipment_cancelled"
    SHIPMENT_STATUS_UPDATED = "shipment_status_updated"
    SHIPMENT_ASSIGNED = "shipment_assigned"
    SHIPMENT_PICKED_UP = "shipment_picked_up"
    SHIPMENT_DELIVERED = "shipment_delivered"
    SHIPMENT_RATED = "shipment_rated"
    NEW_SHIPMENT_AVAILABLE = "new_shipment_available"
    BID_PLACED = "bid_placed"
    BID_RECEIVED = "bid_received"
    BID_ACCEPTED = "bid_accepted"
    BID_REJECTED = "bid_rejected"
    PRICE_UPDATE_REQUEST = "price_update_request"
    PRICE_UPDATE_RESPONSE = "price_update_response"
    PAYMENT_RECEIVED = "payment_received"
    PAYMENT_PROCESSED = "payment_processed"
    PAYMENT_FAILED = "payment_failed"
    PAYMENT_ISSUE = "payment_issue"
    DISPUTE_CREATED = "dispute_created"
    DISPUTE_RESOLVED = "dispute_resolved"
    DISPUTE_ESCALATED = "dispute_escalated"
    VERIFICATION_REQUESTED = "verification_requested"
    VERIFICATION_APPROVED = "verification_approved"
    VERIFICATION_REJECTED = "verification_rejected"
    ACCOUNT_SUSPENDED = "account_suspended"
    ACCOUNT_REACTIVATED = "account_reactivated"
    NEW_MESSAGE = "new_message"
    MESSAGE_RECEIVED = "message_received"
    CONVERSATION_STARTED = "conversation_started"
    CONVERSATION_UPDATED = "conversation_updated"
    REPORT_CREATED = "report_created"
    REPORT_UPDATED = "report_updated"
    REPORT_RESOLVED = "report_resolved"
    REPORT_CLOSED = "report_closed"
    REPORT_REJECTED = "report_rejected"
    TRACKING_STARTED = "tracking_started"
    TRACKING_STOPPED = "tracking_stopped"
    TRACKING_LOCATION_UPDATE = "tracking_location_update"
    TRACKING_MILESTONE_REACHED = "tracking_milestone_reached"
    NEW_USER_REGISTERED = "new_user_registered"
    NEW_LOGISTICS_REGISTERED = "new_logistics_registered"
    SYSTEM_ALERT = "system_alert"
    HIGH_VOLUME_ACTIVITY = "high_volume_activity"
    SUSPICIOUS_ACTIVITY = "suspicious_activity"
    PLATFORM_MAINTENANCE = "platform_maintenance"
    FEATURE_UPDATE = "feature_update"
    POLICY_UPDATE = "policy_update"


class Priority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class DeliveryErrorKind(str, Enum):
    """Classification of a failed delivery attempt."""

    EXPIRED = "expired"
    TRANSIENT = "transient"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass(frozen=True)
class SubscriptionKeys:
    p256dh: str
    auth: str


@dataclass(frozen=True)
class Subscription:
    """A browser-issued Web Push endpoint; never mutated, only deleted."""

    id: str
    endpoint: str
    keys: SubscriptionKeys
    user_id: str | None = None

    def to_webpush_dict(self) -> dict[str, Any]:
        """Subscription info in the shape ``pywebpush`` expects."""
        return {
            "endpoint": self.endpoint,
            "keys": {"p256dh": self.keys.p256dh, "auth": self.keys.auth},
        }


@dataclass(frozen=True)
class Action:
    """A notification button; ``url`` is a frontend-relative deep link."""

    action: str = "view"
    label: str = "View"
    url: str | None = None


@dataclass(frozen=True)
class Notification:
    """A persisted notification record, read-only to the delivery core."""

    type: NotificationType | str
    title: str
    message: str
    id: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)
    actions: tuple[Action, ...] = ()
    priority: Priority | str | None = None
    recipient_id: str | None = None

    def __post_init__(self) -> None:
        # freeze caller-owned containers so builders cannot mutate them
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))
        object.__setattr__(self, "actions", tuple(self.actions or ()))

    @property
    def type_value(self) -> str:
        return self.type.value if isinstance(self.type, Enum) else str(self.type)

    @property
    def priority_value(self) -> str | None:
        if self.priority is None:
            return None
        return self.priority.value if isinstance(self.priority, Enum) else str(self.priority)


@dataclass(frozen=True)
class PayloadAction:
    action: str
    title: str
    icon: str

    def to_dict(self) -> dict[str, str]:
        return {"action": self.action, "title": self.title, "icon": self.icon}


@dataclass(frozen=True)
class PayloadData:
    notification_id: str | None
    type: str
    url: str
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "notificationId": self.notification_id,
            "type": self.type,
            "url": self.url,
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class Payload:
    """Wire-ready Web Push message; derived from a Notification, never persisted."""

    title: str
    body: str
    icon: str
    badge: str
    tag: str
    data: PayloadData
    actions: tuple[PayloadAction, ...]
    require_interaction: bool
    silent: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "body": self.body,
            "icon": self.icon,
            "badge": self.badge,
            "tag": self.tag,
            "data": self.data.to_dict(),
            "actions": [a.to_dict() for a in self.actions],
            "requireInteraction": self.require_interaction,
            "silent": self.silent,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"), default=str)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of one (notification, subscription) delivery attempt."""

    subscription_id: str
    success: bool
    error: str | None = None
    error_kind: DeliveryErrorKind | None = None
    status_code: int | None = None
    should_remove: bool = False
    simulated: bool = False

    @classmethod
    def delivered(cls, subscription_id: str, status_code: int | None = None) -> "DeliveryResult":
        return cls(subscription_id=subscription_id, success=True, status_code=status_code)

    @classmethod
    def simulated_delivery(cls, subscription_id: str) -> "DeliveryResult":
        return cls(subscription_id=subscription_id, success=True, simulated=True)

    @classmethod
    def failed(
        cls,
        subscription_id: str,
        error: str,
        kind: DeliveryErrorKind = DeliveryErrorKind.TRANSIENT,
        status_code: int | None = None,
    ) -> "DeliveryResult":
        return cls(
            subscription_id=subscription_id,
            success=False,
            error=error,
            error_kind=kind,
            status_code=status_code,
            should_remove=kind == DeliveryErrorKind.EXPIRED,
        )


__all__ = [
    "Action",
    "DeliveryErrorKind",
    "DeliveryResult",
    "Notification",
    "NotificationType",
    "Payload",
    "PayloadAction",
    "PayloadData",
    "Priority",
    "Subscription",
    "SubscriptionKeys",
]
