"""Application notifications – PayloadBuilder (Notification -> Web Push payload)."""
from __future__ import annotations

import uuid
from types import MappingProxyType
from typing import Callable, Mapping

from roamease_realtime.application.notifications.models import (
    Action,
    Notification,
    NotificationType,
    Payload,
    PayloadAction,
    PayloadData,
)
from roamease_realtime.application.notifications.priority import is_high_priority
from roamease_realtime.config.settings.realtime import DEFAULT_FRONTEND_URL

DEFAULT_ICON = "/favicon.ico"
DEFAULT_ROUTE = "/notifications"
MAX_ACTIONS = 2

DEFAULT_TYPE_ROUTES: Mapping[str, str] = MappingProxyType(
    {
        NotificationType.SHIPMENT_CREATED.value: "/user/dashboard",
        NotificationType.BID_RECEIVED.value: "/user/dashboard",
        NotificationType.BID_ACCEPTED.value: "/logistics/dashboard",
        NotificationType.SHIPMENT_DELIVERED.value: "/user/dashboard",
        NotificationType.VERIFICATION_APPROVED.value: "/logistics/dashboard",
        NotificationType.NEW_SHIPMENT_AVAILABLE.value: "/logistics/dashboard",
    }
)


def _fallback_tag() -> str:
    return f"notification_{uuid.uuid4().hex}"


class PayloadBuilder:
    """Pure mapping from a :class:`Notification` to a :class:`Payload`.

    Every optional Notification field may be absent. Apart from the tag
    fallback for id-less notifications the output is deterministic.
    """

    def __init__(
        self,
        app_name: str = "RoamEase",
        frontend_base_url: str = DEFAULT_FRONTEND_URL,
        *,
        icon: str = DEFAULT_ICON,
        badge: str = DEFAULT_ICON,
        type_routes: Mapping[str, str] | None = None,
        tag_factory: Callable[[], str] = _fallback_tag,
    ) -> None:
        self._app_name = app_name
        self._base_url = frontend_base_url.rstrip("/")
        self._icon = icon
        self._badge = badge
        self._type_routes = DEFAULT_TYPE_ROUTES if type_routes is None else type_routes
        self._tag_factory = tag_factory

    def build(self, notification: Notification) -> Payload:
        return Payload(
            title=f"{self._app_name}: {notification.title}",
            body=notification.message,
            icon=self._icon,
            badge=self._badge,
            tag=notification.id or self._tag_factory(),
            data=PayloadData(
                notification_id=notification.id,
                type=notification.type_value,
                url=self.resolve_url(notification),
                metadata=dict(notification.metadata),
            ),
            actions=self.build_actions(notification.actions),
            require_interaction=is_high_priority(notification),
        )

    def resolve_url(self, notification: Notification) -> str:
        """First action URL, then the type route table, then ``/notifications``."""
        path: str | None = None
        if notification.actions and notification.actions[0].url:
            path = notification.actions[0].url
        if not path:
            path = self._type_routes.get(notification.type_value, DEFAULT_ROUTE)
        return self._absolute(path)

    def build_actions(self, actions: tuple[Action, ...]) -> tuple[PayloadAction, ...]:
        if not actions:
            return (PayloadAction(action="view", title="View", icon=self._icon),)
        return tuple(
            PayloadAction(action=a.action or "view", title=a.label or "View", icon=self._icon)
            for a in actions[:MAX_ACTIONS]
        )

    def _absolute(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"


__all__ = ["DEFAULT_ROUTE", "DEFAULT_TYPE_ROUTES", "MAX_ACTIONS", "PayloadBuilder"]
