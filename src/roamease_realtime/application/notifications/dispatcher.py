"""Application notifications – PushDispatcher (single-subscription send)."""
from __future__ import annotations

from typing import Any

from roamease_realtime.application.notifications.models import (
    DeliveryErrorKind,
    DeliveryResult,
    Notification,
    Subscription,
)
from roamease_realtime.application.notifications.payload import PayloadBuilder
from roamease_realtime.application.notifications.transport import PushTransport, TransportOutcome
from roamease_realtime.config.settings import VapidSettings
from roamease_realtime.observability.logging import get_logger, truncate_endpoint

logger = get_logger(__name__)

SUBSCRIPTION_EXPIRED = "subscription expired"


class PushDispatcher:
    """Deliver one notification to one subscription and classify the outcome.

    With incomplete VAPID settings the dispatcher runs in simulated mode:
    it logs the payload, reports ``simulated=True`` success, and never
    touches the transport. No exception escapes :meth:`send`.
    """

    def __init__(
        self,
        vapid: VapidSettings,
        transport: PushTransport | None,
        payload_builder: PayloadBuilder | None = None,
    ) -> None:
        self._vapid = vapid
        self._transport = transport
        self._builder = payload_builder or PayloadBuilder()
        if self.is_configured:
            logger.info("push.dispatcher.configured", provider="web-push")
        else:
            logger.warning("push.dispatcher.simulated", reason="missing VAPID credentials or transport")

    @property
    def is_configured(self) -> bool:
        return self._vapid.is_configured and self._transport is not None

    @property
    def public_key(self) -> str | None:
        """VAPID application server key the browser subscribes with."""
        return self._vapid.public_key or None

    def status(self) -> dict[str, Any]:
        return {
            "configured": self.is_configured,
            "provider": "Web Push (VAPID)",
            "publicKey": self.public_key or "Not configured",
        }

    async def send(self, subscription: Subscription, notification: Notification) -> DeliveryResult:
        log = logger.bind(
            subscription_id=subscription.id,
            endpoint=truncate_endpoint(subscription.endpoint),
            notification_id=notification.id,
            notification_type=notification.type_value,
        )
        if not self.is_configured or self._transport is None:
            return self._simulate(subscription, notification, log)

        try:
            data = self._builder.build(notification).to_json()
        except Exception as exc:  # noqa: BLE001
            log.exception("push.payload_failed")
            return DeliveryResult.failed(subscription.id, str(exc), DeliveryErrorKind.INTERNAL)

        try:
            outcome = await self._transport.deliver(subscription, data)
        except Exception as exc:  # noqa: BLE001
            log.warning("push.transport_error", error=str(exc), error_type=type(exc).__name__)
            return DeliveryResult.failed(subscription.id, str(exc) or type(exc).__name__)

        return self._interpret(subscription, outcome, log)

    def _simulate(self, subscription: Subscription, notification: Notification, log: Any) -> DeliveryResult:
        """Unconfigured delivery always succeeds; the payload is built only to be logged."""
        try:
            payload: Any = self._builder.build(notification).to_dict()
        except Exception as exc:  # noqa: BLE001
            payload = None
            log.warning("push.simulated_payload_failed", error=str(exc), error_type=type(exc).__name__)
        log.info("push.simulated", payload=payload)
        return DeliveryResult.simulated_delivery(subscription.id)

    def _interpret(self, subscription: Subscription, outcome: TransportOutcome, log: Any) -> DeliveryResult:
        if outcome.success:
            log.info("push.sent", status_code=outcome.status_code)
            return DeliveryResult.delivered(subscription.id, outcome.status_code)

        if outcome.gone:
            log.info("push.subscription_expired", status_code=outcome.status_code)
            return DeliveryResult.failed(
                subscription.id, SUBSCRIPTION_EXPIRED, DeliveryErrorKind.EXPIRED, outcome.status_code
            )

        kind = DeliveryErrorKind.TIMEOUT if outcome.timed_out else DeliveryErrorKind.TRANSIENT
        error = outcome.error or f"push service responded {outcome.status_code}"
        log.warning("push.failed", status_code=outcome.status_code, error=error, kind=kind.value)
        return DeliveryResult.failed(subscription.id, error, kind, outcome.status_code)


__all__ = ["SUBSCRIPTION_EXPIRED", "PushDispatcher"]
