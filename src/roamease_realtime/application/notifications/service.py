"""Application notifications – PushNotificationService (inbound dispatch operation)."""
from __future__ import annotations

from typing import Sequence

from roamease_realtime.application.notifications.bulk import BulkPushDispatcher, summarize
from roamease_realtime.application.notifications.models import DeliveryResult, Notification, Subscription
from roamease_realtime.application.notifications.subscriptions import SubscriptionRepository
from roamease_realtime.observability.logging import get_logger

logger = get_logger(__name__)


class PushNotificationService:
    """Entry point for upstream domain logic (bid accepted, shipment delivered, ...).

    Delivery itself never deletes anything. When a repository is wired in,
    this service acts as the caller that turns ``should_remove`` into
    deletions after the batch completes.
    """

    def __init__(
        self,
        bulk: BulkPushDispatcher,
        subscriptions: SubscriptionRepository | None = None,
    ) -> None:
        self._bulk = bulk
        self._subscriptions = subscriptions

    async def dispatch_notification(
        self,
        notification: Notification,
        subscriptions: Sequence[Subscription],
    ) -> list[DeliveryResult]:
        if not subscriptions:
            logger.info("push.no_subscriptions", notification_id=notification.id)
            return []

        results = await self._bulk.send_to_many(subscriptions, notification)
        expired = summarize(results).expired_subscription_ids
        if expired and self._subscriptions is not None:
            await self._prune(expired)
        return results

    async def _prune(self, subscription_ids: Sequence[str]) -> None:
        # delivery results are already final; a storage failure here is logged, not raised
        try:
            removed = await self._subscriptions.remove_many(subscription_ids)  # type: ignore[union-attr]
        except Exception:  # noqa: BLE001
            logger.exception("push.prune_failed", subscription_ids=list(subscription_ids))
            return
        logger.info("push.pruned_expired", removed=removed, requested=len(subscription_ids))


__all__ = ["PushNotificationService"]
