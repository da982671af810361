"""Application notifications – BulkPushDispatcher (fan-out to many subscriptions)."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Sequence

from roamease_realtime.application.notifications.dispatcher import PushDispatcher
from roamease_realtime.application.notifications.models import (
    DeliveryErrorKind,
    DeliveryResult,
    Notification,
    Subscription,
)
from roamease_realtime.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeliveryReport:
    """Aggregate view over one fan-out's results."""

    total: int
    succeeded: int
    failed: int
    simulated: int
    expired_subscription_ids: tuple[str, ...]


def summarize(results: Sequence[DeliveryResult]) -> DeliveryReport:
    succeeded = sum(1 for r in results if r.success)
    return DeliveryReport(
        total=len(results),
        succeeded=succeeded,
        failed=len(results) - succeeded,
        simulated=sum(1 for r in results if r.simulated),
        expired_subscription_ids=tuple(r.subscription_id for r in results if r.should_remove),
    )


class BulkPushDispatcher:
    """Fan one notification out over many subscriptions with bounded concurrency.

    Results come back in input order, one per subscription. A fault while
    handling one subscription becomes that item's failed result; the batch
    as a whole never raises and never deletes subscriptions.
    """

    def __init__(self, dispatcher: PushDispatcher, max_concurrency: int = 10) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._dispatcher = dispatcher
        self._max_concurrency = max_concurrency

    async def send_to_many(
        self,
        subscriptions: Sequence[Subscription],
        notification: Notification,
    ) -> list[DeliveryResult]:
        if not subscriptions:
            return []

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _one(subscription: Subscription) -> DeliveryResult:
            async with semaphore:
                try:
                    return await self._dispatcher.send(subscription, notification)
                except Exception as exc:  # noqa: BLE001
                    logger.exception("push.bulk.item_failed", subscription_id=subscription.id)
                    return DeliveryResult.failed(
                        subscription.id, str(exc) or type(exc).__name__, DeliveryErrorKind.INTERNAL
                    )

        results = list(await asyncio.gather(*(_one(s) for s in subscriptions)))
        report = summarize(results)
        logger.info(
            "push.bulk.completed",
            notification_id=notification.id,
            total=report.total,
            succeeded=report.succeeded,
            failed=report.failed,
            expired=len(report.expired_subscription_ids),
        )
        return results


__all__ = ["BulkPushDispatcher", "DeliveryReport", "summarize"]
