"""Application notifications – SubscriptionRepository port + in-memory fake."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from roamease_realtime.application.notifications.models import Subscription


@runtime_checkable
class SubscriptionRepository(Protocol):
    """Port: the persistence layer that owns push subscriptions."""

    async def remove_many(self, subscription_ids: Iterable[str]) -> int: ...


class InMemorySubscriptionRepository:
    """Dict-backed SubscriptionRepository for tests and local runs."""

    def __init__(self, subscriptions: Iterable[Subscription] = ()) -> None:
        self._items: dict[str, Subscription] = {s.id: s for s in subscriptions}

    async def add(self, subscription: Subscription) -> None:
        self._items[subscription.id] = subscription

    async def for_user(self, user_id: str) -> list[Subscription]:
        return [s for s in self._items.values() if s.user_id == user_id]

    async def remove_many(self, subscription_ids: Iterable[str]) -> int:
        removed = 0
        for sid in subscription_ids:
            if self._items.pop(sid, None) is not None:
                removed += 1
        return removed

    def __contains__(self, subscription_id: object) -> bool:
        return subscription_id in self._items

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["InMemorySubscriptionRepository", "SubscriptionRepository"]
