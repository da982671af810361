"""Application notifications – PushTransport port and transport outcome."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from roamease_realtime.application.notifications.models import Subscription

GONE = 410


@dataclass(frozen=True)
class TransportOutcome:
    """What the push service said about one delivery attempt."""

    success: bool
    status_code: int | None = None
    error: str | None = None
    timed_out: bool = False

    @property
    def gone(self) -> bool:
        return self.status_code == GONE

    @classmethod
    def ok(cls, status_code: int = 201) -> "TransportOutcome":
        return cls(success=True, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: int | None = None) -> "TransportOutcome":
        return cls(success=False, status_code=status_code, error=error)

    @classmethod
    def timeout(cls, error: str = "push service timed out") -> "TransportOutcome":
        return cls(success=False, error=error, timed_out=True)


@runtime_checkable
class PushTransport(Protocol):
    """Port: hand one serialized payload to the Web Push service for *subscription*."""

    async def deliver(self, subscription: Subscription, data: str) -> TransportOutcome: ...


__all__ = ["GONE", "PushTransport", "TransportOutcome"]
