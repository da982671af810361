"""Application rate limiting – Quota, RateLimitDecision, RateLimitResult, RateLimiter."""
from __future__ import annotations

import dataclasses
import math
from datetime import datetime
from enum import Enum

from roamease_realtime.application.rate_limit.store import RateLimitStore
from roamease_realtime.config.validation import InvalidSettingValueError
from roamease_realtime.kernel.errors import RateLimitError
from roamease_realtime.kernel.time import Clock, SystemClock, from_timestamp
from roamease_realtime.observability.logging import get_logger

logger = get_logger(__name__)


class RateLimitDecision(str, Enum):
    ALLOWED = "ALLOWED"
    DENIED = "DENIED"


@dataclasses.dataclass(frozen=True)
class Quota:
    """Fixed-window quota rule: at most ``limit`` hits per ``window_seconds`` per key."""
    key: str
    limit: int
    window_seconds: float

    def __post_init__(self) -> None:
        if not self.key:
            raise InvalidSettingValueError("quota.key", self.key, "must not be empty")
        if self.limit < 1:
            raise InvalidSettingValueError("quota.limit", self.limit, "must be >= 1")
        if self.window_seconds <= 0:
            raise InvalidSettingValueError("quota.window_seconds", self.window_seconds, "must be > 0")

    @property
    def window_label(self) -> str:
        return f"{self.limit} req/{self.window_seconds:g}s"

    def key_for(self, identifier: str) -> str:
        return f"{self.key}:{identifier}"


@dataclasses.dataclass(frozen=True)
class RateLimitResult:
    """Result of a rate limit check, with everything needed for response headers."""
    decision: RateLimitDecision
    key: str
    limit: int
    remaining: int
    window_start: float
    reset_at: datetime
    reset_after_seconds: float

    @property
    def allowed(self) -> bool:
        return self.decision == RateLimitDecision.ALLOWED

    @property
    def retry_after_seconds(self) -> int:
        return max(1, math.ceil(self.reset_after_seconds))

    def headers(self) -> dict[str, str]:
        """IETF draft ``RateLimit-*`` headers; ``Retry-After`` is added on deny."""
        headers = {
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(math.ceil(self.reset_after_seconds)),
        }
        if not self.allowed:
            headers["Retry-After"] = str(self.retry_after_seconds)
        return headers


class RateLimiter:
    """Accept/reject gate over a :class:`RateLimitStore` for one :class:`Quota`.

    The limiter only derives keys and interprets the store's window state;
    atomicity lives in the store, so the same limiter runs against the
    in-process store in tests and Redis in production.
    """

    def __init__(self, store: RateLimitStore, quota: Quota, clock: Clock | None = None) -> None:
        self._store = store
        self._quota = quota
        self._clock = clock or SystemClock()

    @property
    def quota(self) -> Quota:
        return self._quota

    async def check(self, identifier: str) -> RateLimitResult:
        key = self._quota.key_for(identifier)
        state = await self._store.increment(key, self._quota.limit, self._quota.window_seconds)
        now = self._clock.timestamp()
        result = RateLimitResult(
            decision=RateLimitDecision.ALLOWED if state.allowed else RateLimitDecision.DENIED,
            key=key,
            limit=self._quota.limit,
            remaining=max(0, self._quota.limit - state.count),
            window_start=state.window_start,
            reset_at=from_timestamp(state.window_end),
            reset_after_seconds=max(0.0, state.window_end - now),
        )
        if not result.allowed:
            logger.info(
                "rate_limit.denied",
                key=key,
                limit=result.limit,
                reset_after_seconds=round(result.reset_after_seconds, 3),
            )
        return result

    async def enforce(self, identifier: str, message: str | None = None) -> RateLimitResult:
        """Like :meth:`check` but raise :class:`RateLimitError` on deny.

        The error carries the denied result's headers so an HTTP layer can
        copy them onto the 429 response.
        """
        result = await self.check(identifier)
        if not result.allowed:
            raise RateLimitError(
                message or f"Rate limit exceeded for {self._quota.key} ({self._quota.window_label})",
                key=result.key,
                retry_after_seconds=result.reset_after_seconds,
                headers=result.headers(),
            )
        return result

    async def release(self, result: RateLimitResult) -> None:
        """Give back an admitted hit, e.g. when the guarded request failed."""
        if not result.allowed:
            return
        await self._store.release(result.key, result.window_start)

    async def reset(self, identifier: str) -> None:
        await self._store.reset(self._quota.key_for(identifier))


__all__ = ["Quota", "RateLimitDecision", "RateLimitResult", "RateLimiter"]
