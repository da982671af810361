"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract wall clock so window arithmetic is testable."""

    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return datetime.now(UTC).timestamp()


class FrozenClock:
    """Test clock pinned to a fixed point in time, moved only by :meth:`advance`."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def advance(self, seconds: float = 0.0, **kwargs: float) -> None:
        """Advance the frozen time by *seconds* plus any ``timedelta`` kwargs."""
        self._fixed += timedelta(seconds=seconds, **kwargs)


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


def from_timestamp(ts: float) -> datetime:
    """UTC-aware datetime for a POSIX timestamp."""
    return datetime.fromtimestamp(ts, UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "from_timestamp", "utc_now"]
