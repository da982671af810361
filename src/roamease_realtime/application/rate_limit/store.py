"""Application rate limiting – RateLimitStore port and in-process implementation."""
from __future__ import annotations

import abc
import dataclasses
import threading

from roamease_realtime.kernel.time import Clock, SystemClock


@dataclasses.dataclass(frozen=True)
class WindowState:
    """Snapshot of one key's fixed window after a hit.

    ``count`` is the number of admitted requests in the window, including
    this one when ``allowed`` is true.
    """

    allowed: bool
    count: int
    window_start: float
    window_seconds: float

    @property
    def window_end(self) -> float:
        return self.window_start + self.window_seconds


class RateLimitStore(abc.ABC):
    """Port: keyed fixed-window counters.

    ``increment`` must read the count, compare it to *limit* and increment
    only when admitted, as one atomic operation. A denied hit leaves the
    window untouched.
    """

    @abc.abstractmethod
    async def increment(self, key: str, limit: int, window_seconds: float) -> WindowState: ...

    @abc.abstractmethod
    async def release(self, key: str, window_start: float) -> None:
        """Un-count one admitted hit if the window that admitted it is still current."""

    @abc.abstractmethod
    async def reset(self, key: str) -> None: ...


class InMemoryRateLimitStore(RateLimitStore):
    """Single-process store guarded by one lock.

    A key's window is replaced when it is hit after expiry. At most once per
    window every expired key is evicted, so idle ``(user, shipment)`` keys
    do not accumulate. Counters are not shared between processes, so
    horizontally scaled deployments must use the Redis store instead.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._lock = threading.Lock()
        # key -> (window_start, count, window_seconds)
        self._windows: dict[str, tuple[float, int, float]] = {}
        self._next_sweep = 0.0

    async def increment(self, key: str, limit: int, window_seconds: float) -> WindowState:
        now = self._clock.timestamp()
        with self._lock:
            if now >= self._next_sweep:
                self._evict_expired(now)
                self._next_sweep = now + window_seconds

            window_start, count, _ = self._windows.get(key, (now, 0, window_seconds))
            if now - window_start >= window_seconds:
                window_start, count = now, 0

            if count >= limit:
                return WindowState(False, count, window_start, window_seconds)

            count += 1
            self._windows[key] = (window_start, count, window_seconds)
            return WindowState(True, count, window_start, window_seconds)

    async def release(self, key: str, window_start: float) -> None:
        with self._lock:
            current = self._windows.get(key)
            if current is None or current[0] != window_start or current[1] <= 0:
                return
            self._windows[key] = (window_start, current[1] - 1, current[2])

    async def reset(self, key: str) -> None:
        with self._lock:
            self._windows.pop(key, None)

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, (start, _, window) in self._windows.items() if now - start >= window]
        for k in expired:
            del self._windows[k]

    def __len__(self) -> int:
        return len(self._windows)


__all__ = ["InMemoryRateLimitStore", "RateLimitStore", "WindowState"]
