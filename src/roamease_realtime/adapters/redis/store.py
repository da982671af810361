"""Redis adapter – RedisRateLimitStore (fixed windows shared across processes)."""
from __future__ import annotations

from typing import Any

from roamease_realtime.application.rate_limit.store import RateLimitStore, WindowState
from roamease_realtime.kernel.errors import RateLimitStoreError


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'roamease-realtime[redis]' to use the Redis adapter") from exc


# KEYS[1] = window hash; ARGV[1] = limit; ARGV[2] = window in ms.
# Uses the server clock so every process agrees on window boundaries.
_INCREMENT_SCRIPT = """
local t = redis.call('TIME')
local now = tonumber(t[1]) * 1000 + math.floor(tonumber(t[2]) / 1000)
local limit = tonumber(ARGV[1])
local window = tonumber(ARGV[2])
local start = tonumber(redis.call('HGET', KEYS[1], 'start'))
local count = tonumber(redis.call('HGET', KEYS[1], 'count'))
if (not start) or (now - start >= window) then
  start = now
  count = 0
  redis.call('HSET', KEYS[1], 'start', start, 'count', 0)
  redis.call('PEXPIRE', KEYS[1], window)
end
if count >= limit then
  return {0, count, start}
end
count = redis.call('HINCRBY', KEYS[1], 'count', 1)
return {1, count, start}
"""

# KEYS[1] = window hash; ARGV[1] = window start (ms) that admitted the hit.
_RELEASE_SCRIPT = """
local start = redis.call('HGET', KEYS[1], 'start')
if (not start) or (tonumber(start) ~= tonumber(ARGV[1])) then
  return 0
end
local count = tonumber(redis.call('HGET', KEYS[1], 'count'))
if count and count > 0 then
  redis.call('HINCRBY', KEYS[1], 'count', -1)
  return 1
end
return 0
"""


class RedisRateLimitStore(RateLimitStore):
    """Atomic read-compare-increment in a Lua script.

    Each key is a hash ``{start, count}`` expiring with its window, so idle
    keys vanish without a sweeper. Required whenever more than one process
    serves the rate-limited route.
    """

    def __init__(self, url: str | None = None, *, client: Any = None, prefix: str = "rl", **kwargs: Any) -> None:
        if client is None:
            if not url:
                raise ValueError("RedisRateLimitStore needs a url or a client")
            client = _require_redis().from_url(url, **kwargs)
        self._client = client
        self._prefix = prefix
        self._increment = client.register_script(_INCREMENT_SCRIPT)
        self._release = client.register_script(_RELEASE_SCRIPT)

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    async def increment(self, key: str, limit: int, window_seconds: float) -> WindowState:
        window_ms = max(1, int(window_seconds * 1000))
        reply = await self._increment(keys=[self._key(key)], args=[limit, window_ms])
        try:
            allowed, count, start_ms = (int(v) for v in reply)
        except (TypeError, ValueError) as exc:
            raise RateLimitStoreError(f"Unexpected reply from rate-limit script: {reply!r}", key=key) from exc
        return WindowState(
            allowed=bool(allowed),
            count=count,
            window_start=start_ms / 1000,
            window_seconds=window_seconds,
        )

    async def release(self, key: str, window_start: float) -> None:
        await self._release(keys=[self._key(key)], args=[int(round(window_start * 1000))])

    async def reset(self, key: str) -> None:
        await self._client.delete(self._key(key))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisRateLimitStore"]
