"""Redis adapter – shared rate-limit window store."""
from roamease_realtime.adapters.redis.store import RedisRateLimitStore

__all__ = ["RedisRateLimitStore"]
