"""Kernel time – Clock port + implementations."""
from roamease_realtime.kernel.time.clock import Clock, FrozenClock, SystemClock, from_timestamp, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "from_timestamp", "utc_now"]
