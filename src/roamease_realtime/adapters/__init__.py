"""Adapters – pywebpush transport, Redis window store, FastAPI gate.

Each adapter package imports its third-party library on use; import the
subpackage you need::

    from roamease_realtime.adapters.webpush import WebPushTransport
    from roamease_realtime.adapters.redis import RedisRateLimitStore
    from roamease_realtime.adapters.fastapi import RateLimitMiddleware
"""
