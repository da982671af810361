"""Composition root – build the push pipeline and the location gate from config."""
from __future__ import annotations

from dataclasses import dataclass

from roamease_realtime.application.notifications import (
    BulkPushDispatcher,
    PayloadBuilder,
    PushDispatcher,
    PushNotificationService,
    PushTransport,
    SubscriptionRepository,
)
from roamease_realtime.application.rate_limit import (
    InMemoryRateLimitStore,
    RateLimiter,
    RateLimitStore,
    location_update_limiter,
)
from roamease_realtime.config.settings import RealtimeConfig
from roamease_realtime.kernel.time import Clock
from roamease_realtime.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PushPipeline:
    dispatcher: PushDispatcher
    bulk: BulkPushDispatcher
    service: PushNotificationService


def build_push_pipeline(
    config: RealtimeConfig,
    *,
    transport: PushTransport | None = None,
    subscriptions: SubscriptionRepository | None = None,
) -> PushPipeline:
    """Wire dispatcher, fan-out and service.

    Without an explicit *transport* a :class:`WebPushTransport` is created
    when VAPID credentials are complete; otherwise the dispatcher runs in
    simulated mode.
    """
    if transport is None and config.vapid.is_configured:
        from roamease_realtime.adapters.webpush import WebPushTransport

        transport = WebPushTransport(
            config.vapid,
            timeout_seconds=config.push.timeout_seconds,
            ttl_seconds=config.push.ttl_seconds,
        )

    builder = PayloadBuilder(app_name=config.push.app_name, frontend_base_url=config.frontend.url)
    dispatcher = PushDispatcher(config.vapid, transport, builder)
    bulk = BulkPushDispatcher(dispatcher, max_concurrency=config.push.max_concurrency)
    return PushPipeline(
        dispatcher=dispatcher,
        bulk=bulk,
        service=PushNotificationService(bulk, subscriptions),
    )


def build_location_rate_limiter(
    config: RealtimeConfig,
    *,
    store: RateLimitStore | None = None,
    clock: Clock | None = None,
) -> RateLimiter:
    """Location-update limiter over Redis when configured, else an in-process store."""
    settings = config.location_rate_limit
    if store is None:
        if settings.redis_url:
            from roamease_realtime.adapters.redis import RedisRateLimitStore

            store = RedisRateLimitStore(settings.redis_url)
        else:
            logger.warning(
                "rate_limit.in_memory_store",
                detail="limits are per process; set LOCATION_RATE_LIMIT_REDIS_URL when scaling out",
            )
            store = InMemoryRateLimitStore(clock=clock)
    return location_update_limiter(store, settings, clock=clock)


__all__ = ["PushPipeline", "build_location_rate_limiter", "build_push_pipeline"]
