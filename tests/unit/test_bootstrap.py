"""Unit tests for the composition root."""
from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

from roamease_realtime.adapters.webpush import WebPushTransport
from roamease_realtime.application.notifications import (
    Notification,
    NotificationType,
    Subscription,
    SubscriptionKeys,
    TransportOutcome,
)
from roamease_realtime.application.rate_limit import InMemoryRateLimitStore
from roamease_realtime.bootstrap import build_location_rate_limiter, build_push_pipeline
from roamease_realtime.config.settings import (
    FrontendSettings,
    LocationRateLimitSettings,
    PushDeliverySettings,
    RealtimeConfig,
    VapidSettings,
)
from roamease_realtime.testing.fakes import FakeClock, InMemorySubscriptionRepository, RecordingPushTransport

CONFIGURED = RealtimeConfig(
    vapid=VapidSettings(email="ops@roamease.com", public_key="BPUB", private_key="PRIV"),
    frontend=FrontendSettings(url="https://staging.roamease.com"),
    push=PushDeliverySettings(app_name="RoamEase Staging", max_concurrency=3),
)


def _sub(sid: str) -> Subscription:
    return Subscription(id=sid, endpoint=f"https://push.example/{sid}", keys=SubscriptionKeys("p", "a"))


class TestBuildPushPipeline:
    def test_unconfigured_runs_simulated(self) -> None:
        pipeline = build_push_pipeline(RealtimeConfig())
        assert pipeline.dispatcher.is_configured is False
        results = asyncio.run(
            pipeline.service.dispatch_notification(
                Notification(type=NotificationType.BID_RECEIVED, title="t", message="m"), [_sub("A")]
            )
        )
        assert results[0].simulated is True

    def test_configured_creates_webpush_transport(self) -> None:
        pipeline = build_push_pipeline(CONFIGURED)
        assert pipeline.dispatcher.is_configured is True
        assert isinstance(pipeline.dispatcher._transport, WebPushTransport)

    def test_settings_flow_into_payload_and_fan_out(self) -> None:
        transport = RecordingPushTransport({"B": TransportOutcome.failure("Gone", 410)})
        repo = InMemorySubscriptionRepository([_sub("A"), _sub("B")])
        pipeline = build_push_pipeline(CONFIGURED, transport=transport, subscriptions=repo)
        notification = Notification(id="n1", type=NotificationType.BID_ACCEPTED, title="Bid accepted", message="m")

        results = asyncio.run(pipeline.service.dispatch_notification(notification, [_sub("A"), _sub("B")]))

        assert [r.success for r in results] == [True, False]
        assert "B" not in repo
        assert '"title":"RoamEase Staging: Bid accepted"' in transport.deliveries[0].data
        assert "https://staging.roamease.com/logistics/dashboard" in transport.deliveries[0].data
        assert pipeline.bulk._max_concurrency == 3


class TestBuildLocationRateLimiter:
    def test_in_memory_without_redis_url(self) -> None:
        clock = FakeClock()
        limiter = build_location_rate_limiter(RealtimeConfig(), clock=clock)
        assert isinstance(limiter._store, InMemoryRateLimitStore)
        assert asyncio.run(limiter.check("U1:S1")).allowed
        assert not asyncio.run(limiter.check("U1:S1")).allowed

    def test_redis_when_url_set(self) -> None:
        config = RealtimeConfig(location_rate_limit=LocationRateLimitSettings(redis_url="redis://cache:6379/0"))
        with patch("roamease_realtime.adapters.redis.RedisRateLimitStore") as store_cls:
            store_cls.return_value = MagicMock()
            build_location_rate_limiter(config)
        store_cls.assert_called_once_with("redis://cache:6379/0")

    def test_quota_from_settings(self) -> None:
        config = RealtimeConfig(location_rate_limit=LocationRateLimitSettings(window_seconds=10, max_requests=2))
        limiter = build_location_rate_limiter(config, store=InMemoryRateLimitStore())
        assert limiter.quota.limit == 2
        assert limiter.quota.window_seconds == 10
