"""Testing fakes – in-memory doubles for the realtime ports."""
from roamease_realtime.application.notifications.subscriptions import InMemorySubscriptionRepository
from roamease_realtime.kernel.time import FrozenClock
from roamease_realtime.testing.fakes.clock import FakeClock
from roamease_realtime.testing.fakes.push import RecordedDelivery, RecordingPushTransport

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemorySubscriptionRepository",
    "RecordedDelivery",
    "RecordingPushTransport",
]
