"""Web Push adapter – WebPushTransport (pywebpush + VAPID)."""
from __future__ import annotations

import asyncio
from typing import Any

import requests
from pywebpush import WebPushException, webpush

from roamease_realtime.application.notifications.models import Subscription
from roamease_realtime.application.notifications.transport import TransportOutcome
from roamease_realtime.config.settings import VapidSettings
from roamease_realtime.kernel.errors import TimeoutError as AppTimeoutError
from roamease_realtime.resilience.timeouts import TimeoutPolicy


class WebPushTransport:
    """PushTransport that encrypts and signs via ``pywebpush``.

    ``pywebpush`` is blocking, so each call runs in a worker thread. The
    HTTP request carries its own timeout and the await is bounded by a
    :class:`TimeoutPolicy`, so a stalled endpoint cannot hold up a batch.
    """

    def __init__(
        self,
        vapid: VapidSettings,
        *,
        timeout_seconds: float = 10.0,
        ttl_seconds: int = 86400,
        content_encoding: str = "aes128gcm",
    ) -> None:
        self._vapid = vapid
        self._timeout = TimeoutPolicy(timeout_seconds)
        self._timeout_seconds = timeout_seconds
        self._ttl = ttl_seconds
        self._content_encoding = content_encoding

    async def deliver(self, subscription: Subscription, data: str) -> TransportOutcome:
        try:
            response = await self._timeout.execute(
                lambda: asyncio.to_thread(self._post, subscription, data)
            )
        except AppTimeoutError as exc:
            return TransportOutcome.timeout(exc.message)
        except requests.Timeout as exc:
            return TransportOutcome.timeout(str(exc) or "push service timed out")
        except WebPushException as exc:
            status = getattr(exc.response, "status_code", None)
            return TransportOutcome.failure(exc.message, status)
        except requests.RequestException as exc:
            return TransportOutcome.failure(str(exc) or type(exc).__name__)

        return TransportOutcome.ok(getattr(response, "status_code", 201))

    def _post(self, subscription: Subscription, data: str) -> Any:
        # pywebpush adds aud/exp to the claims dict in place
        claims = {"sub": self._vapid.subject}
        return webpush(
            subscription_info=subscription.to_webpush_dict(),
            data=data,
            vapid_private_key=self._vapid.private_key,
            vapid_claims=claims,
            content_encoding=self._content_encoding,
            timeout=self._timeout_seconds,
            ttl=self._ttl,
        )


__all__ = ["WebPushTransport"]
