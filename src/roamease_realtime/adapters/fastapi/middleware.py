"""FastAPI adapter – ASGI rate-limit gate.

RateLimitMiddleware          generic keyed gate over a :class:`RateLimiter`
location_update_scope_key    key function for ``POST /api/shipments/{id}/location``
"""
from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any, Callable

from roamease_realtime.application.rate_limit import (
    LOCATION_UPDATE_MESSAGE,
    RateLimiter,
    location_update_identifier,
)
from roamease_realtime.observability.logging import get_logger

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = get_logger(__name__)

_LOCATION_PATH = re.compile(r"^/api/shipments/(?P<shipment_id>[^/]+)/location/?$")


def location_update_scope_key(scope: Any) -> str | None:
    """``{userId}:{shipmentId}`` for location updates, ``None`` for any other request.

    The user comes from ``request.state.user_id``, which an authentication
    middleware must set before this gate runs. Without it the request is
    let through untouched; apps that authenticate with ``Depends`` should
    use :func:`~roamease_realtime.adapters.fastapi.deps.location_update_dependency`.
    """
    if scope.get("method") != "POST":
        return None
    match = _LOCATION_PATH.match(scope.get("path", ""))
    if match is None:
        return None
    state = scope.get("state") or {}
    user_id = state.get("user_id")
    if not user_id:
        return None
    return location_update_identifier(str(user_id), match.group("shipment_id"))


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class RateLimitMiddleware:
    """Gate requests through a :class:`RateLimiter`.

    *identifier_fn* maps the ASGI scope to a limiter identifier; returning
    ``None`` lets the request through untouched. Rate-limit headers are
    attached to allowed and denied responses. Denied requests get HTTP 429
    with ``{"success": false, "message": ...}``.

    With ``skip_failed_requests`` (the default) an admitted attempt whose
    downstream response is not 2xx, or that raises, is released so it does
    not count against the window. Successful attempts always count.
    """

    def __init__(
        self,
        app: "ASGIApp",
        limiter: RateLimiter,
        identifier_fn: Callable[["Scope"], str | None] = location_update_scope_key,
        *,
        message: str = LOCATION_UPDATE_MESSAGE,
        skip_failed_requests: bool = True,
    ) -> None:
        self.app = app
        self._limiter = limiter
        self._identifier_fn = identifier_fn
        self._message = message
        self._skip_failed = skip_failed_requests

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        identifier = self._identifier_fn(scope)
        if identifier is None:
            await self.app(scope, receive, send)
            return

        result = await self._limiter.check(identifier)
        rate_headers = _encode_headers(result.headers())

        if not result.allowed:
            await self._deny(send, rate_headers)
            return

        status_code: list[int] = [500]

        async def send_with_headers(message: "Message") -> None:
            if message["type"] == "http.response.start":
                status_code[0] = message.get("status", 200)
                headers = list(message.get("headers", []))
                headers.extend(rate_headers)
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_headers)
        except Exception:
            if self._skip_failed:
                await self._limiter.release(result)
            raise

        if self._skip_failed and not _is_success(status_code[0]):
            logger.debug("rate_limit.released", key=result.key, status_code=status_code[0])
            await self._limiter.release(result)

    async def _deny(self, send: "Send", rate_headers: list[tuple[bytes, bytes]]) -> None:
        body = json.dumps({"success": False, "message": self._message}).encode()
        headers = [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
            *rate_headers,
        ]
        await send({"type": "http.response.start", "status": 429, "headers": headers})
        await send({"type": "http.response.body", "body": body})


def _encode_headers(headers: dict[str, str]) -> list[tuple[bytes, bytes]]:
    return [(k.lower().encode(), v.encode()) for k, v in headers.items()]


__all__ = ["RateLimitMiddleware", "location_update_scope_key"]
