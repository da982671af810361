"""FastAPI adapter – route-level location-update gate and 429 handler.

location_update_dependency    dependency that runs after the route's auth dependency
register_rate_limit_handler   maps RateLimitError to the 429 JSON body
"""
# No ``from __future__ import annotations``: FastAPI resolves the gate's
# parameter annotations, and Request/Response are imported lazily.
from typing import Any, Callable

from roamease_realtime.application.rate_limit import (
    LOCATION_UPDATE_MESSAGE,
    RateLimiter,
    location_update_identifier,
)
from roamease_realtime.kernel.errors import RateLimitError
from roamease_realtime.observability.logging import get_logger

logger = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'roamease-realtime[fastapi]' to use the FastAPI adapter"
        ) from exc


def location_update_dependency(
    limiter: RateLimiter,
    user_id_dependency: Callable[..., Any],
    *,
    message: str = LOCATION_UPDATE_MESSAGE,
    skip_failed_requests: bool = True,
) -> Callable[..., Any]:
    """Return a dependency that limits ``POST /shipments/{shipment_id}/location``.

    The user id comes from *user_id_dependency*, the same callable the route
    uses for authentication, so the gate always sees the authenticated user.
    Usage::

        gate = location_update_dependency(limiter, current_user_id)

        @router.post("/shipments/{shipment_id}/location", dependencies=[Depends(gate)])
        async def update_location(shipment_id: str): ...

    A denied attempt raises :class:`RateLimitError`; register
    :func:`register_rate_limit_handler` to turn it into a 429. With
    ``skip_failed_requests`` an attempt whose handler raises, including
    ``HTTPException``, is released. A non-2xx response returned without
    raising still counts.
    """
    _require_fastapi()
    from fastapi import Depends, Request, Response  # type: ignore[import-untyped]

    async def location_update_gate(
        request: Request,
        response: Response,
        user_id: Any = Depends(user_id_dependency),
    ):  # noqa: ANN202
        identifier = location_update_identifier(str(user_id), request.path_params["shipment_id"])
        result = await limiter.enforce(identifier, message=message)
        response.headers.update(result.headers())
        try:
            yield result
        except Exception:
            if skip_failed_requests:
                logger.debug("rate_limit.released", key=result.key)
                await limiter.release(result)
            raise

    return location_update_gate


def rate_limit_exception_handler(request: Any, exc: RateLimitError) -> Any:  # noqa: ARG001
    """``{"success": false, "message": ...}`` with the denied window's headers."""
    from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

    return JSONResponse(
        status_code=429,
        content={"success": False, "message": exc.message},
        headers=exc.headers,
    )


def register_rate_limit_handler(app: Any) -> None:
    """Register :func:`rate_limit_exception_handler` on a FastAPI or Starlette app."""
    _require_fastapi()
    app.add_exception_handler(RateLimitError, rate_limit_exception_handler)


__all__ = [
    "location_update_dependency",
    "rate_limit_exception_handler",
    "register_rate_limit_handler",
]
