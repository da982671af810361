"""FastAPI adapter – push service status router."""
from __future__ import annotations

from typing import Any

from roamease_realtime.application.notifications import PushDispatcher


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'roamease-realtime[fastapi]' to use the FastAPI adapter"
        ) from exc


def build_push_router(
    dispatcher: PushDispatcher,
    path: str = "/push",
    tags: list[str] | None = None,
) -> Any:
    """Return a router exposing push configuration to the frontend.

    ``GET {path}/status`` reports whether real delivery is configured.
    ``GET {path}/vapid-public-key`` returns the key browsers subscribe
    with, or 404 while push is unconfigured.
    """
    _require_fastapi()
    from fastapi import APIRouter  # type: ignore[import-untyped]
    from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

    router = APIRouter(tags=tags or ["push"])

    @router.get(f"{path}/status")
    async def push_status() -> dict[str, Any]:
        return {"success": True, "data": dispatcher.status()}

    @router.get(f"{path}/vapid-public-key")
    async def vapid_public_key() -> Any:
        key = dispatcher.public_key
        if key is None:
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": "Push notifications are not configured"},
            )
        return {"success": True, "publicKey": key}

    return router


__all__ = ["build_push_router"]
