"""FastAPI adapter – rate-limit middleware, route gate and push status router."""
from roamease_realtime.adapters.fastapi.deps import (
    location_update_dependency,
    rate_limit_exception_handler,
    register_rate_limit_handler,
)
from roamease_realtime.adapters.fastapi.middleware import RateLimitMiddleware, location_update_scope_key
from roamease_realtime.adapters.fastapi.routers import build_push_router

__all__ = [
    "RateLimitMiddleware",
    "build_push_router",
    "location_update_dependency",
    "location_update_scope_key",
    "rate_limit_exception_handler",
    "register_rate_limit_handler",
]
