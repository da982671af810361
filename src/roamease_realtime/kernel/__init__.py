"""Kernel – framework-agnostic building blocks (errors, clock)."""

from roamease_realtime.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    RateLimitError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "RateLimitError",
    "TimeoutError",
]
