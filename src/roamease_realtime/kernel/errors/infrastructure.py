"""Infrastructure errors – failures talking to external collaborators."""

from __future__ import annotations

from typing import Any

from roamease_realtime.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a policy decision."""

    default_code = "infrastructure_error"


class RateLimitStoreError(InfrastructureError):
    """The shared rate-limit counter store returned an unusable reply."""

    default_code = "rate_limit_store_error"

    def __init__(self, message: str, *, key: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key


__all__ = ["InfrastructureError", "RateLimitStoreError"]
