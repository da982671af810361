"""Application-layer errors – policy decisions and use-case level failures."""

from __future__ import annotations

from typing import Any

from roamease_realtime.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RateLimitError(ApplicationError):
    """A keyed request exceeded its quota for the current window."""

    default_code = "rate_limit_exceeded"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        key: str | None = None,
        retry_after_seconds: float | None = None,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        self.retry_after_seconds = retry_after_seconds
        if key is not None:
            self.detail.setdefault("key", key)
        self.headers = dict(headers or {})


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"


__all__ = ["ApplicationError", "RateLimitError", "TimeoutError"]
