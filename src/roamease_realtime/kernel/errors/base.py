"""Kernel errors – BaseError, root of every roamease_realtime failure."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Failure raised by config loading, the rate limiter or the push pipeline.

    ``code`` is the stable slug that log events and HTTP bodies report.
    ``detail`` carries the fields an operator needs to act on the error,
    such as the offending setting name or rate-limit key. ``cause`` chains
    the lower-level exception, e.g. a Redis reply error or the ``ValueError``
    from coercing an environment variable.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for log events; never includes subscription keys."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
