"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "auth",
        "p256dh",
        "private_key",
        "vapid_private_key",
        "authorization",
        "password",
        "token",
    }
)


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Subscription ``auth``/``p256dh`` secrets and the VAPID private key are
    redacted by default.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


def truncate_endpoint(endpoint: str, keep: int = 48) -> str:
    """Shorten a push endpoint URL for log lines; the tail identifies the device."""
    if len(endpoint) <= keep:
        return endpoint
    return endpoint[:keep] + "..."


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "truncate_endpoint"]
