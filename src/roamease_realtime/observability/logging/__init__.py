"""Observability – structured logging helpers."""
from roamease_realtime.observability.logging.factory import JsonLoggerFactory, get_logger
from roamease_realtime.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
    truncate_endpoint,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "truncate_endpoint",
]
