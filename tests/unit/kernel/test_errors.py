"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from roamease_realtime.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from roamease_realtime.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    RateLimitError,
    RateLimitStoreError,
    TimeoutError as AppTimeoutError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "base_error"

    def test_explicit_code_and_detail(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_cause_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError: inner"

    def test_str_is_json(self) -> None:
        assert json.loads(str(BaseError("boom")))["message"] == "boom"

    def test_repr(self) -> None:
        assert repr(BaseError("boom")) == "BaseError(code='base_error', message='boom')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (RateLimitError, ApplicationError),
            (AppTimeoutError, ApplicationError),
            (ConfigError, ApplicationError),
            (RateLimitStoreError, InfrastructureError),
            (ApplicationError, BaseError),
            (InfrastructureError, BaseError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)

    def test_rate_limit_error_fields(self) -> None:
        err = RateLimitError(key="location_update:U1:S1", retry_after_seconds=3.0)
        assert err.message == "Rate limit exceeded"
        assert err.code == "rate_limit_exceeded"
        assert err.key == "location_update:U1:S1"
        assert err.retry_after_seconds == 3.0

    def test_store_error_key(self) -> None:
        err = RateLimitStoreError("bad reply", key="k")
        assert err.key == "k"
        assert err.code == "rate_limit_store_error"

    def test_timeout_code(self) -> None:
        assert AppTimeoutError("slow").code == "timeout"

    def test_rate_limit_error_reports_key_in_detail(self) -> None:
        err = RateLimitError(key="location_update:U1:S1", headers={"Retry-After": "4"})
        assert err.to_dict()["detail"] == {"key": "location_update:U1:S1"}
        assert err.headers == {"Retry-After": "4"}


# ---------------------------------------------------------------------------
# Config errors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_missing_setting_names_the_variable(self) -> None:
        err = MissingRequiredSettingError("VAPID_PRIVATE_KEY")
        assert err.message == "Environment variable VAPID_PRIVATE_KEY is required but not set"
        assert err.detail == {"setting": "VAPID_PRIVATE_KEY"}
        assert err.code == "missing_required_setting"

    def test_invalid_value_keeps_reason(self) -> None:
        err = InvalidSettingValueError("LOCATION_RATE_LIMIT_WINDOW_SECONDS", 0, "must be > 0")
        assert err.message == "LOCATION_RATE_LIMIT_WINDOW_SECONDS=0 rejected: must be > 0"
        assert err.to_dict()["detail"] == {
            "setting": "LOCATION_RATE_LIMIT_WINDOW_SECONDS",
            "reason": "must be > 0",
        }
