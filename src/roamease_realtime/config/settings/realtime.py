"""Config settings – push delivery, frontend and location rate-limit settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from roamease_realtime.config.settings.base import Settings
from roamease_realtime.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from roamease_realtime.config.validation import InvalidSettingValueError

DEFAULT_FRONTEND_URL = "https://roamease.com"


@dataclasses.dataclass(frozen=True)
class VapidSettings(Settings):
    """VAPID identity used to sign Web Push requests.

    Any missing value puts the dispatcher into simulated delivery mode;
    it is an expected operational state, not a configuration error.
    """

    _prefix: ClassVar[str] = "VAPID"

    email: str = ""
    public_key: str = ""
    private_key: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.email and self.public_key and self.private_key)

    @property
    def subject(self) -> str:
        """The ``sub`` claim: a ``mailto:`` or ``https:`` contact URI."""
        if self.email.startswith(("mailto:", "https:")):
            return self.email
        return f"mailto:{self.email}"

    def __repr__(self) -> str:
        masked = "***" if self.private_key else ""
        return (
            f"VapidSettings(email={self.email!r}, public_key={self.public_key!r}, "
            f"private_key={masked!r})"
        )


@dataclasses.dataclass(frozen=True)
class FrontendSettings(Settings):
    _prefix: ClassVar[str] = "FRONTEND"

    url: str = DEFAULT_FRONTEND_URL

    def _validate(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("FRONTEND_URL", self.url, "must be an absolute http(s) URL")


@dataclasses.dataclass(frozen=True)
class PushDeliverySettings(Settings):
    _prefix: ClassVar[str] = "PUSH"

    app_name: str = "RoamEase"
    timeout_seconds: float = 10.0
    max_concurrency: int = 10
    ttl_seconds: int = 86400

    def _validate(self) -> None:
        if self.timeout_seconds <= 0:
            raise InvalidSettingValueError("PUSH_TIMEOUT_SECONDS", self.timeout_seconds, "must be > 0")
        if self.max_concurrency < 1:
            raise InvalidSettingValueError("PUSH_MAX_CONCURRENCY", self.max_concurrency, "must be >= 1")
        if self.ttl_seconds < 0:
            raise InvalidSettingValueError("PUSH_TTL_SECONDS", self.ttl_seconds, "must be >= 0")


@dataclasses.dataclass(frozen=True)
class LocationRateLimitSettings(Settings):
    """Fixed-window throttle for live location updates.

    An empty ``redis_url`` selects the in-process store, which is only
    correct for a single-process deployment.
    """

    _prefix: ClassVar[str] = "LOCATION_RATE_LIMIT"

    window_seconds: int = 5
    max_requests: int = 1
    redis_url: str = ""

    def _validate(self) -> None:
        if self.window_seconds <= 0:
            raise InvalidSettingValueError(
                "LOCATION_RATE_LIMIT_WINDOW_SECONDS", self.window_seconds, "must be > 0"
            )
        if self.max_requests < 1:
            raise InvalidSettingValueError(
                "LOCATION_RATE_LIMIT_MAX_REQUESTS", self.max_requests, "must be >= 1"
            )


@dataclasses.dataclass(frozen=True)
class RealtimeConfig:
    """All settings the realtime core needs, loaded once at startup."""

    vapid: VapidSettings = dataclasses.field(default_factory=VapidSettings)
    frontend: FrontendSettings = dataclasses.field(default_factory=FrontendSettings)
    push: PushDeliverySettings = dataclasses.field(default_factory=PushDeliverySettings)
    location_rate_limit: LocationRateLimitSettings = dataclasses.field(
        default_factory=LocationRateLimitSettings
    )

    @classmethod
    def load(cls, loader: SettingsLoader | None = None) -> "RealtimeConfig":
        """Load every section through *loader* (environment by default).

        Raises
        ------
        InvalidSettingValueError
            When a rate-limit or delivery value is unusable; startup should abort.
        """
        loader = loader or EnvSettingsLoader()
        return cls(
            vapid=loader.load(VapidSettings),
            frontend=loader.load(FrontendSettings),
            push=loader.load(PushDeliverySettings),
            location_rate_limit=loader.load(LocationRateLimitSettings),
        )


__all__ = [
    "DEFAULT_FRONTEND_URL",
    "FrontendSettings",
    "LocationRateLimitSettings",
    "PushDeliverySettings",
    "RealtimeConfig",
    "VapidSettings",
]
