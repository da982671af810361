"""Config – 12-factor settings, loaders, and validation errors."""

from roamease_realtime.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FrontendSettings,
    LocationRateLimitSettings,
    PushDeliverySettings,
    RealtimeConfig,
    Settings,
    SettingsLoader,
    VapidSettings,
)
from roamease_realtime.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FrontendSettings",
    "InvalidSettingValueError",
    "LocationRateLimitSettings",
    "MissingRequiredSettingError",
    "PushDeliverySettings",
    "RealtimeConfig",
    "Settings",
    "SettingsLoader",
    "VapidSettings",
]
