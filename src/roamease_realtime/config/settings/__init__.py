"""Config settings – 12-factor env-based configuration."""
from roamease_realtime.config.settings.base import Settings
from roamease_realtime.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from roamease_realtime.config.settings.realtime import (
    FrontendSettings,
    LocationRateLimitSettings,
    PushDeliverySettings,
    RealtimeConfig,
    VapidSettings,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FrontendSettings",
    "LocationRateLimitSettings",
    "PushDeliverySettings",
    "RealtimeConfig",
    "Settings",
    "SettingsLoader",
    "VapidSettings",
]
