"""Config validation – errors raised while loading VAPID, frontend and rate-limit settings."""
from roamease_realtime.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded; the service must not start."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable with no default was not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable {setting_name} is required but not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was provided but rejected, e.g. a non-positive rate-limit window."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
