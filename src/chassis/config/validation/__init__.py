"""Config validation errors."""
from chassis.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingParseError,
    env_key,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingParseError",
    "env_key",
]
