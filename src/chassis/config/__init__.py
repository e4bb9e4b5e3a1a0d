"""Config – 12-factor settings for the mediator runtime."""
from chassis.config.settings import (
    ChassisSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from chassis.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingParseError,
)

__all__ = [
    "ChassisSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingParseError",
    "Settings",
    "SettingsLoader",
]
