"""Config settings – env-based configuration."""
from chassis.config.settings.base import Settings
from chassis.config.settings.chassis import ChassisSettings
from chassis.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["ChassisSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
