"""Config validation errors.

Every error names the setting both as the dataclass field and, where one
exists, as the environment variable it is read from, so ``to_dict()``
output points straight at the variable to fix::

    {"code": "invalid_setting_value",
     "message": "CHASSIS_LOG_LEVEL='LOUD' is invalid: expected one of [...]",
     "detail": {"setting": "log_level", "env_key": "CHASSIS_LOG_LEVEL", ...}}
"""
from __future__ import annotations

from typing import Any

from chassis.kernel.errors import ChassisError


def env_key(prefix: str, setting_name: str) -> str:
    """``<PREFIX>_<SETTING>`` upper-cased; the bare setting name without a prefix."""
    return f"{prefix}_{setting_name}".upper().lstrip("_")


class ConfigError(ChassisError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without default has no environment variable set."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, env_key: str) -> None:
        super().__init__(
            f"Required setting {env_key} is not set",
            detail={"setting": setting_name, "env_key": env_key},
        )
        self.setting_name = setting_name
        self.env_key = env_key


class SettingParseError(ConfigError):
    """An environment variable could not be coerced to the field's type."""

    default_code = "setting_parse_error"

    def __init__(self, env_key: str, raw: str, expected: type, cause: BaseException) -> None:
        super().__init__(
            f"{env_key}={raw!r} is not a valid {expected.__name__}",
            detail={"env_key": env_key, "raw": raw, "expected": expected.__name__},
            cause=cause,
        )
        self.env_key = env_key
        self.raw = raw
        self.expected = expected


class InvalidSettingValueError(ConfigError):
    """A setting parsed fine but is outside the accepted values."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str, *, env_key: str | None = None) -> None:
        label = env_key or setting_name
        super().__init__(
            f"{label}={value!r} is invalid: {reason}",
            detail={"setting": setting_name, "env_key": env_key, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingParseError",
    "env_key",
]
