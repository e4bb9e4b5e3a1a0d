"""Config settings – ChassisSettings."""
from __future__ import annotations

import dataclasses

from chassis.config.settings.base import Settings
from chassis.config.validation import InvalidSettingValueError, env_key

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class ChassisSettings(Settings):
    """Runtime knobs for the mediator, read from ``CHASSIS_*`` variables.

    ``dispatch_timeout_seconds`` of ``0`` disables the timeout middleware the
    mediator otherwise installs for ``run``/``read``.
    """

    _prefix = "CHASSIS"

    log_level: str = "INFO"
    log_json: bool = False
    log_registrations: bool = False
    warn_on_overwrite: bool = False
    dispatch_timeout_seconds: float = 0.0

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level",
                self.log_level,
                f"expected one of {sorted(_LOG_LEVELS)}",
                env_key=env_key(self._prefix, "log_level"),
            )
        if self.dispatch_timeout_seconds < 0:
            raise InvalidSettingValueError(
                "dispatch_timeout_seconds",
                self.dispatch_timeout_seconds,
                "must be >= 0",
                env_key=env_key(self._prefix, "dispatch_timeout_seconds"),
            )


__all__ = ["ChassisSettings"]
