"""Registration errors — raised while binding handlers to message types."""

from __future__ import annotations

from chassis.kernel.errors.base import ChassisError


class RegistrationError(ChassisError):
    """A handler could not be registered."""

    default_code = "registration_error"


class HandlerRegistrationError(RegistrationError):
    """The handler declares no capability, or a message type of the wrong kind."""

    default_code = "handler_registration"


class RegistryFrozenError(RegistrationError):
    """The registry was frozen after bootstrap and no longer accepts bindings."""

    default_code = "registry_frozen"


class DuplicateRegistrationWarning(UserWarning):
    """A message type was registered again and the previous handler replaced.

    Diagnostic only: last registration wins.
    """


__all__ = [
    "DuplicateRegistrationWarning",
    "HandlerRegistrationError",
    "RegistrationError",
    "RegistryFrozenError",
]
