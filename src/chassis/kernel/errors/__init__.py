"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    ChassisError
    ├── DispatchError            (dispatch.py)
    │   ├── HandlerNotFoundError
    │   └── DispatchTimeoutError
    └── RegistrationError        (registration.py)
        ├── HandlerRegistrationError
        └── RegistryFrozenError

    DuplicateRegistrationWarning (UserWarning, registration.py)
"""

from chassis.kernel.errors.base import ChassisError
from chassis.kernel.errors.dispatch import (
    DispatchError,
    DispatchTimeoutError,
    HandlerNotFoundError,
)
from chassis.kernel.errors.registration import (
    DuplicateRegistrationWarning,
    HandlerRegistrationError,
    RegistrationError,
    RegistryFrozenError,
)

__all__ = [
    "ChassisError",
    "DispatchError",
    "DispatchTimeoutError",
    "DuplicateRegistrationWarning",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "RegistrationError",
    "RegistryFrozenError",
]
