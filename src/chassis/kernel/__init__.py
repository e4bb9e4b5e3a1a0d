"""Kernel – framework-agnostic building blocks (errors, value types, disposal)."""

from chassis.kernel.disposable import CompositeDisposable, Disposable, DisposableCallback
from chassis.kernel.errors import (
    ChassisError,
    DispatchError,
    DispatchTimeoutError,
    DuplicateRegistrationWarning,
    HandlerNotFoundError,
    HandlerRegistrationError,
    RegistrationError,
    RegistryFrozenError,
)

__all__ = [
    "ChassisError",
    "CompositeDisposable",
    "DispatchError",
    "DispatchTimeoutError",
    "Disposable",
    "DisposableCallback",
    "DuplicateRegistrationWarning",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "RegistrationError",
    "RegistryFrozenError",
]
