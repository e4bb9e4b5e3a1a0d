"""Dispatch errors — raised while resolving or invoking a handler."""

from __future__ import annotations

from typing import Any

from chassis.kernel.errors.base import ChassisError


class DispatchError(ChassisError):
    """A message could not be dispatched to its handler."""

    default_code = "dispatch_error"


class HandlerNotFoundError(DispatchError):
    """No handler is bound to the message's exact type in the namespace.

    ``namespace`` is one of ``"command"``, ``"read"`` or ``"watch"``.
    """

    default_code = "handler_not_found"

    def __init__(self, message_type: type, namespace: str, **kwargs: Any) -> None:
        super().__init__(
            f"No {namespace} handler registered for {message_type.__qualname__!r}",
            detail={"message_type": message_type.__qualname__, "namespace": namespace},
            **kwargs,
        )
        self.message_type = message_type
        self.namespace = namespace


class DispatchTimeoutError(DispatchError):
    """A run/read dispatch exceeded the configured deadline."""

    default_code = "dispatch_timeout"

    def __init__(self, message_type: type, timeout_seconds: float, **kwargs: Any) -> None:
        super().__init__(
            f"{message_type.__qualname__} timed out after {timeout_seconds}s",
            detail={"message_type": message_type.__qualname__, "timeout_seconds": timeout_seconds},
            **kwargs,
        )
        self.message_type = message_type
        self.timeout_seconds = timeout_seconds


__all__ = ["DispatchError", "DispatchTimeoutError", "HandlerNotFoundError"]
