"""Application CQRS – HandlerRegistry: three namespaces keyed by exact message type."""
from __future__ import annotations

from enum import Enum
from typing import Any

from chassis.kernel.errors import HandlerNotFoundError, RegistryFrozenError


class Namespace(str, Enum):
    COMMAND = "command"
    READ = "read"
    WATCH = "watch"


class HandlerRegistry:
    """Map ``(namespace, message type) -> handler``.

    Lookups use ``type(message)`` so a subclass of a registered message type
    is never routed to its parent's handler. Binding the same type twice in
    a namespace replaces the earlier handler.

    The registry is meant to be filled during bootstrap and read afterwards;
    :meth:`freeze` turns that convention into an enforced rule.
    """

    def __init__(self) -> None:
        self._handlers: dict[Namespace, dict[type, Any]] = {ns: {} for ns in Namespace}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def bind(self, namespace: Namespace, message_type: type, handler: Any) -> Any | None:
        """Bind *handler* and return the handler it replaced, if any."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot bind {message_type.__qualname__!r}: registry is frozen",
                detail={"message_type": message_type.__qualname__, "namespace": namespace.value},
            )
        entries = self._handlers[namespace]
        previous = entries.get(message_type)
        entries[message_type] = handler
        return previous

    def resolve(self, namespace: Namespace, message: object) -> Any:
        handler = self._handlers[namespace].get(type(message))
        if handler is None:
            raise HandlerNotFoundError(type(message), namespace.value)
        return handler

    def contains(self, namespace: Namespace, message_type: type) -> bool:
        return message_type in self._handlers[namespace]

    def message_types(self, namespace: Namespace) -> list[type]:
        return list(self._handlers[namespace])

    def clear(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Cannot clear a frozen registry")
        for entries in self._handlers.values():
            entries.clear()

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._handlers.values())


__all__ = ["HandlerRegistry", "Namespace"]
