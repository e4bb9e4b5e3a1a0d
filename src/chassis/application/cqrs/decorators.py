"""Application CQRS – ``@command_handler`` / ``@query_handler`` auto-registration.

The decorators stamp ``message_type`` on the handler class and record it in
a module-level registry; :func:`make_mediator` instantiates every recorded
class (no-argument constructor) and registers it.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from chassis.application.cqrs.commands import Command, CommandHandler
from chassis.application.cqrs.mediator import Mediator
from chassis.application.cqrs.queries import Query, ReadHandler, WatchHandler
from chassis.application.pipeline import MediatorMiddleware
from chassis.config.settings import ChassisSettings
from chassis.kernel.errors import HandlerRegistrationError

H = TypeVar("H", bound=type)

# ---------------------------------------------------------------------------
# Global registries populated at import time by the decorators
# ---------------------------------------------------------------------------

_COMMAND_REGISTRY: dict[type[Command[Any]], type[CommandHandler[Any, Any]]] = {}
_QUERY_REGISTRY: dict[type[Query[Any]], type[Any]] = {}


# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------


def command_handler(command_type: type[Command[Any]]) -> Callable[[H], H]:
    """Class decorator binding a :class:`CommandHandler` subclass to *command_type*.

    Usage::

        @command_handler(CreateOrder)
        class CreateOrderHandler(CommandHandler[CreateOrder, OrderId]):
            async def run(self, command: CreateOrder) -> OrderId:
                ...
    """
    def decorator(handler_class: H) -> H:
        if not issubclass(handler_class, CommandHandler):
            raise HandlerRegistrationError(f"{handler_class.__name__} is not a CommandHandler")
        handler_class.message_type = command_type
        _COMMAND_REGISTRY[command_type] = handler_class
        return handler_class

    return decorator


def query_handler(query_type: type[Query[Any]]) -> Callable[[H], H]:
    """Class decorator binding a read and/or watch handler subclass to *query_type*.

    Usage::

        @query_handler(GetOrderById)
        class GetOrderByIdHandler(ReadHandler[GetOrderById, Order]):
            async def read(self, query: GetOrderById) -> Order:
                ...
    """
    def decorator(handler_class: H) -> H:
        if not issubclass(handler_class, (ReadHandler, WatchHandler)):
            raise HandlerRegistrationError(f"{handler_class.__name__} is not a query handler")
        handler_class.message_type = query_type
        _QUERY_REGISTRY[query_type] = handler_class
        return handler_class

    return decorator


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


def make_mediator(
    extra: Iterable[Any] = (),
    *,
    middlewares: Iterable[MediatorMiddleware] = (),
    settings: ChassisSettings | None = None,
) -> Mediator:
    """Build a :class:`Mediator` from every decorated handler class.

    *extra* handler instances are registered afterwards, so they override
    decorated ones for the same message type – useful in tests.
    """
    mediator = Mediator(middlewares=middlewares, settings=settings)
    for handler_class in _COMMAND_REGISTRY.values():
        mediator.register(handler_class())
    for handler_class in _QUERY_REGISTRY.values():
        mediator.register(handler_class())
    for handler in extra:
        mediator.register(handler)
    return mediator


def clear_registries() -> None:
    """Clear both global registries.  Use in tests to avoid inter-test leakage.

    .. warning::
        This mutates module-level state.  Only call in tests.
    """
    _COMMAND_REGISTRY.clear()
    _QUERY_REGISTRY.clear()


__all__ = [
    "clear_registries",
    "command_handler",
    "make_mediator",
    "query_handler",
]
