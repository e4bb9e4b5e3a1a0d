"""Application CQRS – messages, handlers, registry and the Mediator."""
from chassis.application.cqrs.commands import Command, CommandHandler
from chassis.application.cqrs.queries import (
    Query,
    ReadAndWatchHandler,
    ReadAndWatchQuery,
    ReadHandler,
    ReadQuery,
    WatchHandler,
    WatchQuery,
)
from chassis.application.cqrs.registry import HandlerRegistry, Namespace
from chassis.application.cqrs.mediator import Mediator
from chassis.application.cqrs.decorators import (
    clear_registries,
    command_handler,
    make_mediator,
    query_handler,
)

__all__ = [
    "Command", "CommandHandler",
    "Query", "ReadQuery", "WatchQuery", "ReadAndWatchQuery",
    "ReadHandler", "WatchHandler", "ReadAndWatchHandler",
    "HandlerRegistry", "Namespace",
    "Mediator",
    "clear_registries",
    "command_handler",
    "make_mediator",
    "query_handler",
]
