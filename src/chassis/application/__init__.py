"""Application – dispatch, middleware, streams and handles."""

from chassis.application.cqrs import (
    Command,
    CommandHandler,
    Mediator,
    ReadAndWatchHandler,
    ReadAndWatchQuery,
    ReadHandler,
    ReadQuery,
    WatchHandler,
    WatchQuery,
)
from chassis.application.handle import CommandHandle, ReadAndWatchHandle, ReadHandle, WatchHandle
from chassis.application.pipeline import MediatorMiddleware, Pipeline
from chassis.application.streams import StreamController

__all__ = [
    "Command",
    "CommandHandle",
    "CommandHandler",
    "Mediator",
    "MediatorMiddleware",
    "Pipeline",
    "ReadAndWatchHandle",
    "ReadAndWatchHandler",
    "ReadAndWatchQuery",
    "ReadHandle",
    "ReadHandler",
    "ReadQuery",
    "StreamController",
    "WatchHandle",
    "WatchHandler",
    "WatchQuery",
]
