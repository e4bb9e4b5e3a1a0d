"""Application CQRS – queries and their read / watch handlers.

A :class:`ReadQuery` asks for one value; a :class:`WatchQuery` asks for a
continuous sequence of values. :class:`ReadAndWatchQuery` is both, and is
served by a :class:`ReadAndWatchHandler` that the mediator binds into the
read and the watch namespace in a single ``register`` call.
"""
from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable, Generic, TypeVar

from chassis.application.cqrs.commands import check_message_type

R = TypeVar("R")
Q = TypeVar("Q", bound="Query")

ReadCallback = Callable[[Q], Awaitable[R]]
WatchCallback = Callable[[Q], AsyncIterator[R]]


class Query(Generic[R]):
    """Marker base for queries (read-only intent yielding ``R``)."""


class ReadQuery(Query[R]):
    """One-shot retrieval."""


class WatchQuery(Query[R]):
    """Continuous retrieval; the handler returns an async iterator."""


class ReadAndWatchQuery(ReadQuery[R], WatchQuery[R]):
    """A query that can be read once and watched."""


class ReadHandler(Generic[Q, R]):
    """Serve a :class:`ReadQuery` with one awaited value."""

    message_type: type[Q]

    def __init__(
        self,
        message_type: type[Q] | None = None,
        read: ReadCallback[Q, R] | None = None,
    ) -> None:
        if message_type is not None:
            self.message_type = message_type
        check_message_type(self, ReadQuery)
        self._read = read

    async def read(self, query: Q) -> R:
        if self._read is None:
            raise NotImplementedError(f"{type(self).__name__} must override read() or pass read=")
        return await self._read(query)


class WatchHandler(Generic[Q, R]):
    """Serve a :class:`WatchQuery` with an async iterator of values.

    A failing ``__anext__`` does not have to end the sequence: handles keep
    pulling until the iterator raises ``StopAsyncIteration``. Async
    generators end on their first exception; use
    :class:`~chassis.application.streams.StreamController` for sequences
    that must outlive individual failures.
    """

    message_type: type[Q]

    def __init__(
        self,
        message_type: type[Q] | None = None,
        watch: WatchCallback[Q, R] | None = None,
    ) -> None:
        if message_type is not None:
            self.message_type = message_type
        check_message_type(self, WatchQuery)
        self._watch = watch

    def watch(self, query: Q) -> AsyncIterator[R]:
        if self._watch is None:
            raise NotImplementedError(f"{type(self).__name__} must override watch() or pass watch=")
        return self._watch(query)


class ReadAndWatchHandler(ReadHandler[Q, R], WatchHandler[Q, R]):
    """Holds a read and a watch capability for the same query type."""

    def __init__(
        self,
        message_type: type[Q] | None = None,
        read: ReadCallback[Q, R] | None = None,
        watch: WatchCallback[Q, R] | None = None,
    ) -> None:
        if message_type is not None:
            self.message_type = message_type
        check_message_type(self, ReadQuery, WatchQuery)
        self._read = read
        self._watch = watch


__all__ = [
    "Query",
    "ReadAndWatchHandler",
    "ReadAndWatchQuery",
    "ReadCallback",
    "ReadHandler",
    "ReadQuery",
    "WatchCallback",
    "WatchHandler",
    "WatchQuery",
]
