"""Application streams – StreamController."""
from __future__ import annotations

import asyncio
import enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Kind(enum.Enum):
    VALUE = "value"
    ERROR = "error"
    DONE = "done"


class StreamController(Generic[T]):
    """Push-based, single-consumer async iterator.

    Unlike an async generator, a failure pushed with :meth:`add_error` is
    raised from one ``__anext__`` call and the sequence keeps going; only
    :meth:`close` ends it. Repositories hand one controller to each watcher::

        def watch_settings(self) -> StreamController[Settings]:
            controller = StreamController[Settings]()
            self._watchers.append(controller)
            return controller
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[tuple[_Kind, Any]] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, value: T) -> None:
        self._ensure_open()
        self._queue.put_nowait((_Kind.VALUE, value))

    def add_error(self, error: BaseException) -> None:
        self._ensure_open()
        self._queue.put_nowait((_Kind.ERROR, error))

    def close(self) -> None:
        """End the sequence once already queued items are consumed. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait((_Kind.DONE, None))

    async def aclose(self) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("StreamController is closed")

    def __aiter__(self) -> "StreamController[T]":
        return self

    async def __anext__(self) -> T:
        kind, payload = await self._queue.get()
        if kind is _Kind.DONE:
            # keep the terminal marker for any later __anext__ call
            self._queue.put_nowait((kind, payload))
            raise StopAsyncIteration
        if kind is _Kind.ERROR:
            raise payload
        return payload


__all__ = ["StreamController"]
