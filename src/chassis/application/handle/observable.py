"""Application handle – ObservableValue."""
from __future__ import annotations

import asyncio
from typing import AsyncIterator, Callable, Generic, TypeVar

from chassis.kernel.disposable import Disposable, DisposableCallback
from chassis.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

_CLOSED = object()

Listener = Callable[[T], object]


class ObservableValue(Disposable, Generic[T]):
    """A current value plus change notification.

    Listeners run synchronously, in subscription order, once per :meth:`set`.
    A listener that raises is logged and does not stop the others. After
    :meth:`dispose`, :meth:`set` is ignored and nobody is notified.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener[T]] = []
        self._queues: set[asyncio.Queue[object]] = set()

    @property
    def value(self) -> T:
        return self._value

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def set(self, value: T) -> bool:
        """Store *value* and notify; returns ``False`` when disposed."""
        if self._disposed:
            return False
        self._value = value
        for listener in list(self._listeners):
            self._notify(listener, value)
        for queue in self._queues:
            queue.put_nowait(value)
        return True

    def subscribe(self, listener: Listener[T], *, replay: bool = False) -> Disposable:
        """Register *listener*; with ``replay=True`` it first receives the current value.

        Dispose the returned object to unsubscribe.
        """
        subscription = DisposableCallback(lambda: self._unsubscribe(listener))
        if self._disposed:
            subscription.dispose()
            return subscription
        self._listeners.append(listener)
        if replay:
            self._notify(listener, self._value)
        return subscription

    def _notify(self, listener: Listener[T], value: T) -> None:
        try:
            listener(value)
        except Exception:
            logger.exception("observable.listener_failed", listener=getattr(listener, "__qualname__", repr(listener)))

    def _unsubscribe(self, listener: Listener[T]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def stream(self) -> AsyncIterator[T]:
        """Yield the current value, then every later value until disposal."""
        if self._disposed:
            return
        queue: asyncio.Queue[object] = asyncio.Queue()
        self._queues.add(queue)
        try:
            yield self._value
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    return
                yield item  # type: ignore[misc]
        finally:
            self._queues.discard(queue)

    def _on_dispose(self) -> None:
        self._listeners.clear()
        for queue in self._queues:
            queue.put_nowait(_CLOSED)


__all__ = ["Listener", "ObservableValue"]
