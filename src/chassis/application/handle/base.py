"""Application handle – Handle base class.

A handle binds one query to an :class:`~chassis.kernel.types.AsyncState`
that it keeps current by dispatching through the mediator. Two counters
guard every asynchronous result before it touches the state:

* ``_sequence`` — bumped for each one-shot dispatch; a completion is
  applied only if its number is still the latest.
* ``_generation`` — bumped for each (re)subscription; an emission is applied
  only if it comes from the current subscription.

Disposal bumps both, so anything still in flight becomes a no-op.
"""
from __future__ import annotations

import abc
import asyncio
from typing import TYPE_CHECKING, Any, Callable, Coroutine, Generic, TypeVar

from chassis.application.handle.observable import Listener, ObservableValue
from chassis.kernel.disposable import Disposable
from chassis.kernel.types import AsyncLoading, AsyncState
from chassis.observability.logging import get_logger

if TYPE_CHECKING:
    from chassis.application.cqrs.mediator import Mediator

Q = TypeVar("Q")
R = TypeVar("R")

Transition = Callable[[AsyncState[R]], AsyncState[R]]


class Handle(Disposable, abc.ABC, Generic[Q, R]):
    """Disposable, observable binding of one message to an ``AsyncState``.

    Abstract: concrete handles define :meth:`refresh`. Subclasses start
    their work in ``__init__``, so handles must be created while an event
    loop is running.
    """

    def __init__(self, mediator: "Mediator", query: Q | None) -> None:
        self._mediator = mediator
        self._query = query
        self._states: ObservableValue[AsyncState[R]] = ObservableValue(AsyncLoading())
        self._sequence = 0
        self._generation = 0
        self._subscription: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._logger = get_logger(
            __name__, handle=type(self).__name__, message_type=type(query) if query is not None else None
        )

    # -- public surface ------------------------------------------------------

    @property
    def mediator(self) -> "Mediator":
        return self._mediator

    @property
    def query(self) -> Q | None:
        return self._query

    @property
    def state(self) -> AsyncState[R]:
        return self._states.value

    @property
    def states(self) -> ObservableValue[AsyncState[R]]:
        return self._states

    def subscribe(self, listener: Listener[AsyncState[R]], *, replay: bool = False) -> Disposable:
        return self._states.subscribe(listener, replay=replay)

    @abc.abstractmethod
    def refresh(self) -> asyncio.Task[None] | None:
        """Re-run the handle's work; ``None`` when there is nothing to await."""

    # -- state plumbing ------------------------------------------------------

    def _emit(self, state: AsyncState[R]) -> None:
        self._states.set(state)

    def _begin_loading(self) -> None:
        if not self.state.is_loading:
            self._emit(self.state.to_loading())

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _apply_result(self, sequence: int, transition: Transition[R]) -> bool:
        """Apply *transition* if *sequence* is still the latest dispatch."""
        if self._disposed or sequence != self._sequence:
            self._logger.debug("handle.stale_result_discarded", sequence=sequence, latest=self._sequence)
            return False
        self._emit(transition(self.state))
        return True

    # -- read ----------------------------------------------------------------

    def _start_read(self) -> asyncio.Task[None]:
        self._sequence += 1
        return self._spawn(self._read(self._sequence))

    async def _read(self, sequence: int) -> None:
        try:
            value = await self._mediator.read(self._query)  # type: ignore[arg-type]
        except Exception as exc:
            self._apply_result(sequence, lambda state: state.to_error(exc))
            return
        self._apply_result(sequence, lambda state: state.to_data(value))

    # -- watch ---------------------------------------------------------------

    def _start_watch(self) -> None:
        self._cancel_subscription()
        self._generation += 1
        self._subscription = self._spawn(self._listen(self._generation))

    async def _listen(self, generation: int) -> None:
        # opened inside the task: a subscription cancelled before it starts never opens upstream
        try:
            iterator = aiter(self._mediator.watch(self._query))  # type: ignore[arg-type]
        except Exception as exc:
            self._apply_emission(generation, lambda state: state.to_error(exc))
            return
        try:
            while True:
                try:
                    item = await anext(iterator)
                except StopAsyncIteration:
                    self._logger.debug("handle.stream_completed")
                    return
                except Exception as exc:
                    self._apply_emission(generation, lambda state, exc=exc: state.to_error(exc))
                    continue
                self._apply_emission(generation, lambda state, item=item: state.to_data(item))
        finally:
            aclose = getattr(iterator, "aclose", None)
            if aclose is not None:
                await aclose()

    def _apply_emission(self, generation: int, transition: Transition[R]) -> None:
        if self._disposed or generation != self._generation:
            self._logger.debug("handle.stale_result_discarded", generation=generation)
            return
        self._emit(transition(self.state))

    def _cancel_subscription(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    # -- disposal ------------------------------------------------------------

    def _on_dispose(self) -> None:
        self._sequence += 1
        self._generation += 1
        self._cancel_subscription()
        self._states.dispose()
        self._logger.debug("handle.disposed")


__all__ = ["Handle"]
