"""Application handle – ReadAndWatchHandle."""
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, TypeVar

from chassis.application.cqrs.queries import ReadAndWatchQuery
from chassis.application.handle.base import Handle, Transition

if TYPE_CHECKING:
    from chassis.application.cqrs.mediator import Mediator

R = TypeVar("R")
Q = TypeVar("Q", bound=ReadAndWatchQuery)


class ReadAndWatchHandle(Handle[Q, R]):
    """Initial value from ``read``, later updates from ``watch``, one state.

    A streamed value is always newer than any read still in flight, so every
    accepted emission supersedes pending reads. :meth:`refresh` re-reads and
    leaves the subscription running.
    """

    def __init__(self, mediator: "Mediator", query: Q) -> None:
        super().__init__(mediator, query)
        self._start_read()
        self._start_watch()

    def refresh(self) -> asyncio.Task[None] | None:
        if self._disposed:
            return None
        self._begin_loading()
        return self._start_read()

    def _apply_emission(self, generation: int, transition: Transition[R]) -> None:
        if not self._disposed and generation == self._generation:
            self._sequence += 1
        super()._apply_emission(generation, transition)


__all__ = ["ReadAndWatchHandle"]
