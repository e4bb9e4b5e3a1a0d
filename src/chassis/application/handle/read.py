"""Application handle – ReadHandle."""
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, TypeVar

from chassis.application.cqrs.queries import ReadQuery
from chassis.application.handle.base import Handle

if TYPE_CHECKING:
    from chassis.application.cqrs.mediator import Mediator

R = TypeVar("R")
Q = TypeVar("Q", bound=ReadQuery)


class ReadHandle(Handle[Q, R]):
    """Keeps the result of a :class:`ReadQuery` as an ``AsyncState``.

    The first read is issued on construction. :meth:`refresh` re-issues it;
    when refreshes overlap, only the most recently issued one may update the
    state, whatever order they complete in.
    """

    def __init__(self, mediator: "Mediator", query: Q) -> None:
        super().__init__(mediator, query)
        self._start_read()

    def refresh(self) -> asyncio.Task[None] | None:
        """Move to loading (keeping the value) and read again.

        Returns the dispatch task, or ``None`` once disposed.
        """
        if self._disposed:
            return None
        self._begin_loading()
        return self._start_read()


__all__ = ["ReadHandle"]
