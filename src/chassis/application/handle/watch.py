"""Application handle – WatchHandle."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from chassis.application.cqrs.queries import WatchQuery
from chassis.application.handle.base import Handle

if TYPE_CHECKING:
    from chassis.application.cqrs.mediator import Mediator

R = TypeVar("R")
Q = TypeVar("Q", bound=WatchQuery)


class WatchHandle(Handle[Q, R]):
    """Folds the sequence of a :class:`WatchQuery` into an ``AsyncState``.

    Each value becomes ``AsyncData``; each failure becomes ``AsyncError``
    (keeping the last value) and the handle keeps listening until the
    upstream sequence ends.
    """

    def __init__(self, mediator: "Mediator", query: Q) -> None:
        super().__init__(mediator, query)
        self._start_watch()

    def refresh(self) -> None:
        """Drop the current subscription and subscribe again."""
        if self._disposed:
            return None
        self._begin_loading()
        self._start_watch()
        return None


__all__ = ["WatchHandle"]
