"""Application pipeline – MediatorMiddleware base."""
from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable

NextRun = Callable[[Any], Awaitable[Any]]
NextRead = Callable[[Any], Awaitable[Any]]
NextWatch = Callable[[Any], AsyncIterator[Any]]


class MediatorMiddleware:
    """Intercepts ``Mediator.run``, ``read`` and ``watch``.

    Every hook defaults to a pass-through, so a middleware only overrides the
    dispatch kinds it cares about.
    """

    async def on_run(self, command: Any, next_: NextRun) -> Any:
        return await next_(command)

    async def on_read(self, query: Any, next_: NextRead) -> Any:
        return await next_(query)

    def on_watch(self, query: Any, next_: NextWatch) -> AsyncIterator[Any]:
        return next_(query)


__all__ = ["MediatorMiddleware", "NextRead", "NextRun", "NextWatch"]
