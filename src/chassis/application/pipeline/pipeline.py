"""Application pipeline – Pipeline class."""
from __future__ import annotations

from typing import Any, AsyncIterator, Iterable

from chassis.application.pipeline.middleware import MediatorMiddleware, NextRead, NextRun, NextWatch


class Pipeline:
    """Ordered middleware chain; the first middleware added is the outermost."""

    def __init__(self, middlewares: Iterable[MediatorMiddleware] = ()) -> None:
        self._middlewares: list[MediatorMiddleware] = list(middlewares)

    def add(self, middleware: MediatorMiddleware) -> "Pipeline":
        """Append a middleware (fluent API)."""
        self._middlewares.append(middleware)
        return self

    def __len__(self) -> int:
        return len(self._middlewares)

    async def execute_run(self, command: Any, handler: NextRun) -> Any:
        chain = handler
        for mw in reversed(self._middlewares):

            async def _wrap(req: Any, *, _n: NextRun = chain, _m: MediatorMiddleware = mw) -> Any:
                return await _m.on_run(req, _n)

            chain = _wrap
        return await chain(command)

    async def execute_read(self, query: Any, handler: NextRead) -> Any:
        chain = handler
        for mw in reversed(self._middlewares):

            async def _wrap(req: Any, *, _n: NextRead = chain, _m: MediatorMiddleware = mw) -> Any:
                return await _m.on_read(req, _n)

            chain = _wrap
        return await chain(query)

    def execute_watch(self, query: Any, handler: NextWatch) -> AsyncIterator[Any]:
        chain = handler
        for mw in reversed(self._middlewares):

            def _wrap(req: Any, *, _n: NextWatch = chain, _m: MediatorMiddleware = mw) -> AsyncIterator[Any]:
                return _m.on_watch(req, _n)

            chain = _wrap
        return chain(query)


__all__ = ["Pipeline"]
