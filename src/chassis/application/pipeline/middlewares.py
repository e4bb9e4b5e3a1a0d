"""Application pipeline – built-in middleware implementations."""
from __future__ import annotations

import asyncio
import time
from typing import Any, AsyncIterator

from chassis.application.pipeline.middleware import MediatorMiddleware, NextRead, NextRun, NextWatch
from chassis.kernel.errors import DispatchTimeoutError
from chassis.observability.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(MediatorMiddleware):
    """Log dispatch outcome with timing."""

    async def on_run(self, command: Any, next_: NextRun) -> Any:
        return await self._timed("run", command, next_)

    async def on_read(self, query: Any, next_: NextRead) -> Any:
        return await self._timed("read", query, next_)

    def on_watch(self, query: Any, next_: NextWatch) -> AsyncIterator[Any]:
        logger.info("mediator.watch.subscribed", message_type=type(query))
        return next_(query)

    async def _timed(self, kind: str, message: Any, next_: NextRun) -> Any:
        start = time.perf_counter()
        try:
            result = await next_(message)
        except Exception as exc:
            duration = (time.perf_counter() - start) * 1000
            logger.error(
                f"mediator.{kind}.failed",
                message_type=type(message),
                duration_ms=round(duration, 2),
                error=type(exc).__name__,
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        logger.info(f"mediator.{kind}.completed", message_type=type(message), duration_ms=round(duration, 2))
        return result


class TimeoutMiddleware(MediatorMiddleware):
    """Raise :class:`DispatchTimeoutError` if ``run``/``read`` exceeds *timeout_seconds*.

    Watches are not bounded: a subscription is expected to stay open.
    """

    def __init__(self, timeout_seconds: float) -> None:
        self._timeout = timeout_seconds

    async def on_run(self, command: Any, next_: NextRun) -> Any:
        return await self._bounded(command, next_)

    async def on_read(self, query: Any, next_: NextRead) -> Any:
        return await self._bounded(query, next_)

    async def _bounded(self, message: Any, next_: NextRun) -> Any:
        try:
            return await asyncio.wait_for(next_(message), timeout=self._timeout)
        except TimeoutError as exc:
            raise DispatchTimeoutError(type(message), self._timeout, cause=exc) from exc


__all__ = ["LoggingMiddleware", "TimeoutMiddleware"]
