"""Application CQRS – Mediator: registration plus ``run`` / ``read`` / ``watch`` dispatch.

Usage::

    mediator = (
        Mediator(middlewares=[LoggingMiddleware()])
        .register(CreateUserHandler(repo))
        .register(ReadAndWatchHandler(AppSettingsQuery, read=repo.load, watch=repo.changes))
    )
    mediator.freeze()

    user = await mediator.run(CreateUser(name="Ada", email="ada@example.com"))
    settings = await mediator.read(AppSettingsQuery())
    handle = mediator.read_and_watch_handle(AppSettingsQuery())

One mediator per application scope, passed explicitly to whoever needs it.
Registration happens once at bootstrap (single writer); dispatch only
reads the registry afterwards. No locking is performed.
"""
from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, AsyncIterator, Iterable, TypeVar

from chassis.application.cqrs.commands import Command, CommandHandler
from chassis.application.cqrs.queries import (
    ReadAndWatchQuery,
    ReadHandler,
    ReadQuery,
    WatchHandler,
    WatchQuery,
)
from chassis.application.cqrs.registry import HandlerRegistry, Namespace
from chassis.application.pipeline import MediatorMiddleware, Pipeline, TimeoutMiddleware
from chassis.config.settings import ChassisSettings
from chassis.kernel.errors import DuplicateRegistrationWarning, HandlerRegistrationError
from chassis.kernel.types import Err, Ok, capture
from chassis.observability.logging import get_logger

if TYPE_CHECKING:
    from chassis.application.handle import CommandHandle, ReadAndWatchHandle, ReadHandle, WatchHandle

R = TypeVar("R")

logger = get_logger(__name__)

# frames between warnings.warn and the caller of a public register method:
# _bind, _register, register/register_command/register_query
_CALLER_STACKLEVEL = 4


class Mediator:
    """Routes each message, by its exact type, to the one handler bound to it.

    Re-registering a message type in a namespace replaces the earlier
    handler (last registration wins), which lets tests swap implementations.
    Call :meth:`freeze` after bootstrap to reject any further registration.
    """

    def __init__(
        self,
        *,
        middlewares: Iterable[MediatorMiddleware] = (),
        settings: ChassisSettings | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        self._settings = settings or ChassisSettings()
        self._registry = registry or HandlerRegistry()
        self._pipeline = Pipeline(middlewares)
        if self._settings.dispatch_timeout_seconds > 0:
            self._pipeline.add(TimeoutMiddleware(self._settings.dispatch_timeout_seconds))

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    @property
    def settings(self) -> ChassisSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def use(self, middleware: MediatorMiddleware) -> "Mediator":
        """Append *middleware* to the dispatch pipeline."""
        self._pipeline.add(middleware)
        return self

    def register(self, handler: Any) -> "Mediator":
        """Bind *handler* in every namespace its capabilities imply.

        A :class:`ReadAndWatchHandler` lands in both the read and the watch
        namespace.
        """
        return self._register(handler)

    def _register(self, handler: Any) -> "Mediator":
        namespaces: list[Namespace] = []
        if isinstance(handler, CommandHandler):
            namespaces.append(Namespace.COMMAND)
        if isinstance(handler, ReadHandler):
            namespaces.append(Namespace.READ)
        if isinstance(handler, WatchHandler):
            namespaces.append(Namespace.WATCH)
        if not namespaces:
            raise HandlerRegistrationError(
                f"{type(handler).__name__} is not a command, read or watch handler",
                detail={"handler": type(handler).__name__},
            )
        for namespace in namespaces:
            self._bind(namespace, handler)
        return self

    def register_command(self, handler: CommandHandler[Any, Any]) -> "Mediator":
        if not isinstance(handler, CommandHandler):
            raise HandlerRegistrationError(f"{type(handler).__name__} is not a CommandHandler")
        return self._register(handler)

    def register_query(self, handler: ReadHandler[Any, Any] | WatchHandler[Any, Any]) -> "Mediator":
        if not isinstance(handler, (ReadHandler, WatchHandler)):
            raise HandlerRegistrationError(f"{type(handler).__name__} is not a query handler")
        return self._register(handler)

    def freeze(self) -> None:
        self._registry.freeze()
        logger.debug("mediator.frozen", bindings=len(self._registry))

    def _bind(self, namespace: Namespace, handler: Any) -> None:
        message_type = handler.message_type
        previous = self._registry.bind(namespace, message_type, handler)
        log = logger.info if self._settings.log_registrations else logger.debug
        log(
            "mediator.handler_registered",
            namespace=namespace.value,
            message_type=message_type,
            handler=type(handler).__name__,
        )
        if previous is not None and previous is not handler:
            logger.info(
                "mediator.handler_replaced",
                namespace=namespace.value,
                message_type=message_type,
                previous=type(previous).__name__,
                handler=type(handler).__name__,
            )
            if self._settings.warn_on_overwrite:
                warnings.warn(
                    f"{namespace.value} handler for {message_type.__qualname__} replaced "
                    f"({type(previous).__name__} -> {type(handler).__name__})",
                    DuplicateRegistrationWarning,
                    stacklevel=_CALLER_STACKLEVEL,
                )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def run(self, command: Command[R]) -> R:
        """Execute *command*; the handler's exception propagates unchanged."""
        handler = self._registry.resolve(Namespace.COMMAND, command)
        return await self._pipeline.execute_run(command, handler.run)

    async def read(self, query: ReadQuery[R]) -> R:
        """Fetch the one-shot result of *query*."""
        handler = self._registry.resolve(Namespace.READ, query)
        return await self._pipeline.execute_read(query, handler.read)

    def watch(self, query: WatchQuery[R]) -> AsyncIterator[R]:
        """Return the handler's sequence for *query*, unbuffered."""
        handler = self._registry.resolve(Namespace.WATCH, query)
        return self._pipeline.execute_watch(query, handler.watch)

    async def try_run(self, command: Command[R]) -> Ok[R] | Err[Exception]:
        """Like :meth:`run` but returns ``Ok``/``Err`` instead of raising."""
        return await capture(self.run(command))

    async def try_read(self, query: ReadQuery[R]) -> Ok[R] | Err[Exception]:
        """Like :meth:`read` but returns ``Ok``/``Err`` instead of raising."""
        return await capture(self.read(query))

    # ------------------------------------------------------------------
    # Handles (require a running event loop)
    # ------------------------------------------------------------------

    def command_handle(self) -> "CommandHandle[Any, Any]":
        """A handle that runs commands on demand; see :class:`CommandHandle`."""
        from chassis.application.handle import CommandHandle

        return CommandHandle(self)

    def read_handle(self, query: ReadQuery[R]) -> "ReadHandle[Any, R]":
        from chassis.application.handle import ReadHandle

        return ReadHandle(self, query)

    def watch_handle(self, query: WatchQuery[R]) -> "WatchHandle[Any, R]":
        from chassis.application.handle import WatchHandle

        return WatchHandle(self, query)

    def read_and_watch_handle(self, query: ReadAndWatchQuery[R]) -> "ReadAndWatchHandle[Any, R]":
        from chassis.application.handle import ReadAndWatchHandle

        return ReadAndWatchHandle(self, query)


__all__ = ["Mediator"]
