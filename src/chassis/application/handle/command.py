"""Application handle – CommandHandle."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from chassis.application.cqrs.commands import Command
from chassis.application.handle.base import Handle

if TYPE_CHECKING:
    from chassis.application.cqrs.mediator import Mediator

R = TypeVar("R")
C = TypeVar("C", bound=Command)

LoadingHook = Callable[[], object]
SuccessHook = Callable[[R], object]
ErrorHook = Callable[[BaseException], object]
CancelledHook = Callable[[], object]


@dataclasses.dataclass
class _Execution(Generic[R]):
    """Hooks tied to one :meth:`CommandHandle.run` call."""

    command: Any
    on_loading: LoadingHook | None = None
    on_success: SuccessHook[R] | None = None
    on_error: ErrorHook | None = None
    on_cancelled: CancelledHook | None = None
    done: bool = False


class CommandHandle(Handle[C, R]):
    """Runs commands through the mediator and exposes the latest outcome.

    Nothing is dispatched until :meth:`run`. Each call may pass hooks that
    belong to that call only::

        handle = mediator.command_handle()
        handle.run(SaveProfile(name), on_success=close_dialog, on_error=show_toast)

    When a newer ``run`` starts, or the handle is disposed, before an
    execution finishes, that execution's ``on_cancelled`` fires and its
    other hooks never do; its result is discarded. Until the first run the
    state is ``AsyncLoading()`` with no value and :attr:`query` is ``None``.
    """

    def __init__(self, mediator: "Mediator") -> None:
        super().__init__(mediator, None)
        self._execution: _Execution[R] | None = None

    @property
    def running(self) -> bool:
        return self._execution is not None and not self._execution.done

    def run(
        self,
        command: C,
        *,
        on_loading: LoadingHook | None = None,
        on_success: SuccessHook[R] | None = None,
        on_error: ErrorHook | None = None,
        on_cancelled: CancelledHook | None = None,
    ) -> asyncio.Task[None] | None:
        """Dispatch *command*, superseding any execution still in flight.

        Returns the dispatch task, or ``None`` once disposed.
        """
        if self._disposed:
            return None
        self._cancel_execution()
        execution: _Execution[R] = _Execution(command, on_loading, on_success, on_error, on_cancelled)
        self._execution = execution
        self._query = command
        self._begin_loading()
        self._call_hook(execution.on_loading)
        self._sequence += 1
        return self._spawn(self._execute(self._sequence, execution))

    def refresh(self) -> asyncio.Task[None] | None:
        """Run the last command again, without hooks."""
        if self._query is None:
            return None
        return self.run(self._query)

    async def _execute(self, sequence: int, execution: _Execution[R]) -> None:
        try:
            result = await self._mediator.run(execution.command)
        except Exception as exc:
            if self._finish(sequence, execution, lambda state: state.to_error(exc)):
                self._call_hook(execution.on_error, exc)
            return
        if self._finish(sequence, execution, lambda state: state.to_data(result)):
            self._call_hook(execution.on_success, result)

    def _finish(self, sequence: int, execution: _Execution[R], transition: Any) -> bool:
        if execution.done:
            return False
        execution.done = True
        return self._apply_result(sequence, transition)

    def _cancel_execution(self) -> None:
        execution, self._execution = self._execution, None
        if execution is not None and not execution.done:
            execution.done = True
            self._call_hook(execution.on_cancelled)

    def _call_hook(self, hook: Callable[..., object] | None, *args: Any) -> None:
        if hook is None:
            return
        try:
            hook(*args)
        except Exception:
            self._logger.exception("handle.hook_failed", hook=getattr(hook, "__qualname__", repr(hook)))

    def _on_dispose(self) -> None:
        self._cancel_execution()
        super()._on_dispose()


__all__ = ["CommandHandle"]
