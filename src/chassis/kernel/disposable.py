"""Kernel – Disposable contract and composites.

A :class:`Disposable` owns resources and releases them in a one-shot,
idempotent :meth:`~Disposable.dispose`. Owners that hold several
disposables (a screen holding three handles, for instance) collect them in
a :class:`CompositeDisposable` and cascade their own disposal to it.
"""
from __future__ import annotations

from typing import Any, Callable

from chassis.observability.logging import get_logger

logger = get_logger(__name__)


class Disposable:
    """Mixin implementing idempotent disposal.

    Subclasses put their teardown in :meth:`_on_dispose`, which runs exactly
    once, after the ``disposed`` flag is already set.
    """

    _disposed: bool = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._on_dispose()

    def _on_dispose(self) -> None:
        """Override to release resources."""

    def __enter__(self) -> Any:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


class DisposableCallback(Disposable):
    """Adapt a zero-argument callable to the :class:`Disposable` contract."""

    def __init__(self, callback: Callable[[], object]) -> None:
        self._callback = callback

    def _on_dispose(self) -> None:
        self._callback()


class CompositeDisposable(Disposable):
    """Dispose a group of children, newest first.

    A child that fails to dispose is logged and skipped so the remaining
    children are still released.
    """

    def __init__(self, *children: Disposable) -> None:
        self._children: list[Disposable] = list(children)

    def add(self, child: Disposable) -> Disposable:
        """Track *child*; disposes it at once if this composite is already disposed."""
        if self._disposed:
            child.dispose()
        else:
            self._children.append(child)
        return child

    def add_callback(self, callback: Callable[[], object]) -> Disposable:
        return self.add(DisposableCallback(callback))

    def __len__(self) -> int:
        return len(self._children)

    def _on_dispose(self) -> None:
        children, self._children = self._children, []
        for child in reversed(children):
            try:
                child.dispose()
            except Exception:
                logger.exception("disposable.child_failed", child=type(child).__name__)


__all__ = ["CompositeDisposable", "Disposable", "DisposableCallback"]
