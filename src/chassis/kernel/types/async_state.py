"""AsyncState[T] — the loading / data / error lifecycle of one async computation.

Every variant is an immutable value. New states are produced only through
the transition methods, which are defined on all three variants::

    state = AsyncState.loading()          # AsyncLoading(previous=None)
    state = state.to_data("alice")        # AsyncData("alice")
    state = state.to_loading()            # AsyncLoading(previous="alice")
    state = state.to_error(exc)           # AsyncError(exc, previous="alice")

``to_data`` is the only transition that discards the previously carried
value; ``to_loading`` and ``to_error`` keep it so a UI can keep showing the
last good data while refreshing or after a soft failure.

``None`` stands for "no value" in ``previous``; an :class:`AsyncData` always
has a value, even when that value is ``None``.
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class AsyncState(abc.ABC, Generic[T]):
    """Sealed base for :class:`AsyncLoading`, :class:`AsyncData`, :class:`AsyncError`."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def value_or_none(self) -> T | None:
        """Fresh value for data, carried value otherwise."""

    @property
    @abc.abstractmethod
    def error_or_none(self) -> BaseException | None: ...

    @property
    @abc.abstractmethod
    def is_loading(self) -> bool: ...

    @property
    def has_value(self) -> bool:
        return self.value_or_none is not None

    @property
    def has_error(self) -> bool:
        return self.error_or_none is not None

    # -- transitions ---------------------------------------------------------

    def to_loading(self) -> "AsyncLoading[T]":
        return AsyncLoading(self.value_or_none)

    def to_data(self, value: T) -> "AsyncData[T]":
        return AsyncData(value)

    def to_error(self, error: BaseException) -> "AsyncError[T]":
        return AsyncError(error, self.value_or_none)

    # -- folding -------------------------------------------------------------

    @abc.abstractmethod
    def when(
        self,
        *,
        loading: Callable[[T | None], U],
        data: Callable[[T], U],
        error: Callable[[BaseException, T | None], U],
    ) -> U:
        """Exhaustively map the state onto one of three callbacks."""

    def when_or_none(
        self,
        *,
        loading: Callable[[T | None], U] | None = None,
        data: Callable[[T], U] | None = None,
        error: Callable[[BaseException, T | None], U] | None = None,
    ) -> U | None:
        def _skip(*_: Any) -> None:
            return None

        return self.when(
            loading=loading or _skip,
            data=data or _skip,
            error=error or _skip,
        )

    # -- constructors --------------------------------------------------------

    @staticmethod
    def loading(previous: T | None = None) -> "AsyncLoading[T]":
        return AsyncLoading(previous)

    @staticmethod
    def data(value: T) -> "AsyncData[T]":
        return AsyncData(value)

    @staticmethod
    def error(error: BaseException, previous: T | None = None) -> "AsyncError[T]":
        return AsyncError(error, previous)


@dataclasses.dataclass(frozen=True)
class AsyncLoading(AsyncState[T]):
    """Work is in flight; ``previous`` is the last good value, if any."""

    previous: T | None = None

    @property
    def value_or_none(self) -> T | None:
        return self.previous

    @property
    def error_or_none(self) -> None:
        return None

    @property
    def is_loading(self) -> bool:
        return True

    def when(self, *, loading, data, error):  # type: ignore[override]
        return loading(self.previous)


@dataclasses.dataclass(frozen=True)
class AsyncData(AsyncState[T]):
    """The last operation succeeded with ``value``."""

    value: T

    @property
    def value_or_none(self) -> T:
        return self.value

    @property
    def error_or_none(self) -> None:
        return None

    @property
    def is_loading(self) -> bool:
        return False

    @property
    def has_value(self) -> bool:
        return True

    def when(self, *, loading, data, error):  # type: ignore[override]
        return data(self.value)


@dataclasses.dataclass(frozen=True)
class AsyncError(AsyncState[T]):
    """The last operation failed; ``previous`` keeps the last good value.

    The traceback stays reachable through ``error.__traceback__``.
    """

    # explicit field(): a bare annotation would inherit AsyncState.error as its default
    error: BaseException = dataclasses.field()
    previous: T | None = None

    @property
    def value_or_none(self) -> T | None:
        return self.previous

    @property
    def error_or_none(self) -> BaseException:
        return self.error

    @property
    def is_loading(self) -> bool:
        return False

    def when(self, *, loading, data, error):  # type: ignore[override]
        return error(self.error, self.previous)


__all__ = ["AsyncData", "AsyncError", "AsyncLoading", "AsyncState"]
