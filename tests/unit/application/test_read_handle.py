"""Unit tests for ReadHandle refresh ordering and disposal."""

from __future__ import annotations

import asyncio

import pytest

from chassis.application.cqrs import Mediator, ReadQuery
from chassis.application.handle import Handle, ReadHandle
from chassis.kernel.types import AsyncData, AsyncError, AsyncLoading, AsyncState
from chassis.testing import DeferredReadHandler, StubReadHandler


class GetName(ReadQuery[str]):
    pass


async def settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


class TestInitialRead:
    def test_starts_loading_then_data(self) -> None:
        async def scenario() -> None:
            mediator = Mediator().register(StubReadHandler(GetName, value="Ada"))
            handle = mediator.read_handle(GetName())
            assert handle.state == AsyncLoading()

            await settle()

            assert handle.state == AsyncData("Ada")
            assert isinstance(handle, ReadHandle)
            handle.dispose()

        asyncio.run(scenario())

    def test_failure_becomes_error_state(self) -> None:
        exc = RuntimeError("db down")

        async def scenario() -> None:
            mediator = Mediator().register(StubReadHandler(GetName, error=exc))
            handle = mediator.read_handle(GetName())
            await settle()

            assert handle.state == AsyncError(exc)
            handle.dispose()

        asyncio.run(scenario())

    def test_missing_handler_becomes_error_state(self) -> None:
        async def scenario() -> None:
            handle = Mediator().read_handle(GetName())
            await settle()

            assert handle.state.has_error
            handle.dispose()

        asyncio.run(scenario())

    def test_initial_loading_not_announced_without_replay(self) -> None:
        async def scenario() -> None:
            mediator = Mediator().register(StubReadHandler(GetName, value="Ada"))
            handle = mediator.read_handle(GetName())
            seen: list[AsyncState[str]] = []
            replayed: list[AsyncState[str]] = []
            handle.subscribe(seen.append)
            handle.subscribe(replayed.append, replay=True)
            await settle()

            assert seen == [AsyncData("Ada")]
            assert replayed == [AsyncLoading(), AsyncData("Ada")]
            handle.dispose()

        asyncio.run(scenario())


class TestRefresh:
    def test_refresh_keeps_previous_value_while_loading(self) -> None:
        async def scenario() -> None:
            handler = StubReadHandler(GetName, value="Ada")
            handle = Mediator().register(handler).read_handle(GetName())
            await settle()
            seen: list[AsyncState[str]] = []
            handle.subscribe(seen.append)

            handler.value = "Grace"
            task = handle.refresh()
            assert handle.state == AsyncLoading("Ada")
            assert task is not None
            await task

            assert seen == [AsyncLoading("Ada"), AsyncData("Grace")]
            assert handler.calls == 2
            handle.dispose()

        asyncio.run(scenario())

    def test_latest_read_wins_when_earlier_completes_last(self) -> None:
        async def scenario() -> None:
            handler: DeferredReadHandler[str] = DeferredReadHandler(GetName)
            handle = Mediator().register(handler).read_handle(GetName())
            await settle()
            handle.refresh()
            await settle()
            assert handler.calls == 2

            handler.resolve(1, "B")
            await settle()
            assert handle.state == AsyncData("B")

            handler.resolve(0, "A")
            await settle()
            assert handle.state == AsyncData("B")
            handle.dispose()

        asyncio.run(scenario())

    def test_stale_failure_is_discarded(self) -> None:
        async def scenario() -> None:
            handler: DeferredReadHandler[str] = DeferredReadHandler(GetName)
            handle = Mediator().register(handler).read_handle(GetName())
            await settle()
            handle.refresh()
            await settle()

            handler.resolve(1, "B")
            handler.fail(0, RuntimeError("late"))
            await settle()

            assert handle.state == AsyncData("B")
            handle.dispose()

        asyncio.run(scenario())

    def test_refresh_while_loading_does_not_emit_again(self) -> None:
        async def scenario() -> None:
            handler: DeferredReadHandler[str] = DeferredReadHandler(GetName)
            handle = Mediator().register(handler).read_handle(GetName())
            seen: list[AsyncState[str]] = []
            handle.subscribe(seen.append)

            handle.refresh()
            handle.refresh()
            await settle()

            assert seen == []
            assert handler.calls == 3
            handle.dispose()

        asyncio.run(scenario())

    def test_error_then_refresh_keeps_previous(self) -> None:
        async def scenario() -> None:
            handler = StubReadHandler(GetName, value="Ada")
            handle = Mediator().register(handler).read_handle(GetName())
            await settle()
            handler.error = RuntimeError("flaky")
            await handle.refresh()  # type: ignore[misc]

            assert handle.state.value_or_none == "Ada"
            assert handle.state.has_error
            handle.dispose()

        asyncio.run(scenario())


class TestDisposal:
    def test_result_after_dispose_is_dropped(self) -> None:
        async def scenario() -> None:
            handler: DeferredReadHandler[str] = DeferredReadHandler(GetName)
            handle = Mediator().register(handler).read_handle(GetName())
            seen: list[AsyncState[str]] = []
            handle.subscribe(seen.append)
            await settle()

            handle.dispose()
            handler.resolve(0, "late")
            await settle()

            assert seen == []
            assert handle.state == AsyncLoading()

        asyncio.run(scenario())

    def test_double_dispose_is_noop(self) -> None:
        async def scenario() -> None:
            handle = Mediator().register(StubReadHandler(GetName, value="x")).read_handle(GetName())
            handle.dispose()
            handle.dispose()
            assert handle.disposed
            await settle()

        asyncio.run(scenario())

    def test_refresh_after_dispose_does_nothing(self) -> None:
        async def scenario() -> None:
            handler = StubReadHandler(GetName, value="x")
            handle = Mediator().register(handler).read_handle(GetName())
            await settle()
            handle.dispose()

            assert handle.refresh() is None
            assert handler.calls == 1

        asyncio.run(scenario())

    def test_listeners_released_on_dispose(self) -> None:
        async def scenario() -> None:
            handle = Mediator().register(StubReadHandler(GetName, value="x")).read_handle(GetName())
            handle.subscribe(lambda state: None)
            assert handle.states.listener_count == 1

            handle.dispose()

            assert handle.states.listener_count == 0
            await settle()

        asyncio.run(scenario())

    def test_context_manager(self) -> None:
        async def scenario() -> None:
            mediator = Mediator().register(StubReadHandler(GetName, value="x"))
            with mediator.read_handle(GetName()) as handle:
                await settle()
                assert handle.state == AsyncData("x")
            assert handle.disposed

        asyncio.run(scenario())


class TestHandleBase:
    def test_handle_without_refresh_cannot_be_instantiated(self) -> None:
        class Incomplete(Handle[GetName, str]):
            pass

        with pytest.raises(TypeError):
            Incomplete(Mediator(), GetName())  # type: ignore[abstract]

    def test_base_handle_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Handle(Mediator(), GetName())  # type: ignore[abstract]
