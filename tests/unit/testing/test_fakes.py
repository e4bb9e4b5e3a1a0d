"""Unit tests for chassis.testing fakes, fixtures and strategies."""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import given

from chassis.application.cqrs import Command, Mediator, ReadQuery, WatchQuery
from chassis.config.settings import ChassisSettings
from chassis.kernel.types import AsyncState
from chassis.testing import (
    ControlledWatchHandler,
    DeferredReadHandler,
    RecordingCommandHandler,
    StubReadHandler,
    async_state_strategy,
)


class DoIt(Command[int]):
    pass


class Fetch(ReadQuery[str]):
    pass


class Follow(WatchQuery[str]):
    pass


class TestRecordingCommandHandler:
    def test_records_and_returns(self) -> None:
        handler = RecordingCommandHandler(DoIt, result=3)
        command = DoIt()
        assert asyncio.run(handler.run(command)) == 3
        assert handler.received == [command]

    def test_raises_configured_error(self) -> None:
        handler = RecordingCommandHandler(DoIt, error=KeyError("k"))
        with pytest.raises(KeyError):
            asyncio.run(handler.run(DoIt()))
        assert len(handler.received) == 1


class TestStubReadHandler:
    def test_counts_calls(self) -> None:
        handler = StubReadHandler(Fetch, value="v")

        async def twice() -> list[str]:
            return [await handler.read(Fetch()), await handler.read(Fetch())]

        assert asyncio.run(twice()) == ["v", "v"]
        assert handler.calls == 2


class TestDeferredReadHandler:
    def test_out_of_order_resolution(self) -> None:
        async def scenario() -> list[str]:
            handler: DeferredReadHandler[str] = DeferredReadHandler(Fetch)
            first = asyncio.ensure_future(handler.read(Fetch()))
            second = asyncio.ensure_future(handler.read(Fetch()))
            await asyncio.sleep(0)
            handler.resolve(1, "b")
            handler.resolve(0, "a")
            return [await first, await second]

        assert asyncio.run(scenario()) == ["a", "b"]

    def test_fail(self) -> None:
        async def scenario() -> None:
            handler: DeferredReadHandler[str] = DeferredReadHandler(Fetch)
            pending = asyncio.ensure_future(handler.read(Fetch()))
            await asyncio.sleep(0)
            handler.fail(0, ValueError("x"))
            with pytest.raises(ValueError):
                await pending

        asyncio.run(scenario())


class TestControlledWatchHandler:
    def test_each_watch_gets_a_controller(self) -> None:
        handler: ControlledWatchHandler[str] = ControlledWatchHandler(Follow)
        first = handler.watch(Follow())
        second = handler.watch(Follow())
        assert handler.controllers == [first, second]
        assert handler.current is second


class TestFixtures:
    def test_mediator_fixture_is_empty(self, mediator: Mediator) -> None:
        assert len(mediator.registry) == 0
        assert not mediator.registry.frozen

    def test_settings_fixture_feeds_mediator(
        self, mediator: Mediator, chassis_settings: ChassisSettings
    ) -> None:
        assert mediator.settings is chassis_settings


class TestStrategies:
    @given(async_state_strategy())
    def test_generates_async_states(self, state: AsyncState[object]) -> None:
        assert isinstance(state, AsyncState)
        if state.has_error:
            assert isinstance(state.error_or_none, Exception)
