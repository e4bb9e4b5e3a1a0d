"""Unit tests for ReadAndWatchHandle."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator

from chassis.application.cqrs import Mediator, ReadAndWatchHandler, ReadAndWatchQuery
from chassis.application.streams import StreamController
from chassis.kernel.types import AsyncData, AsyncError, AsyncLoading, AsyncState


class AppSettings(ReadAndWatchQuery[str]):
    pass


async def settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


class SettingsSource:
    """Reads wait on futures; every watcher gets its own controller."""

    def __init__(self) -> None:
        self.reads: list[asyncio.Future[str]] = []
        self.streams: list[StreamController[str]] = []

    async def read(self, _: Any) -> str:
        future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        self.reads.append(future)
        return await future

    def watch(self, _: Any) -> AsyncIterator[str]:
        controller: StreamController[str] = StreamController()
        self.streams.append(controller)
        return controller


def _mediator(source: SettingsSource) -> Mediator:
    return Mediator().register(ReadAndWatchHandler(AppSettings, read=source.read, watch=source.watch))


class TestReadAndWatch:
    def test_read_then_stream_updates(self) -> None:
        async def scenario() -> None:
            source = SettingsSource()
            handle = _mediator(source).read_and_watch_handle(AppSettings())
            seen: list[AsyncState[str]] = []
            handle.subscribe(seen.append)
            await settle()
            assert len(source.reads) == 1
            assert len(source.streams) == 1

            source.reads[0].set_result("v1")
            await settle()
            source.streams[0].add("v2")
            await settle()

            assert seen == [AsyncData("v1"), AsyncData("v2")]
            handle.dispose()

        asyncio.run(scenario())

    def test_emission_supersedes_pending_read(self) -> None:
        async def scenario() -> None:
            source = SettingsSource()
            handle = _mediator(source).read_and_watch_handle(AppSettings())
            await settle()

            source.streams[0].add("streamed")
            await settle()
            source.reads[0].set_result("stale")
            await settle()

            assert handle.state == AsyncData("streamed")
            handle.dispose()

        asyncio.run(scenario())

    def test_stream_error_keeps_read_value(self) -> None:
        exc = RuntimeError("socket reset")

        async def scenario() -> None:
            source = SettingsSource()
            handle = _mediator(source).read_and_watch_handle(AppSettings())
            await settle()
            source.reads[0].set_result("v1")
            await settle()

            source.streams[0].add_error(exc)
            await settle()

            assert handle.state == AsyncError(exc, previous="v1")
            handle.dispose()

        asyncio.run(scenario())

    def test_refresh_rereads_and_keeps_subscription(self) -> None:
        async def scenario() -> None:
            source = SettingsSource()
            handle = _mediator(source).read_and_watch_handle(AppSettings())
            await settle()
            source.reads[0].set_result("v1")
            await settle()

            handle.refresh()
            assert handle.state == AsyncLoading("v1")
            await settle()
            source.reads[1].set_result("v2")
            await settle()

            assert handle.state == AsyncData("v2")
            assert len(source.streams) == 1
            assert not source.streams[0].closed
            handle.dispose()

        asyncio.run(scenario())

    def test_dispose_stops_both(self) -> None:
        async def scenario() -> None:
            source = SettingsSource()
            handle = _mediator(source).read_and_watch_handle(AppSettings())
            seen: list[AsyncState[str]] = []
            handle.subscribe(seen.append)
            await settle()

            handle.dispose()
            source.reads[0].set_result("late")
            await settle()

            assert seen == []
            assert source.streams[0].closed

        asyncio.run(scenario())
