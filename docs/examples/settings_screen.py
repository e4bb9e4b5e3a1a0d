"""Example: a settings screen kept current by a ReadAndWatchHandle.

Run with: PYTHONPATH=src python docs/examples/settings_screen.py
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import AsyncIterator

from chassis.application.cqrs import (
    Command,
    CommandHandler,
    Mediator,
    ReadAndWatchHandler,
    ReadAndWatchQuery,
)
from chassis.application.pipeline import LoggingMiddleware
from chassis.application.streams import StreamController
from chassis.config.settings import ChassisSettings, EnvSettingsLoader
from chassis.kernel.types import AsyncState
from chassis.observability.logging import LoggerFactory


@dataclass(frozen=True)
class SetTheme(Command[None]):
    theme: str


class AppTheme(ReadAndWatchQuery[str]):
    pass


class ThemeStore:
    def __init__(self) -> None:
        self._theme = "light"
        self._watchers: list[StreamController[str]] = []

    async def load(self, _: AppTheme) -> str:
        await asyncio.sleep(0.05)
        return self._theme

    def changes(self, _: AppTheme) -> AsyncIterator[str]:
        controller: StreamController[str] = StreamController()
        self._watchers.append(controller)
        return controller

    async def set_theme(self, command: SetTheme) -> None:
        self._theme = command.theme
        for watcher in self._watchers:
            if not watcher.closed:
                watcher.add(command.theme)


def render(state: AsyncState[str]) -> None:
    print(
        state.when(
            loading=lambda prev: f"[spinner] (showing {prev!r})",
            data=lambda theme: f"theme = {theme}",
            error=lambda err, prev: f"error: {err} (showing {prev!r})",
        )
    )


async def main() -> None:
    settings = EnvSettingsLoader().load(ChassisSettings)
    LoggerFactory.from_settings(settings)

    store = ThemeStore()
    mediator = (
        Mediator(middlewares=[LoggingMiddleware()], settings=settings)
        .register(CommandHandler(SetTheme, run=store.set_theme))
        .register(ReadAndWatchHandler(AppTheme, read=store.load, watch=store.changes))
    )
    mediator.freeze()

    with mediator.read_and_watch_handle(AppTheme()) as handle:
        handle.subscribe(render, replay=True)
        await asyncio.sleep(0.1)
        await mediator.run(SetTheme("dark"))
        await asyncio.sleep(0)
        task = handle.refresh()
        if task is not None:
            await task


if __name__ == "__main__":
    asyncio.run(main())
