"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from chassis.observability.logging.processors import message_type_processor

if TYPE_CHECKING:
    from chassis.config.settings import ChassisSettings


class LoggerFactory:
    """Route structlog through stdlib logging with a JSON or console renderer."""

    @staticmethod
    def configure(level: int | str = logging.INFO, *, json: bool = False) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            message_type_processor,
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
        if json:
            final_processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        else:
            final_processors.append(structlog.dev.ConsoleRenderer(colors=False))
        formatter = structlog.stdlib.ProcessorFormatter(processors=final_processors)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def from_settings(cls, settings: "ChassisSettings") -> None:
        cls.configure(settings.log_level, json=settings.log_json)


__all__ = ["LoggerFactory"]
