"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def message_type_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Render ``message_type`` values that are classes as their qualified name.

    Mediator and handle log calls pass the message class itself; JSON
    renderers would otherwise print ``<class '...'>``.
    """
    value = event_dict.get("message_type")
    if isinstance(value, type):
        event_dict["message_type"] = value.__qualname__
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "message_type_processor"]
