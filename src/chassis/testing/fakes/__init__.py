"""Testing fakes – in-memory handler doubles."""
from chassis.testing.fakes.handlers import (
    ControlledWatchHandler,
    DeferredReadHandler,
    RecordingCommandHandler,
    StubReadHandler,
)

__all__ = [
    "ControlledWatchHandler",
    "DeferredReadHandler",
    "RecordingCommandHandler",
    "StubReadHandler",
]
