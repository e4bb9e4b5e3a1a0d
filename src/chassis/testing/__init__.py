"""Testing support – fake handlers, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["chassis.testing.fixtures"]
"""

from chassis.testing.fakes import (
    ControlledWatchHandler,
    DeferredReadHandler,
    RecordingCommandHandler,
    StubReadHandler,
)
from chassis.testing.generators import async_state_strategy, exception_strategy

__all__ = [
    "ControlledWatchHandler",
    "DeferredReadHandler",
    "RecordingCommandHandler",
    "StubReadHandler",
    "async_state_strategy",
    "exception_strategy",
]
