"""
chassis – CQRS mediator and async-state runtime for client applications.

Import path convention::

    from chassis.application.cqrs import Mediator, ReadQuery, ReadHandler
    from chassis.application.handle import ReadHandle, WatchHandle
    from chassis.kernel.types import AsyncState, AsyncData
    from chassis.kernel.errors import HandlerNotFoundError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
