"""Application pipeline – middleware wrapped around mediator dispatch."""
from chassis.application.pipeline.middleware import MediatorMiddleware, NextRead, NextRun, NextWatch
from chassis.application.pipeline.middlewares import LoggingMiddleware, TimeoutMiddleware
from chassis.application.pipeline.pipeline import Pipeline

__all__ = [
    "LoggingMiddleware",
    "MediatorMiddleware",
    "NextRead",
    "NextRun",
    "NextWatch",
    "Pipeline",
    "TimeoutMiddleware",
]
