"""Testing fixtures – pytest plugin exposing mediator fixtures."""
from chassis.testing.fixtures.mediator import chassis_settings, handler_registries, mediator

__all__ = ["chassis_settings", "handler_registries", "mediator"]
