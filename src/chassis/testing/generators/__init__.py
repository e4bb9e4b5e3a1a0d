"""Testing generators – Hypothesis strategies."""
from chassis.testing.generators.strategies import async_state_strategy, exception_strategy

__all__ = ["async_state_strategy", "exception_strategy"]
