"""Kernel value types — public re-export surface.

Modules:
  async_state.py — AsyncState, AsyncLoading, AsyncData, AsyncError
  result.py      — Ok, Err, Result
"""

from chassis.kernel.types.async_state import AsyncData, AsyncError, AsyncLoading, AsyncState
from chassis.kernel.types.result import Err, Ok, Result, capture

__all__ = [
    "AsyncData",
    "AsyncError",
    "AsyncLoading",
    "AsyncState",
    "Err",
    "Ok",
    "Result",
    "capture",
]
