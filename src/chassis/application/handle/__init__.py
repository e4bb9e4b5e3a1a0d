"""Application handle – disposable, observable AsyncState bindings for messages."""
from chassis.application.handle.base import Handle
from chassis.application.handle.command import CommandHandle
from chassis.application.handle.observable import Listener, ObservableValue
from chassis.application.handle.read import ReadHandle
from chassis.application.handle.read_and_watch import ReadAndWatchHandle
from chassis.application.handle.watch import WatchHandle

__all__ = [
    "CommandHandle",
    "Handle",
    "Listener",
    "ObservableValue",
    "ReadAndWatchHandle",
    "ReadHandle",
    "WatchHandle",
]
