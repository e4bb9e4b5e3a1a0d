"""Application streams – async sequences whose emissions may individually fail."""
from chassis.application.streams.controller import StreamController

__all__ = ["StreamController"]
