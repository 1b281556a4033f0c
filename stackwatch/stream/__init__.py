"""Event stream module."""

from .event_stream import StackEventStream

__all__ = ["StackEventStream"]
