"""Line-oriented output of the event feed."""

import sys
from typing import Protocol, TextIO

from ..models import StackEvent, StackRef

STACK_NOT_FOUND = "Stack does not exist"
NO_OPERATIONS = "No operations ongoing"


class ISink(Protocol):
    """Synchronous, order-preserving writer of feed lines."""

    def emit_event(self, stack: StackRef, event: StackEvent) -> None:
        """Write one line for a stack event."""
        ...

    def emit_info(self, label: str, message: str) -> None:
        """Write one informational line about a stack."""
        ...


def format_event(stack: StackRef, event: StackEvent) -> str:
    reason = (
        f" (Reason: {event.resource_status_reason})"
        if event.resource_status_reason
        else ""
    )
    return (
        f"[{stack.name}] {event.timestamp.isoformat()} {event.resource_status} "
        f"{event.resource_type} {event.logical_resource_id}{reason}"
    )


def format_info(label: str, message: str) -> str:
    return f"[{label}] {message}"


class ConsoleSink:
    """Writes feed lines to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def emit(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def emit_event(self, stack: StackRef, event: StackEvent) -> None:
        self.emit(format_event(stack, event))

    def emit_info(self, label: str, message: str) -> None:
        self.emit(format_info(label, message))
