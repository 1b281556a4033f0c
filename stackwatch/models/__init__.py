"""Core data models for stackwatch."""

from .events import START_MARKER_REASON, TERMINAL_SUFFIXES, StackEvent
from .stack import (
    DELETING_STATUSES,
    IN_PROGRESS_STATUSES,
    STACK_RESOURCE_TYPE,
    StackDescription,
    StackRef,
    StackSummary,
)
from .watch import WatchState, WatchStatus

__all__ = [
    # Stacks
    "StackRef",
    "StackDescription",
    "StackSummary",
    "STACK_RESOURCE_TYPE",
    "IN_PROGRESS_STATUSES",
    "DELETING_STATUSES",
    # Events
    "StackEvent",
    "START_MARKER_REASON",
    "TERMINAL_SUFFIXES",
    # Watches
    "WatchState",
    "WatchStatus",
]
