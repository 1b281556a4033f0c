"""Output module."""

from .sink import (
    NO_OPERATIONS,
    STACK_NOT_FOUND,
    ConsoleSink,
    ISink,
    format_event,
    format_info,
)

__all__ = [
    "ConsoleSink",
    "ISink",
    "format_event",
    "format_info",
    "STACK_NOT_FOUND",
    "NO_OPERATIONS",
]
