"""Watch registry module."""

from .registry import WatchRegistry

__all__ = ["WatchRegistry"]
