"""Watcher module."""

from .orchestrator import IWatchOrchestrator, WatchOrchestrator, nested_stack_id

__all__ = ["IWatchOrchestrator", "WatchOrchestrator", "nested_stack_id"]
