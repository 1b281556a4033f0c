"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from stackwatch.output import ConsoleSink  # noqa: E402

POLL_INTERVAL = 0.001


class RecordingSink(ConsoleSink):
    """ConsoleSink that keeps lines in memory."""

    def __init__(self):
        super().__init__()
        self.lines: list[str] = []
        self.events = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def emit_event(self, stack, event) -> None:
        self.events.append((stack, event))
        super().emit_event(stack, event)


@pytest.fixture
def poll_interval():
    """Short polling interval for tests."""
    return POLL_INTERVAL


@pytest.fixture
def cfn():
    """Create an in-memory CloudFormation."""
    from sample_events import FakeCloudFormation

    return FakeCloudFormation()


@pytest.fixture
def sink():
    """Create a sink recording its lines."""
    return RecordingSink()


@pytest.fixture
def registry():
    """Create an empty WatchRegistry."""
    from stackwatch.registry import WatchRegistry

    return WatchRegistry()


@pytest.fixture
def orchestrator(cfn, registry, sink, poll_interval):
    """Create WatchOrchestrator over the fakes."""
    from stackwatch.watcher import WatchOrchestrator

    return WatchOrchestrator(
        client=cfn,
        registry=registry,
        sink=sink,
        poll_interval=poll_interval,
    )


@pytest.fixture
def app(cfn, sink, poll_interval):
    """Create Application over the fakes."""
    from stackwatch.app import Application

    return Application(client=cfn, sink=sink, poll_interval=poll_interval)
