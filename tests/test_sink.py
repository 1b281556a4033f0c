"""Tests for ConsoleSink."""

import io
from datetime import datetime, timezone

from stackwatch.models import StackEvent, StackRef
from stackwatch.output import ConsoleSink, format_event, format_info

STACK = StackRef(name="test-stack", stack_id="stack-id")
TS = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_event(reason=None):
    return StackEvent(
        event_id="1",
        timestamp=TS,
        logical_resource_id="test-topic",
        resource_type="AWS::SNS::Topic",
        resource_status="CREATE_FAILED",
        resource_status_reason=reason,
    )


class TestFormatting:
    """Tests for line formatting."""

    def test_format_event(self):
        """Test an event line without a reason."""
        line = format_event(STACK, make_event())

        assert line == "[test-stack] 2024-05-01T12:00:00+00:00 CREATE_FAILED AWS::SNS::Topic test-topic"

    def test_format_event_with_reason(self):
        """Test an event line with a reason."""
        line = format_event(STACK, make_event("Access denied"))

        assert line.endswith("test-topic (Reason: Access denied)")

    def test_format_info(self):
        """Test an informational line."""
        assert format_info("test-stack", "Stack does not exist") == "[test-stack] Stack does not exist"


class TestConsoleSink:
    """Tests for ConsoleSink output."""

    def test_writes_lines_in_order(self):
        """Test that lines are written one per call, in order."""
        stream = io.StringIO()
        sink = ConsoleSink(stream)

        sink.emit_info("test-stack", "first")
        sink.emit_event(STACK, make_event())

        lines = stream.getvalue().splitlines()
        assert lines[0] == "[test-stack] first"
        assert "CREATE_FAILED" in lines[1]

    def test_defaults_to_stdout(self, capsys):
        """Test that the sink writes to stdout by default."""
        ConsoleSink().emit_info("test-stack", "hello")

        assert capsys.readouterr().out == "[test-stack] hello\n"
