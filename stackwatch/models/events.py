"""Stack event data models."""

from dataclasses import dataclass
from datetime import datetime

from .stack import STACK_RESOURCE_TYPE

START_MARKER_REASON = "User Initiated"
TERMINAL_SUFFIXES = ("_COMPLETE", "_FAILED")


@dataclass(frozen=True)
class StackEvent:
    """A single entry of a stack's event log."""

    event_id: str
    timestamp: datetime
    logical_resource_id: str
    resource_type: str
    resource_status: str
    resource_status_reason: str | None = None
    physical_resource_id: str | None = None

    @classmethod
    def from_api(cls, item: dict) -> "StackEvent":
        """Build from a DescribeStackEvents `StackEvents` item."""
        return cls(
            event_id=item["EventId"],
            timestamp=item["Timestamp"],
            logical_resource_id=item["LogicalResourceId"],
            resource_type=item["ResourceType"],
            resource_status=item["ResourceStatus"],
            resource_status_reason=item.get("ResourceStatusReason") or None,
            physical_resource_id=item.get("PhysicalResourceId") or None,
        )

    @property
    def is_stack_resource(self) -> bool:
        """True for stack-typed subjects: the stack itself or a nested stack."""
        return self.resource_type == STACK_RESOURCE_TYPE

    @property
    def is_start_marker(self) -> bool:
        return self.resource_status_reason == START_MARKER_REASON

    @property
    def is_terminal(self) -> bool:
        return self.resource_status.endswith(TERMINAL_SUFFIXES)

    def is_root_of(self, stack_name: str) -> bool:
        """Whether this event describes the stack itself rather than a resource in it."""
        return self.is_stack_resource and self.logical_resource_id == stack_name
