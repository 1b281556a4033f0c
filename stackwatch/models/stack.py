"""Stack-related data models."""

from dataclasses import dataclass, field

STACK_RESOURCE_TYPE = "AWS::CloudFormation::Stack"

IN_PROGRESS_STATUSES = frozenset(
    {
        "CREATE_IN_PROGRESS",
        "DELETE_IN_PROGRESS",
        "ROLLBACK_IN_PROGRESS",
        "UPDATE_IN_PROGRESS",
        "UPDATE_COMPLETE_CLEANUP_IN_PROGRESS",
        "UPDATE_ROLLBACK_IN_PROGRESS",
        "UPDATE_ROLLBACK_COMPLETE_CLEANUP_IN_PROGRESS",
        "IMPORT_IN_PROGRESS",
        "IMPORT_ROLLBACK_IN_PROGRESS",
    }
)

DELETING_STATUSES = frozenset({"DELETE_IN_PROGRESS"})


@dataclass(frozen=True)
class StackRef:
    """A resolved stack. Identity is the physical stack id."""

    name: str = field(compare=False)
    stack_id: str
    region: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class StackDescription:
    """Result of a stack lookup."""

    stack: StackRef
    status: str

    @property
    def is_in_progress(self) -> bool:
        return self.status in IN_PROGRESS_STATUSES


@dataclass(frozen=True)
class StackSummary:
    """A single entry of a stack listing."""

    stack_id: str
    name: str
