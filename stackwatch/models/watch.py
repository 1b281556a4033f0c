"""Watch bookkeeping models."""

from dataclasses import dataclass, field
from enum import Enum


class WatchStatus(str, Enum):
    """Lifecycle of a stack watch."""

    PENDING = "pending"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class WatchState:
    """Registry entry for one stack."""

    status: WatchStatus = WatchStatus.PENDING
    seen: set[str] = field(default_factory=set)  # event ids of the active window
