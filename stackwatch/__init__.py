"""stackwatch: live, ordered feeds of CloudFormation stack operations."""

from .app import Application, IApplication
from .arn import StackArn, find_stack_arns, parse_stack_arn
from .client import (
    CloudFormationClient,
    CloudFormationError,
    ICloudFormationClient,
    StackNotFoundError,
)
from .models import (
    StackDescription,
    StackEvent,
    StackRef,
    StackSummary,
    WatchState,
    WatchStatus,
)
from .output import ConsoleSink, ISink
from .registry import WatchRegistry
from .stream import StackEventStream
from .watcher import IWatchOrchestrator, WatchOrchestrator

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "StackRef",
    "StackDescription",
    "StackSummary",
    "StackEvent",
    "WatchState",
    "WatchStatus",
    # ARNs
    "StackArn",
    "parse_stack_arn",
    "find_stack_arns",
    # Components
    "ICloudFormationClient",
    "CloudFormationClient",
    "CloudFormationError",
    "StackNotFoundError",
    "StackEventStream",
    "WatchRegistry",
    "IWatchOrchestrator",
    "WatchOrchestrator",
    "ISink",
    "ConsoleSink",
]
