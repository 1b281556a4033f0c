"""CloudFormation client module."""

from .cloudformation import (
    CloudFormationClient,
    CloudFormationError,
    ICloudFormationClient,
    StackNotFoundError,
)

__all__ = [
    "CloudFormationClient",
    "CloudFormationError",
    "ICloudFormationClient",
    "StackNotFoundError",
]
