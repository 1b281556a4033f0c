"""Helpers for finding CloudFormation stack ARNs in free text."""

import re
from dataclasses import dataclass

STACK_ARN_RGX = re.compile(r"arn:aws:cloudformation:([^:]+):\d+:stack/([^/]+)/[^\"'|\s]+")


@dataclass(frozen=True)
class StackArn:
    """Pieces of a stack ARN."""

    arn: str
    region: str
    name: str


def parse_stack_arn(text: str) -> StackArn | None:
    """Return the first stack ARN in `text` (plain, table or JSON CLI output)."""
    match = STACK_ARN_RGX.search(text or "")
    if not match:
        return None
    return StackArn(arn=match.group(0), region=match.group(1), name=match.group(2))


def find_stack_arns(text: str) -> list[str]:
    """Return all distinct stack ARNs in `text`, in order of appearance."""
    arns: list[str] = []
    for match in STACK_ARN_RGX.finditer(text or ""):
        if match.group(0) not in arns:
            arns.append(match.group(0))
    return arns
