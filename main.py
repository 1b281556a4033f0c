"""Main entry point for stackwatch."""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from stackwatch.app import Application
from stackwatch.client import CloudFormationError
from stackwatch.config import resolve_log_level
from stackwatch.arn import find_stack_arns
from stackwatch.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stackwatch",
        description="Follow CloudFormation stack operations, nested stacks included.",
    )
    parser.add_argument("stacks", nargs="*", help="stack names, ids or ARNs")
    parser.add_argument(
        "--deleting",
        action="store_true",
        help="watch every stack that is being deleted",
    )
    parser.add_argument("--poll-interval", type=float, help="seconds between polls")
    parser.add_argument("--region", help="default AWS region")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, stdin=None, app: Application | None = None) -> int:
    """Run the requested watches; return the process exit status."""
    app = app or Application(poll_interval=args.poll_interval, region=args.region)
    if stdin is None:
        stdin = sys.stdin

    if args.stacks:
        failures = await app.watch_stacks(args.stacks)
    elif args.deleting:
        try:
            failures = await app.watch_deleting()
        except CloudFormationError as e:
            logger.error("Listing stacks failed: %s", e)
            return 1
    elif stdin is not None and not stdin.isatty():
        arns = find_stack_arns(stdin.read())
        if not arns:
            logger.error("No stack ARN found from input")
            return 1
        failures = await app.watch_stacks(arns)
    else:
        try:
            failures = await app.watch_in_progress()
        except CloudFormationError as e:
            logger.error("Listing stacks failed: %s", e)
            return 1

    return 1 if failures else 0


def main():
    """Run the watcher."""
    load_dotenv(Path.cwd() / ".env")
    args = parse_args()
    try:
        log_level = resolve_log_level(args.log_level)
    except ValueError as e:
        sys.stderr.write(f"stackwatch: {e}\n")
        sys.exit(2)
    setup_logging(log_level=log_level)

    try:
        status = asyncio.run(run(args))
    except KeyboardInterrupt:
        status = 130
    sys.exit(status)


if __name__ == "__main__":
    main()
