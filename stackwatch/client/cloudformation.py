"""CloudFormation access through boto3."""

import asyncio
from typing import Iterable, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..arn import parse_stack_arn
from ..logging_config import get_logger
from ..models import StackDescription, StackEvent, StackRef, StackSummary

logger = get_logger(__name__)

RETRY_CONFIG = Config(retries={"max_attempts": 10, "mode": "standard"})


class CloudFormationError(RuntimeError):
    """A CloudFormation call failed after botocore's own retries."""


class StackNotFoundError(CloudFormationError):
    """The requested stack does not exist (or was deleted)."""


class ICloudFormationClient(Protocol):
    """Lookup, listing and event-log access for stacks."""

    async def describe_stack(self, raw_id: str) -> StackDescription:
        """Resolve a stack name, id or ARN. Raises StackNotFoundError."""
        ...

    async def list_stacks(self, statuses: Iterable[str]) -> list[StackSummary]:
        """List stacks currently in one of `statuses`."""
        ...

    async def pull_events(
        self, stack: StackRef, cursor: str | None = None
    ) -> tuple[list[StackEvent], str | None]:
        """Read one page of the stack's event log, newest first."""
        ...


def _is_not_found(error: ClientError) -> bool:
    message = error.response.get("Error", {}).get("Message", "")
    return "does not exist" in message


class CloudFormationClient:
    """boto3-backed client. Blocking calls run in a worker thread."""

    def __init__(
        self,
        region: str | None = None,
        session: boto3.session.Session | None = None,
    ):
        self._session = session or boto3.session.Session()
        self._region = region
        self._clients: dict[str | None, object] = {}

    def _client_for(self, region: str | None):
        region = region or self._region
        if region not in self._clients:
            self._clients[region] = self._session.client(
                "cloudformation", region_name=region, config=RETRY_CONFIG
            )
        return self._clients[region]

    async def describe_stack(self, raw_id: str) -> StackDescription:
        """Resolve a stack name, id or ARN. Raises StackNotFoundError."""
        arn = parse_stack_arn(raw_id)
        client = self._client_for(arn.region if arn else None)

        try:
            response = await asyncio.to_thread(client.describe_stacks, StackName=raw_id)
        except ClientError as e:
            if _is_not_found(e):
                raise StackNotFoundError(f"Stack {raw_id} does not exist") from e
            raise CloudFormationError(f"DescribeStacks failed for {raw_id}: {e}") from e
        except BotoCoreError as e:
            raise CloudFormationError(f"DescribeStacks failed for {raw_id}: {e}") from e

        stacks = response.get("Stacks") or []
        if not stacks:
            raise StackNotFoundError(f"Stack {raw_id} does not exist")

        item = stacks[0]
        stack = StackRef(
            name=item["StackName"],
            stack_id=item["StackId"],
            region=client.meta.region_name,
        )
        return StackDescription(stack=stack, status=item["StackStatus"])

    async def list_stacks(self, statuses: Iterable[str]) -> list[StackSummary]:
        """List stacks currently in one of `statuses`."""
        client = self._client_for(None)
        status_filter = sorted(statuses)

        def _list() -> list[StackSummary]:
            paginator = client.get_paginator("list_stacks")
            return [
                StackSummary(stack_id=item["StackId"], name=item["StackName"])
                for page in paginator.paginate(StackStatusFilter=status_filter)
                for item in page.get("StackSummaries", [])
            ]

        try:
            summaries = await asyncio.to_thread(_list)
        except (ClientError, BotoCoreError) as e:
            raise CloudFormationError(f"ListStacks failed: {e}") from e

        logger.debug("Listed %s stacks in %s", len(summaries), status_filter)
        return summaries

    async def pull_events(
        self, stack: StackRef, cursor: str | None = None
    ) -> tuple[list[StackEvent], str | None]:
        """Read one page of the stack's event log, newest first."""
        client = self._client_for(stack.region)
        params = {"StackName": stack.stack_id}
        if cursor:
            params["NextToken"] = cursor

        try:
            response = await asyncio.to_thread(client.describe_stack_events, **params)
        except ClientError as e:
            if _is_not_found(e):
                raise StackNotFoundError(f"Stack {stack.stack_id} does not exist") from e
            raise CloudFormationError(
                f"DescribeStackEvents failed for {stack.stack_id}: {e}"
            ) from e
        except BotoCoreError as e:
            raise CloudFormationError(
                f"DescribeStackEvents failed for {stack.stack_id}: {e}"
            ) from e

        events = [StackEvent.from_api(item) for item in response.get("StackEvents", [])]
        return events, response.get("NextToken")
