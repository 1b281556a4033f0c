"""WatchOrchestrator: attach to stacks and follow their nested stacks."""

import asyncio
from typing import Protocol

from ..arn import parse_stack_arn
from ..client import ICloudFormationClient, StackNotFoundError
from ..config import DEFAULT_POLL_INTERVAL
from ..logging_config import get_logger
from ..models import StackEvent, StackRef, WatchStatus
from ..output import NO_OPERATIONS, STACK_NOT_FOUND, ISink
from ..registry import WatchRegistry
from ..stream import StackEventStream

logger = get_logger(__name__)


class IWatchOrchestrator(Protocol):
    """Following stack operations, nested stacks included."""

    async def watch(self, raw_id: str) -> None:
        """Watch the stack until its operation and all nested watches finish."""
        ...


def _label_for(raw_id: str) -> str:
    arn = parse_stack_arn(raw_id)
    return arn.name if arn else raw_id


def nested_stack_id(stack: StackRef, event: StackEvent) -> str | None:
    """Physical id of the nested stack an event reports on, if any."""
    if not event.is_stack_resource or event.is_root_of(stack.name):
        return None
    if not event.physical_resource_id or event.physical_resource_id == stack.stack_id:
        return None
    return event.physical_resource_id


class WatchOrchestrator:
    """Resolves stacks, streams their events to the sink and fans out to nested stacks."""

    def __init__(
        self,
        client: ICloudFormationClient,
        registry: WatchRegistry,
        sink: ISink,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self._client = client
        self._registry = registry
        self._sink = sink
        self._poll_interval = poll_interval

    @property
    def registry(self) -> WatchRegistry:
        return self._registry

    async def watch(self, raw_id: str) -> None:
        """Watch the stack until its operation and all nested watches finish.

        Not-found and idle stacks are reported to the sink and return normally.
        A stack already being watched is skipped silently. Any other client
        error propagates.
        """
        try:
            description = await self._client.describe_stack(raw_id)
        except StackNotFoundError:
            logger.info("Stack %s not found", raw_id)
            self._sink.emit_info(_label_for(raw_id), STACK_NOT_FOUND)
            return

        stack = description.stack
        if not description.is_in_progress:
            if self._registry.mark_inert(stack.stack_id):
                self._sink.emit_info(stack.name, f"{NO_OPERATIONS} ({description.status})")
            return

        state = self._registry.activate(stack.stack_id)
        if state is None:
            logger.debug("Stack %s is already being watched", stack.stack_id)
            return

        logger.info(
            "Watching %s (%s)",
            stack.name,
            description.status,
            extra={"context": {"stack_id": stack.stack_id, "region": stack.region}},
        )

        children: list[asyncio.Task] = []
        try:
            stream = StackEventStream(
                self._client, stack, state, poll_interval=self._poll_interval
            )
            async for event in stream:
                self._sink.emit_event(stack, event)

                child_id = nested_stack_id(stack, event)
                if (
                    child_id
                    and not event.is_terminal
                    and self._registry.status(child_id) != WatchStatus.ACTIVE
                ):
                    logger.info("Nested stack %s found in %s", child_id, stack.name)
                    children.append(asyncio.create_task(self.watch(child_id)))
        finally:
            self._registry.finish(stack.stack_id)
            failures = await self._join(stack, children)

        logger.info("Operation on %s concluded", stack.name)
        if failures:
            raise failures[0]

    async def _join(
        self, stack: StackRef, children: list[asyncio.Task]
    ) -> list[BaseException]:
        """Wait for every nested watch; return the failures."""
        if not children:
            return []

        results = await asyncio.gather(*children, return_exceptions=True)
        failures = [result for result in results if isinstance(result, BaseException)]
        for failure in failures:
            logger.error(
                "Nested watch under %s failed: %s", stack.name, failure, exc_info=failure
            )
        return failures
