"""Application bootstrap: wires the client, registry, sink and orchestrator."""

import asyncio
from typing import Iterable, Protocol

from .client import CloudFormationClient, ICloudFormationClient
from .config import resolve_poll_interval, resolve_region
from .logging_config import get_logger
from .models import DELETING_STATUSES, IN_PROGRESS_STATUSES
from .output import ConsoleSink, ISink
from .registry import WatchRegistry
from .watcher import WatchOrchestrator

logger = get_logger(__name__)

MONITOR_ALL_LABEL = "stackwatch"
MONITOR_ALL_MESSAGE = "Starting to monitor all stacks that are being modified"
MONITOR_DELETING_MESSAGE = "Starting to monitor all stacks that are being deleted"


class IApplication(Protocol):
    """Entry points of the watcher."""

    async def watch_stacks(self, raw_ids: Iterable[str]) -> list[BaseException]:
        """Watch the given stacks; return failures of individual watches."""
        ...

    async def watch_in_progress(self) -> list[BaseException]:
        """Watch every stack with an ongoing operation."""
        ...

    async def watch_deleting(self) -> list[BaseException]:
        """Watch every stack being deleted."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        client: ICloudFormationClient | None = None,
        sink: ISink | None = None,
        poll_interval: float | None = None,
        region: str | None = None,
    ):
        self._client = client or CloudFormationClient(region=resolve_region(region))
        self._sink = sink or ConsoleSink()
        self._registry = WatchRegistry()
        self._orchestrator = WatchOrchestrator(
            client=self._client,
            registry=self._registry,
            sink=self._sink,
            poll_interval=resolve_poll_interval(poll_interval),
        )

    @property
    def orchestrator(self) -> WatchOrchestrator:
        return self._orchestrator

    @property
    def registry(self) -> WatchRegistry:
        return self._registry

    async def watch_stacks(self, raw_ids: Iterable[str]) -> list[BaseException]:
        """Watch the given stacks; return failures of individual watches.

        Each root watch runs in its own task so one failing stack does not
        stop the others.
        """
        unique_ids = list(dict.fromkeys(raw_ids))
        if not unique_ids:
            return []

        logger.info("Watching %s stacks", len(unique_ids))
        results = await asyncio.gather(
            *[self._orchestrator.watch(raw_id) for raw_id in unique_ids],
            return_exceptions=True,
        )

        failures = []
        for raw_id, result in zip(unique_ids, results):
            if isinstance(result, BaseException):
                logger.error("Watch for %s failed: %s", raw_id, result, exc_info=result)
                failures.append(result)
        return failures

    async def watch_in_progress(self) -> list[BaseException]:
        """Watch every stack with an ongoing operation."""
        self._sink.emit_info(MONITOR_ALL_LABEL, MONITOR_ALL_MESSAGE)
        summaries = await self._client.list_stacks(IN_PROGRESS_STATUSES)
        return await self.watch_stacks(summary.stack_id for summary in summaries)

    async def watch_deleting(self) -> list[BaseException]:
        """Watch every stack being deleted."""
        self._sink.emit_info(MONITOR_ALL_LABEL, MONITOR_DELETING_MESSAGE)
        summaries = await self._client.list_stacks(DELETING_STATUSES)
        return await self.watch_stacks(summary.stack_id for summary in summaries)
