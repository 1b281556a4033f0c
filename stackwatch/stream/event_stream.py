"""Live, ordered reconstruction of a stack's event log.

DescribeStackEvents only reads from the newest event backwards, so every
polling round re-reads the head of the log. The ids already emitted bound
how far back a round has to walk, and the "User Initiated" event of the
stack itself bounds the walk to the current operation.
"""

import asyncio
from typing import AsyncIterator

from ..client import ICloudFormationClient
from ..config import DEFAULT_POLL_INTERVAL
from ..logging_config import get_logger
from ..models import StackEvent, StackRef, WatchState

logger = get_logger(__name__)


class StackEventStream:
    """Forward-chronological, deduplicated events of one stack operation.

    Iterate with `async for`. Iteration ends on the round in which the stack
    itself reports a terminal status.
    """

    def __init__(
        self,
        client: ICloudFormationClient,
        stack: StackRef,
        state: WatchState | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self._client = client
        self._stack = stack
        self._state = state or WatchState()
        self._poll_interval = poll_interval
        self._complete = False
        self._rounds = 0

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def rounds(self) -> int:
        """Number of polling rounds performed so far."""
        return self._rounds

    async def poll_round(self) -> list[StackEvent]:
        """Walk the log from the newest event and return the unseen ones, oldest first."""
        seen = self._state.seen
        batch: list[StackEvent] = []
        cursor: str | None = None
        stop = False

        while not stop:
            events, cursor = await self._client.pull_events(self._stack, cursor)

            for event in events:
                if event.event_id in seen:
                    # Everything from here on is older and already emitted.
                    stop = True
                    break

                batch.append(event)
                seen.add(event.event_id)

                if event.is_root_of(self._stack.name):
                    if event.is_start_marker:
                        # Older events belong to a previous operation.
                        stop = True
                        break
                    if event.is_terminal:
                        self._complete = True

            if not cursor:
                stop = True

        self._rounds += 1
        batch.reverse()
        logger.debug(
            "Polled %s: %s new events, complete=%s",
            self._stack.name,
            len(batch),
            self._complete,
            extra={"context": {"stack_id": self._stack.stack_id, "round": self._rounds}},
        )
        return batch

    async def __aiter__(self) -> AsyncIterator[StackEvent]:
        while True:
            for event in await self.poll_round():
                yield event

            if self._complete:
                return

            await asyncio.sleep(self._poll_interval)
