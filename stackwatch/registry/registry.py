"""WatchRegistry: which stacks are under observation."""

from ..logging_config import get_logger
from ..models import WatchState, WatchStatus

logger = get_logger(__name__)


class WatchRegistry:
    """Per-stack watch state, keyed by physical stack id.

    Every method is synchronous: under asyncio a check-and-set here cannot be
    interleaved with another watch.
    """

    def __init__(self):
        self._states: dict[str, WatchState] = {}

    def status(self, stack_id: str) -> WatchStatus | None:
        """Current status, or None for a stack never seen."""
        state = self._states.get(stack_id)
        return state.status if state else None

    def activate(self, stack_id: str) -> WatchState | None:
        """Mark the stack Active. Returns None if another watch already holds it."""
        state = self._states.get(stack_id)
        if state is not None and state.status == WatchStatus.ACTIVE:
            return None

        state = WatchState(status=WatchStatus.ACTIVE)
        self._states[stack_id] = state
        logger.debug("Activated watch for %s", stack_id)
        return state

    def finish(self, stack_id: str) -> None:
        """Mark an Active stack Finished and drop its seen ids."""
        state = self._states.get(stack_id)
        if state is None or state.status != WatchStatus.ACTIVE:
            raise RuntimeError(f"Watch for {stack_id} is not active")

        state.status = WatchStatus.FINISHED
        state.seen.clear()
        logger.debug("Finished watch for %s", stack_id)

    def mark_inert(self, stack_id: str) -> bool:
        """Record an idle stack as Pending.

        Returns False when that outcome was already reported (Pending) or a
        watch is running (Active), in which case nothing should be written.
        """
        state = self._states.get(stack_id)
        if state is not None and state.status in (WatchStatus.PENDING, WatchStatus.ACTIVE):
            return False

        self._states[stack_id] = WatchState(status=WatchStatus.PENDING)
        return True

    def active_ids(self) -> list[str]:
        return [
            stack_id
            for stack_id, state in self._states.items()
            if state.status == WatchStatus.ACTIVE
        ]
