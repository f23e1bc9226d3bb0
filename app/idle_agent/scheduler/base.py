"""Base primitives for the polling loop."""

import asyncio
from enum import Enum


class AgentState(str, Enum):
    """Lifecycle of an IdleAgent. CANCELLED is terminal."""

    IDLE = "idle"
    RUNNING = "running"
    CANCELLED = "cancelled"


class Ticker:
    """
    Periodic timer bound to the running event loop.

    The first tick fires one full interval after the ticker is created. Each
    later tick fires one interval after the previous tick fired. If the caller
    falls behind, the overdue tick fires immediately and the schedule restarts
    from there; missed ticks are never replayed.
    """

    def __init__(self, interval_seconds: float):
        """
        Args:
            interval_seconds: Seconds between ticks (0 ticks on every loop pass)

        Raises:
            RuntimeError: If there is no running event loop
        """
        self.interval_seconds = interval_seconds
        self._loop = asyncio.get_running_loop()
        self._deadline = self._loop.time() + interval_seconds

    async def tick(self) -> float:
        """
        Wait for the next tick.

        Returns:
            Event loop time at which the tick fired
        """
        delay = self._deadline - self._loop.time()
        await asyncio.sleep(max(delay, 0.0))
        fired = self._loop.time()
        self._deadline = fired + self.interval_seconds
        return fired
