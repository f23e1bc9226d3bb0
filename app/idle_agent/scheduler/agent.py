"""The idle agent: periodic polling of query-action entries."""

import asyncio
import contextlib
import logging
from typing import Generic

from sqlalchemy import Engine

from idle_agent.backend import fetch_all
from idle_agent.errors import AgentStateError, PollError
from idle_agent.params import AgentParams
from idle_agent.records import RecordT, decode_rows
from idle_agent.scheduler.base import AgentState, Ticker

logger = logging.getLogger(__name__)


class CancellationHandle:
    """The caller's only control over a started agent."""

    def __init__(self, task: "asyncio.Task[None]"):
        self._task = task

    def cancel(self) -> None:
        """
        Request the polling loop to stop. Does not wait for it.

        The loop stops at its next suspension point: while waiting for a tick
        or for a query. A query already running in a worker thread finishes in
        the background, but its rows are never dispatched.
        """
        if not self._task.done():
            logger.info("Cancelling %s", self._task.get_name())
        self._task.cancel()

    abort = cancel

    def cancelled(self) -> bool:
        return self._task.cancelled()

    def done(self) -> bool:
        return self._task.done()

    async def join(self) -> None:
        """Wait until the polling loop has stopped."""
        with contextlib.suppress(asyncio.CancelledError):
            await self._task


class IdleAgent(Generic[RecordT]):
    """
    Runs every query-action entry of its params once per interval.

    Entries run one after another in the order given. Each returned row is
    decoded into params.record_type and passed to the entry's action. A failed
    entry is reported to params.error_handler and the tick moves on to the
    next entry; only cancellation stops the loop.
    """

    def __init__(self, params: AgentParams[RecordT], name: str = "idle-agent"):
        """
        Initialize the agent. Nothing runs until start() is called.

        Args:
            params: Configuration bundle; owned by this agent from now on
            name: Name used for the loop task and in log messages
        """
        self.params = params
        self.name = name
        self._state = AgentState.IDLE

    @classmethod
    def new(cls, params: AgentParams[RecordT]) -> "IdleAgent[RecordT]":
        return cls(params)

    @property
    def state(self) -> AgentState:
        return self._state

    def start(self) -> CancellationHandle:
        """
        Start polling in a background task on the running event loop.

        The first tick fires one interval from now. An agent can be started
        only once; build a new one to poll again after cancelling.

        Returns:
            Handle to cancel the polling loop

        Raises:
            AgentStateError: If the agent was already started
            RuntimeError: If called outside a running event loop
        """
        if self._state is not AgentState.IDLE:
            raise AgentStateError(f"{self.name} is {self._state.value} and cannot be started again")

        ticker = Ticker(self.params.interval_seconds)
        task = asyncio.create_task(self._run(ticker), name=self.name)
        task.add_done_callback(self._on_done)
        self._state = AgentState.RUNNING

        logger.info(
            "Started %s: %d query action(s) every %.3fs",
            self.name,
            len(self.params.query_actions),
            self.params.interval_seconds,
        )
        return CancellationHandle(task)

    async def _run(self, ticker: Ticker) -> None:
        while True:
            await ticker.tick()
            await self.check_data()

    async def check_data(self) -> None:
        """Run one tick: every entry, in order, dispatching rows or reporting failure."""
        logger.debug("%s tick: %d query action(s)", self.name, len(self.params.query_actions))

        for query_action in self.params.query_actions:
            try:
                records = await self._fetch_records(query_action.backend, query_action.query)
            except PollError as e:
                logger.warning("%s failed to poll %r: %s", self.name, query_action.query, e)
                self.params.error_handler(e)
                continue

            logger.debug("Dispatching %d record(s) for %r", len(records), query_action.query)
            for record in records:
                query_action.action(record)

    async def _fetch_records(self, backend: Engine, query: str) -> list[RecordT]:
        rows = await asyncio.to_thread(fetch_all, backend, query)
        return decode_rows(self.params.record_type, rows, query)

    def _on_done(self, task: "asyncio.Task[None]") -> None:
        self._state = AgentState.CANCELLED
        if task.cancelled():
            logger.info("%s stopped", self.name)
            return

        error = task.exception()
        if error is not None:
            logger.error("%s died: handler raised", self.name, exc_info=error)
