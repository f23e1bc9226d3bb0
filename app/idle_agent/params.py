"""Configuration bundle handed to an IdleAgent."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic

from sqlalchemy import Engine

from idle_agent.errors import PollError
from idle_agent.records import RecordT

RecordAction = Callable[[RecordT], None]
ErrorHandler = Callable[[PollError], None]


@dataclass(frozen=True)
class QueryAction(Generic[RecordT]):
    """One thing to poll: a query on a backend, and what to do with each row."""

    backend: Engine  # shared pool, not disposed by the agent
    query: str
    action: RecordAction

    @classmethod
    def new(cls, backend: Engine, query: str, action: RecordAction) -> "QueryAction[RecordT]":
        return cls(backend=backend, query=query, action=action)


@dataclass(frozen=True)
class AgentParams(Generic[RecordT]):
    """
    Everything an IdleAgent needs: the entries to poll, how often, where
    failures go, and the record type every row is decoded into.

    Nothing is validated here. An empty entry list makes every tick a no-op
    and a zero interval ticks as fast as the event loop allows.
    """

    query_actions: Sequence[QueryAction[RecordT]]
    interval: timedelta | float
    error_handler: ErrorHandler
    record_type: type[RecordT]

    def __post_init__(self) -> None:
        object.__setattr__(self, "query_actions", tuple(self.query_actions))

    @classmethod
    def new(
        cls,
        query_actions: Sequence[QueryAction[RecordT]],
        interval: timedelta | float,
        error_handler: ErrorHandler,
        record_type: type[RecordT],
    ) -> "AgentParams[RecordT]":
        return cls(
            query_actions=query_actions,
            interval=interval,
            error_handler=error_handler,
            record_type=record_type,
        )

    @property
    def interval_seconds(self) -> float:
        """Polling interval in seconds."""
        if isinstance(self.interval, timedelta):
            return self.interval.total_seconds()
        return float(self.interval)
