"""Periodic database polling agent."""

from idle_agent.backend import create_backend, fetch_all
from idle_agent.errors import (
    AgentStateError,
    IdleAgentError,
    PollError,
    QueryExecutionError,
    RecordDecodeError,
)
from idle_agent.params import AgentParams, QueryAction
from idle_agent.records import GenericRow, decode_rows
from idle_agent.scheduler import AgentState, CancellationHandle, IdleAgent, Ticker

__all__ = [
    "AgentParams",
    "AgentState",
    "AgentStateError",
    "CancellationHandle",
    "GenericRow",
    "IdleAgent",
    "IdleAgentError",
    "PollError",
    "QueryAction",
    "QueryExecutionError",
    "RecordDecodeError",
    "Ticker",
    "create_backend",
    "decode_rows",
    "fetch_all",
]
