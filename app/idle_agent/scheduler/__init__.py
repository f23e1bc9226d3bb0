"""Polling loop components."""

from idle_agent.scheduler.agent import CancellationHandle, IdleAgent
from idle_agent.scheduler.base import AgentState, Ticker

__all__ = [
    "AgentState",
    "CancellationHandle",
    "IdleAgent",
    "Ticker",
]
