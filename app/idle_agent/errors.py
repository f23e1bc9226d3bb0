"""Exceptions raised or reported by the idle agent."""


class IdleAgentError(Exception):
    """Base class for all idle agent errors."""


class AgentStateError(IdleAgentError):
    """Raised on an illegal lifecycle transition (e.g. starting an agent twice)."""


class PollError(IdleAgentError):
    """
    A failure while polling one query-action entry.

    Instances are never raised out of the polling loop; they are passed to the
    error handler of the agent. The underlying exception is kept as __cause__.
    """

    def __init__(self, message: str, query: str):
        super().__init__(message)
        self.query = query


class QueryExecutionError(PollError):
    """The backend failed to execute the query."""


class RecordDecodeError(PollError):
    """A returned row could not be decoded into the record type."""

    def __init__(self, message: str, query: str, row_index: int):
        super().__init__(message, query)
        self.row_index = row_index
