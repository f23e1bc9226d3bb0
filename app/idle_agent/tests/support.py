"""Seed data, record models and call recorders shared by the tests."""

from collections.abc import Callable
from typing import Any, Optional

from pydantic import BaseModel, field_validator
from sqlmodel import Field, SQLModel

from idle_agent.errors import PollError

# Short enough to keep the suite fast, long enough to tell ticks apart
TEST_INTERVAL = 0.2

SELECT_EXAMPLES = "SELECT id, data, is_sent, version FROM example ORDER BY id"
SELECT_IDS = "SELECT id FROM example ORDER BY id"
# Colon inside a string literal; must reach the database untouched
SELECT_IDS_WITH_COLON_LITERAL = "SELECT id FROM example WHERE data != 'x :y' ORDER BY id"

EXAMPLE_DATA = [
    ("Some random text", False, 0),
    ("Another text", True, 1),
    ("third text", True, 0),
]


class ExampleTable(SQLModel, table=True):
    """Seed table polled by the tests."""

    __tablename__ = "example"

    id: Optional[int] = Field(default=None, primary_key=True)
    data: str
    is_sent: bool
    version: int


class Example(SQLModel):
    """Record type matching every column of the example table."""

    id: int
    data: str
    is_sent: bool
    version: int


class ExampleId(BaseModel):
    """Record type for queries selecting only the id column."""

    id: int


class OddId(BaseModel):
    """Record type whose validator rejects even ids with a TypeError."""

    id: int

    @field_validator("id")
    @classmethod
    def reject_even(cls, value: int) -> int:
        if value % 2 == 0:
            raise TypeError(f"even id {value}")
        return value


class Recorder:
    """Collects handler calls so tests can assert on order and count."""

    def __init__(self) -> None:
        self.records: list[Any] = []
        self.errors: list[PollError] = []

    def action(self, label: str | None = None) -> Callable[[Any], None]:
        """Build a record handler, optionally tagging each call with a label."""

        def _action(record: Any) -> None:
            self.records.append(record if label is None else (label, record.id))

        return _action

    def error_handler(self, error: PollError) -> None:
        self.errors.append(error)

    @property
    def ids(self) -> list[int]:
        return [record.id for record in self.records]
