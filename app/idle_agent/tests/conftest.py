"""Pytest fixtures for idle agent tests."""

from collections.abc import Callable, Iterator, Sequence
from datetime import timedelta

import pytest
from pydantic import BaseModel
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel

from idle_agent.backend import create_backend
from idle_agent.params import AgentParams, QueryAction
from idle_agent.tests.support import (
    EXAMPLE_DATA,
    TEST_INTERVAL,
    Example,
    ExampleTable,
    Recorder,
)


@pytest.fixture
def test_db(tmp_path):
    """Create a temporary test database path."""
    return str(tmp_path / "test.db")


@pytest.fixture
def engine(test_db) -> Iterator[Engine]:
    """Engine over a SQLite file seeded with three example rows (ids 1, 2, 3)."""
    engine = create_backend(f"sqlite:///{test_db}")
    SQLModel.metadata.create_all(engine, tables=[ExampleTable.__table__])

    with Session(engine) as session:
        for data, is_sent, version in EXAMPLE_DATA:
            session.add(ExampleTable(data=data, is_sent=is_sent, version=version))
        session.commit()

    yield engine
    engine.dispose()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_params(engine, recorder) -> Callable[..., AgentParams]:
    """
    Factory fixture for building agent params against the seeded engine.

    Every entry reports to the shared recorder.

    Usage:
        params = make_params([SELECT_IDS], record_type=ExampleId)
        params = make_params([("first", q1), ("second", q2)])  # labelled calls
    """

    def _make_params(
        queries: Sequence[str | tuple[str, str]],
        interval: timedelta | float = TEST_INTERVAL,
        record_type: type[BaseModel] = Example,
    ) -> AgentParams:
        query_actions = []
        for query in queries:
            if isinstance(query, tuple):
                label, text = query
                query_actions.append(QueryAction.new(engine, text, recorder.action(label)))
            else:
                query_actions.append(QueryAction.new(engine, query, recorder.action()))
        return AgentParams.new(query_actions, interval, recorder.error_handler, record_type)

    return _make_params
