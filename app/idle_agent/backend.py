"""Query execution against a SQLAlchemy connection pool."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, RowMapping, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import create_engine

from idle_agent.errors import QueryExecutionError

logger = logging.getLogger(__name__)


def create_backend(database_url: str, **engine_kwargs: Any) -> Engine:
    """
    Create the engine (connection pool) that query-action entries poll.

    The caller owns the returned engine and must keep it alive for as long as
    any agent uses it.

    Args:
        database_url: SQLAlchemy database URL (e.g., sqlite:///data/app.db)
        **engine_kwargs: Passed through to create_engine

    Returns:
        A SQLAlchemy Engine
    """
    url = make_url(database_url)

    # Ensure directory exists for file-backed SQLite databases
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **engine_kwargs)
    logger.info("Backend initialized: %s", url.render_as_string(hide_password=True))
    return engine


def fetch_all(backend: Engine, query: str) -> list[RowMapping]:
    """
    Execute a query and return every row as a column-name mapping.

    This blocks on the database driver; async callers should run it in a
    worker thread.

    Args:
        backend: Engine to borrow a connection from
        query: Raw SQL text, passed to the database unmodified

    Returns:
        Rows in the order the database returned them

    Raises:
        QueryExecutionError: If the query could not be executed
    """
    try:
        with backend.connect() as connection:
            result = connection.exec_driver_sql(query)
            rows = list(result.mappings().all())
    except SQLAlchemyError as e:
        raise QueryExecutionError(f"Query execution failed: {e}", query) from e

    logger.debug("Fetched %d row(s) for query: %s", len(rows), query)
    return rows
