"""Decoding of result rows into typed records."""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from idle_agent.errors import RecordDecodeError

RecordT = TypeVar("RecordT", bound=BaseModel)


class GenericRow(BaseModel):
    """Record that accepts whatever columns a query selects."""

    model_config = ConfigDict(extra="allow")


def decode_rows(
    record_type: type[RecordT],
    rows: Iterable[Mapping[str, Any]],
    query: str = "",
) -> list[RecordT]:
    """
    Decode every row into a record, or fail without returning any.

    Column names are matched against the model's field names.

    Args:
        record_type: Pydantic (or non-table SQLModel) model class
        rows: Row mappings as returned by the backend
        query: Query the rows came from, attached to any error

    Returns:
        Records in row order

    Raises:
        RecordDecodeError: If any row does not fit the record type
    """
    records = []
    for index, row in enumerate(rows):
        try:
            records.append(record_type.model_validate(dict(row)))
        # ValidationError is a ValueError; validators may also raise TypeError unwrapped
        except (TypeError, ValueError) as e:
            raise RecordDecodeError(
                f"Row {index} does not decode into {record_type.__name__}: {e}",
                query,
                row_index=index,
            ) from e
    return records
