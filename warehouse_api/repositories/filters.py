"""Equality-filter builder for queries with optional parameters."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, and_, true
from sqlalchemy.orm import InstrumentedAttribute


class EqualityFilter:
    """Collects ``column = value`` conditions for the values that were provided.

    ``None`` means "not provided" and adds nothing; every other value,
    including the empty string, becomes a condition. Conditions keep the order
    in which they were added, and :meth:`render` turns that one sequence into
    the SQL clause, so the Nth condition always binds the Nth value. Values
    are never rendered into the SQL text.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[InstrumentedAttribute, Any]] = []

    def add(self, column: InstrumentedAttribute, value: Any) -> EqualityFilter:
        if value is not None:
            self._pairs.append((column, value))
        return self

    @property
    def columns(self) -> list[str]:
        return [column.key for column, _ in self._pairs]

    def __len__(self) -> int:
        return len(self._pairs)

    def render(self) -> ColumnElement[bool]:
        """Return the conjunction of the conditions; with none it is always true."""
        return and_(true(), *(column == value for column, value in self._pairs))
