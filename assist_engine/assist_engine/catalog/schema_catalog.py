"""Schema catalog -- table and column metadata for one assignment.

The catalog is a leaf component: it knows nothing about suggestions or
diagnostics.  Lookups are case-insensitive exact matches; when duplicate
names exist the first entry in catalog order wins.  There is deliberately
no fuzzy or substring matching.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from assist_engine.errors import SchemaLoadError
from assist_engine.models import Column, Table

logger = logging.getLogger(__name__)


def parse_tables(tables: Iterable[Table | Mapping[str, Any]]) -> tuple[Table, ...]:
    """Validate *tables* into :class:`Table` instances.

    Accepts already-built tables or raw mappings in the assignment wire
    shape.  Raises :class:`SchemaLoadError` on the first invalid entry.
    """
    parsed: list[Table] = []
    for index, raw in enumerate(tables):
        if isinstance(raw, Table):
            parsed.append(raw)
            continue
        try:
            parsed.append(Table.model_validate(raw))
        except ValidationError as exc:
            raise SchemaLoadError(f"Invalid table definition at index {index}: {exc}") from exc
    return tuple(parsed)


class SchemaCatalog:
    """The set of tables and columns known for the current assignment.

    Parameters
    ----------
    tables:
        Optional initial tables; equivalent to calling :meth:`load`.
    """

    def __init__(self, tables: Iterable[Table | Mapping[str, Any]] | None = None) -> None:
        self._tables: tuple[Table, ...] = ()
        if tables is not None:
            self.load(tables)

    def load(self, tables: Iterable[Table | Mapping[str, Any]]) -> None:
        """Replace the catalog contents.

        Validation happens before the swap, so a failing payload leaves the
        previous tables in place.
        """
        parsed = parse_tables(tables)
        self._tables = parsed
        logger.debug(
            "Schema catalog loaded: %d table(s), %d column(s)",
            len(parsed),
            sum(t.column_count for t in parsed),
        )

    @property
    def tables(self) -> tuple[Table, ...]:
        return self._tables

    @property
    def is_empty(self) -> bool:
        return not self._tables

    def find_table(self, name: str) -> Table | None:
        """Return the first table whose name equals *name*, ignoring case."""
        wanted = name.lower()
        for table in self._tables:
            if table.name.lower() == wanted:
                return table
        return None

    def find_column(self, name: str) -> tuple[Table, Column] | None:
        """Return ``(table, column)`` for the first column named *name*.

        Tables are scanned in catalog order, then columns in declaration
        order within each table.
        """
        wanted = name.lower()
        for table in self._tables:
            for column in table.columns:
                if column.name.lower() == wanted:
                    return table, column
        return None

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables)
