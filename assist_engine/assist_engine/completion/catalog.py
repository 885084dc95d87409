"""Suggestion catalog -- static vocabulary merged with schema-derived entries."""

from __future__ import annotations

import logging

from assist_engine.catalog import SchemaCatalog
from assist_engine.completion.vocabulary import STATIC_SUGGESTIONS
from assist_engine.models import Column, Suggestion, SuggestionKind, Table

logger = logging.getLogger(__name__)


def _column_documentation(table: Table, column: Column) -> str:
    return f"Column: {column.name} ({column.data_type}) from table {table.name}"


def schema_suggestions(catalog: SchemaCatalog) -> tuple[Suggestion, ...]:
    """Build table and column suggestions for every table in *catalog*.

    Per table: one TABLE entry, then for each column a qualified
    ``table.column`` entry followed by a bare ``column`` entry.
    """
    suggestions: list[Suggestion] = []
    for table in catalog.tables:
        suggestions.append(
            Suggestion(
                label=table.name,
                kind=SuggestionKind.TABLE,
                insert_text=table.name,
                detail=f"Table: {table.name}",
                documentation=f"Table with {table.column_count} columns",
            )
        )
        for column in table.columns:
            qualified = f"{table.name}.{column.name}"
            documentation = _column_documentation(table, column)
            suggestions.append(
                Suggestion(
                    label=qualified,
                    kind=SuggestionKind.COLUMN,
                    insert_text=qualified,
                    detail=column.data_type,
                    documentation=documentation,
                )
            )
            suggestions.append(
                Suggestion(
                    label=column.name,
                    kind=SuggestionKind.COLUMN,
                    insert_text=column.name,
                    detail=f"{column.data_type} - {table.name}",
                    documentation=documentation,
                )
            )
    return tuple(suggestions)


class SuggestionCatalog:
    """All completion candidates for the current assignment.

    The static keyword/function portion is shared; the schema portion is
    regenerated in full by :meth:`rebuild` whenever the schema catalog is
    replaced.
    """

    def __init__(self, catalog: SchemaCatalog | None = None) -> None:
        self._dynamic: tuple[Suggestion, ...] = ()
        if catalog is not None:
            self.rebuild(catalog)

    def rebuild(self, catalog: SchemaCatalog) -> None:
        self._dynamic = schema_suggestions(catalog)
        logger.debug("Suggestion catalog rebuilt with %d schema entries", len(self._dynamic))

    @property
    def static(self) -> tuple[Suggestion, ...]:
        return STATIC_SUGGESTIONS

    @property
    def dynamic(self) -> tuple[Suggestion, ...]:
        return self._dynamic

    def entries(self) -> tuple[Suggestion, ...]:
        """Keywords, then functions, then schema entries in catalog order."""
        return STATIC_SUGGESTIONS + self._dynamic

    def __len__(self) -> int:
        return len(STATIC_SUGGESTIONS) + len(self._dynamic)
