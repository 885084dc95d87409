"""Hover provider: resolves a word against the schema catalog."""

from __future__ import annotations

from assist_engine.catalog import SchemaCatalog
from assist_engine.models import Column, HoverResult, Position, Range, Table
from assist_engine.text import word_at_position


def format_table_hover(table: Table) -> str:
    column_list = "\n".join(f"• {c.name} ({c.data_type})" for c in table.columns)
    return f"**Table: {table.name}**\n\nColumns:\n{column_list}"


def format_column_hover(table: Table, column: Column) -> str:
    return f"**Column: {column.name}**\n\nType: {column.data_type}\nTable: {table.name}"


class HoverProvider:
    """Describes tables and columns under the cursor.

    Table names win over column names; unrecognised words produce no hover.
    """

    def __init__(self, catalog: SchemaCatalog) -> None:
        self._catalog = catalog

    def provide_hover(self, word: str) -> str | None:
        table = self._catalog.find_table(word)
        if table is not None:
            return format_table_hover(table)

        found = self._catalog.find_column(word)
        if found is not None:
            return format_column_hover(*found)

        return None

    def provide_hover_at(self, text: str, position: Position) -> HoverResult | None:
        """Resolve the word touching *position* and anchor the hover to it."""
        word = word_at_position(text, position)
        if word is None:
            return None
        contents = self.provide_hover(word.word)
        if contents is None:
            return None
        return HoverResult(
            contents=contents,
            range=Range.on_line(position.line, word.start_column, word.end_column),
        )
