"""Completion provider: binds the suggestion catalog to a replacement range."""

from __future__ import annotations

from assist_engine.completion.catalog import SuggestionCatalog
from assist_engine.models import Position, Range, Suggestion
from assist_engine.text import word_until_position


class CompletionProvider:
    """Returns the full, unfiltered catalog for a cursor position.

    Prefix filtering and ranking are left to the host editor's completion
    widget; this provider only computes which span the chosen item replaces.
    """

    def __init__(self, suggestions: SuggestionCatalog) -> None:
        self._suggestions = suggestions

    @staticmethod
    def replacement_range(text: str, position: Position) -> Range:
        """Span of the identifier prefix ending at the cursor."""
        word = word_until_position(text, position)
        return Range.on_line(position.line, word.start_column, word.end_column)

    def provide_completions(self, text: str, position: Position) -> list[Suggestion]:
        replacement = self.replacement_range(text, position)
        return [s.with_range(replacement) for s in self._suggestions.entries()]
