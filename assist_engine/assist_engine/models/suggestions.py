"""Completion and hover models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from assist_engine.models.diagnostics import Range


class SuggestionKind(str, Enum):
    """Category of a completion candidate."""

    KEYWORD = "KEYWORD"
    FUNCTION = "FUNCTION"
    TABLE = "TABLE"
    COLUMN = "COLUMN"

    @property
    def completion_item_kind(self) -> int:
        """Numeric completion-item kind used by the host editor's widget."""
        return _COMPLETION_ITEM_KIND[self]


# Keyword=14, Function=3, Struct=19 (tables), Field=5 (columns).
_COMPLETION_ITEM_KIND: dict[SuggestionKind, int] = {
    SuggestionKind.KEYWORD: 14,
    SuggestionKind.FUNCTION: 3,
    SuggestionKind.TABLE: 19,
    SuggestionKind.COLUMN: 5,
}


class Suggestion(BaseModel):
    """A labelled completion candidate."""

    model_config = ConfigDict(frozen=True)

    label: str
    kind: SuggestionKind
    insert_text: str
    detail: str = ""
    documentation: str = ""
    range: Range | None = Field(default=None, description="Replacement span, bound at completion time.")

    def with_range(self, replacement: Range) -> Suggestion:
        """Return a copy bound to *replacement*."""
        return self.model_copy(update={"range": replacement})


class WordSpan(BaseModel):
    """An identifier on a single line, ``[start_column, end_column)``."""

    model_config = ConfigDict(frozen=True)

    word: str
    start_column: int = Field(..., ge=1)
    end_column: int = Field(..., ge=1)


class HoverResult(BaseModel):
    """Markdown hover contents, optionally anchored to the hovered word."""

    model_config = ConfigDict(frozen=True)

    contents: str
    range: Range | None = None
