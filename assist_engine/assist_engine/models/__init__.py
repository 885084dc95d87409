"""Domain models for the assist engine."""

from assist_engine.models.diagnostics import (
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
)
from assist_engine.models.schema import Column, Table
from assist_engine.models.suggestions import (
    HoverResult,
    Suggestion,
    SuggestionKind,
    WordSpan,
)

__all__ = [
    "Column",
    "Diagnostic",
    "DiagnosticSeverity",
    "HoverResult",
    "Position",
    "Range",
    "Suggestion",
    "SuggestionKind",
    "Table",
    "WordSpan",
]
