"""Positional models shared by diagnostics, completions and hovers.

All coordinates are 1-indexed to match on-screen editor coordinates.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DIAGNOSTIC_SOURCE = "SQL Validator"


class DiagnosticSeverity(str, Enum):
    """Severity of a diagnostic.  The analysis rules only emit ERROR."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    HINT = "HINT"

    @property
    def marker_value(self) -> int:
        """Numeric marker severity understood by the host editor."""
        return _MARKER_SEVERITY[self]


_MARKER_SEVERITY: dict[DiagnosticSeverity, int] = {
    DiagnosticSeverity.HINT: 1,
    DiagnosticSeverity.INFO: 2,
    DiagnosticSeverity.WARNING: 4,
    DiagnosticSeverity.ERROR: 8,
}


class Position(BaseModel):
    """A cursor or diagnostic anchor in the document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="1-indexed line number.")
    column: int = Field(..., ge=1, description="1-indexed column number.")


class Range(BaseModel):
    """A half-open character span ``[start, end)``."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(..., ge=1)
    start_column: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)
    end_column: int = Field(..., ge=1)

    @classmethod
    def on_line(cls, line: int, start_column: int, end_column: int) -> Range:
        """Build a single-line range."""
        return cls(start_line=line, start_column=start_column, end_line=line, end_column=end_column)

    @property
    def is_empty(self) -> bool:
        return self.start_line == self.end_line and self.start_column == self.end_column


class Diagnostic(BaseModel):
    """A positioned syntax-error annotation.

    Diagnostics are ephemeral: every analysis pass produces a fresh list and
    no diagnostic is mutated after creation.
    """

    model_config = ConfigDict(frozen=True)

    position: Position = Field(..., description="Start of the flagged span.")
    length: int = Field(..., ge=0, description="Span length in characters on the same line.")
    severity: DiagnosticSeverity = Field(default=DiagnosticSeverity.ERROR)
    message: str = Field(..., description="Human-readable description of the problem.")
    source: str = Field(default=DIAGNOSTIC_SOURCE, description="Tag identifying the producer.")
    rule_id: str = Field(default="", description="Identifier of the rule that produced the diagnostic.")

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def range(self) -> Range:
        return Range.on_line(self.line, self.column, self.column + self.length)

    def to_marker(self) -> dict[str, Any]:
        """Render the diagnostic as an editor marker."""
        return {
            "severity": self.severity.marker_value,
            "startLineNumber": self.line,
            "startColumn": self.column,
            "endLineNumber": self.line,
            "endColumn": self.column + self.length,
            "message": self.message,
            "source": self.source,
        }
