"""Abstract base class for diagnostic rules.

Every rule subclasses :class:`BaseRule` and implements :meth:`check`.
Rules are stateless; everything they need arrives in a
:class:`LineContext`.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass

from assist_engine.models import Diagnostic, DiagnosticSeverity, Position
from assist_engine.text import trim_line


@dataclass(frozen=True, slots=True)
class LineContext:
    """One non-blank line of the document under analysis."""

    number: int
    raw: str
    normalized: str

    @classmethod
    def from_raw(cls, number: int, raw: str) -> LineContext:
        """Build a context; ``normalized`` is the trimmed, lower-cased line."""
        return cls(number=number, raw=raw, normalized=trim_line(raw).lower())


class BaseRule(abc.ABC):
    """Abstract base for all line rules.

    Subclasses must implement :attr:`rule_id`, :attr:`message` and
    :meth:`check`.  A rule reports at most one diagnostic per line.
    """

    severity: DiagnosticSeverity = DiagnosticSeverity.ERROR

    @property
    @abc.abstractmethod
    def rule_id(self) -> str:
        """Stable identifier for the rule (e.g. ``unmatched-parentheses``)."""

    @property
    @abc.abstractmethod
    def message(self) -> str:
        """Message attached to every diagnostic this rule emits."""

    @abc.abstractmethod
    def check(self, line: LineContext) -> Diagnostic | None:
        """Inspect *line* and return a diagnostic, or ``None`` if it passes."""

    def diagnostic(self, line: LineContext, column: int, length: int) -> Diagnostic:
        """Build this rule's diagnostic, clamped to the raw line.

        Keyword rules compute columns on the normalized line, whose length
        can differ from the raw line after case folding.  Clamping keeps the
        span inside the line the editor renders.
        """
        line_length = len(line.raw)
        column = max(1, min(column, line_length or 1))
        length = max(0, min(length, line_length - column + 1))
        return Diagnostic(
            position=Position(line=line.number, column=column),
            length=length,
            severity=self.severity,
            message=self.message,
            rule_id=self.rule_id,
        )
