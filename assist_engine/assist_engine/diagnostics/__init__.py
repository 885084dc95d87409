"""Line-local SQL diagnostics.

Scans query text line by line against a fixed, ordered rule set and
reports problems as positioned :class:`~assist_engine.models.Diagnostic`
objects.  Malformed SQL is never an exception.

Quick start::

    from assist_engine.diagnostics import create_default_engine

    engine = create_default_engine()
    for diagnostic in engine.analyze("SELECT * FROM (users"):
        print(diagnostic.line, diagnostic.column, diagnostic.message)
"""

from assist_engine.diagnostics.base import BaseRule, LineContext
from assist_engine.diagnostics.engine import DiagnosticEngine, create_default_engine
from assist_engine.diagnostics.publisher import DiagnosticPublisher
from assist_engine.diagnostics.registry import RuleRegistry
from assist_engine.diagnostics.rules import (
    DanglingFromRule,
    DanglingSelectRule,
    DoubleQuoteParityRule,
    ParenthesisBalanceRule,
    SelectBeforeFromRule,
    SingleQuoteParityRule,
    default_rules,
)

__all__ = [
    "BaseRule",
    "DanglingFromRule",
    "DanglingSelectRule",
    "DiagnosticEngine",
    "DiagnosticPublisher",
    "DoubleQuoteParityRule",
    "LineContext",
    "ParenthesisBalanceRule",
    "RuleRegistry",
    "SelectBeforeFromRule",
    "SingleQuoteParityRule",
    "create_default_engine",
    "default_rules",
]
