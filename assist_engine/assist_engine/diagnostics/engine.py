"""Diagnostic engine -- runs the rule set over a whole document.

The engine re-scans the entire document on every call; there is no
incremental diffing.  Callers are expected to debounce invocation (see
:mod:`assist_engine.scheduling.debounce`).
"""

from __future__ import annotations

import logging
import time
from typing import Any

from assist_engine.diagnostics.base import BaseRule, LineContext
from assist_engine.diagnostics.registry import RuleRegistry
from assist_engine.models import Diagnostic
from assist_engine.text import split_lines, trim_line

logger = logging.getLogger(__name__)


class DiagnosticEngine:
    """Evaluates every non-blank line against the registered rules.

    Parameters
    ----------
    registry:
        Optional pre-configured registry.  When ``None``, a new empty
        registry is created.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self._registry = registry or RuleRegistry()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def register(self, rule: BaseRule) -> None:
        self._registry.register(rule)

    def analyze(self, text: str) -> list[Diagnostic]:
        """Return the diagnostics for *text*, ordered by line then rule order.

        Total over all strings: an empty document yields no diagnostics,
        and a rule that raises is logged and skipped for that line.
        """
        start = time.monotonic()
        rules = self._registry.get_all()
        diagnostics: list[Diagnostic] = []

        for number, raw in enumerate(split_lines(text), start=1):
            if not trim_line(raw):
                continue
            line = LineContext.from_raw(number, raw)
            for rule in rules:
                try:
                    found = rule.check(line)
                except Exception as exc:
                    logger.error(
                        "Rule %s raised on line %d: %s",
                        rule.rule_id,
                        number,
                        exc,
                        extra={"rule_id": rule.rule_id},
                    )
                    continue
                if found is not None:
                    diagnostics.append(found)

        logger.debug(
            "Analysis pass: %d diagnostic(s) in %.2fms",
            len(diagnostics),
            (time.monotonic() - start) * 1000,
        )
        return diagnostics

    def analyze_markers(self, text: str) -> list[dict[str, Any]]:
        """Return :meth:`analyze` results rendered as editor markers."""
        return [d.to_marker() for d in self.analyze(text)]


def create_default_engine() -> DiagnosticEngine:
    """Create a :class:`DiagnosticEngine` with the built-in rules registered."""
    from assist_engine.diagnostics.rules import default_rules

    engine = DiagnosticEngine()
    for rule in default_rules():
        engine.register(rule)
    return engine
