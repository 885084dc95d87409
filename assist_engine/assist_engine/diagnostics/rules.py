"""Built-in line rules, in evaluation order.

Quote and parenthesis rules count characters on the raw line.  Keyword
rules work on the trimmed, lower-cased copy, so their columns are relative
to that copy.

Balance and parity are checked per line only: a parenthesised expression
or string literal spanning several lines is reported on each line where it
looks unbalanced.
"""

from __future__ import annotations

import re

from assist_engine.diagnostics.base import BaseRule, LineContext
from assist_engine.models import Diagnostic

_DANGLING_FROM = re.compile(r"\bfrom\s*$", re.ASCII)
_DANGLING_SELECT = re.compile(r"\bselect\s*$", re.ASCII)


class ParenthesisBalanceRule(BaseRule):
    """Flags the whole line when ``(`` and ``)`` counts differ."""

    rule_id = "unmatched-parentheses"
    message = "Unmatched parentheses"

    def check(self, line: LineContext) -> Diagnostic | None:
        if line.raw.count("(") == line.raw.count(")"):
            return None
        return self.diagnostic(line, column=1, length=len(line.raw))


class _QuoteParityRule(BaseRule):
    """Flags the first quote character when a line has an odd number of them."""

    quote: str

    def check(self, line: LineContext) -> Diagnostic | None:
        if line.raw.count(self.quote) % 2 == 0:
            return None
        return self.diagnostic(line, column=line.raw.index(self.quote) + 1, length=1)


class SingleQuoteParityRule(_QuoteParityRule):
    rule_id = "unmatched-single-quote"
    message = "Unmatched single quote"
    quote = "'"


class DoubleQuoteParityRule(_QuoteParityRule):
    rule_id = "unmatched-double-quote"
    message = "Unmatched double quote"
    quote = '"'


class SelectBeforeFromRule(BaseRule):
    """Flags ``select`` appearing after ``from`` on the same line."""

    rule_id = "select-before-from"
    message = "SELECT must come before FROM"

    def check(self, line: LineContext) -> Diagnostic | None:
        select_index = line.normalized.find("select")
        from_index = line.normalized.find("from")
        if select_index < 0 or from_index < 0 or select_index < from_index:
            return None
        return self.diagnostic(line, column=select_index + 1, length=len("select"))


class _DanglingKeywordRule(BaseRule):
    """Flags a keyword that ends the line with nothing after it."""

    pattern: re.Pattern[str]
    keyword: str

    def check(self, line: LineContext) -> Diagnostic | None:
        match = self.pattern.search(line.normalized)
        if match is None:
            return None
        return self.diagnostic(line, column=match.start() + 1, length=len(self.keyword))


class DanglingFromRule(_DanglingKeywordRule):
    rule_id = "dangling-from"
    message = "Missing table name after FROM"
    pattern = _DANGLING_FROM
    keyword = "from"


class DanglingSelectRule(_DanglingKeywordRule):
    rule_id = "dangling-select"
    message = "Missing column specification after SELECT"
    pattern = _DANGLING_SELECT
    keyword = "select"


def default_rules() -> list[BaseRule]:
    """Return fresh instances of the built-in rules in evaluation order."""
    return [
        ParenthesisBalanceRule(),
        SingleQuoteParityRule(),
        DoubleQuoteParityRule(),
        SelectBeforeFromRule(),
        DanglingFromRule(),
        DanglingSelectRule(),
    ]
