"""SQL language configuration handed to the host editor."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

LINE_COMMENT = "--"
BLOCK_COMMENT = ("/*", "*/")
BRACKETS = (("(", ")"), ("[", "]"))
AUTO_CLOSING_PAIRS = (("(", ")"), ("[", "]"), ("'", "'"), ('"', '"'))


def build_language_configuration() -> dict[str, Any]:
    """Return the editor language configuration as a fresh plain dict."""
    pairs = [{"open": o, "close": c} for o, c in AUTO_CLOSING_PAIRS]
    return {
        "comments": {
            "lineComment": LINE_COMMENT,
            "blockComment": list(BLOCK_COMMENT),
        },
        "brackets": [list(pair) for pair in BRACKETS],
        "autoClosingPairs": pairs,
        "surroundingPairs": [dict(p) for p in pairs],
    }


SQL_LANGUAGE_CONFIGURATION = MappingProxyType(build_language_configuration())
