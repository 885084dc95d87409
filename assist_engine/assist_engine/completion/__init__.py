"""Completion vocabulary and provider."""

from assist_engine.completion.catalog import SuggestionCatalog, schema_suggestions
from assist_engine.completion.provider import CompletionProvider
from assist_engine.completion.vocabulary import (
    FUNCTION_SUGGESTIONS,
    KEYWORD_SUGGESTIONS,
    SQL_FUNCTIONS,
    SQL_KEYWORDS,
    STATIC_SUGGESTIONS,
)

__all__ = [
    "CompletionProvider",
    "FUNCTION_SUGGESTIONS",
    "KEYWORD_SUGGESTIONS",
    "SQL_FUNCTIONS",
    "SQL_KEYWORDS",
    "STATIC_SUGGESTIONS",
    "SuggestionCatalog",
    "schema_suggestions",
]
