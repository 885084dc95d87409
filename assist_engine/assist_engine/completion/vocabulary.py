"""Static SQL vocabulary: keywords and common functions.

Built once at import time and shared by every catalog.
"""

from __future__ import annotations

from assist_engine.models import Suggestion, SuggestionKind

SQL_KEYWORDS: tuple[str, ...] = (
    "SELECT",
    "FROM",
    "WHERE",
    "JOIN",
    "INNER JOIN",
    "LEFT JOIN",
    "RIGHT JOIN",
    "GROUP BY",
    "ORDER BY",
    "HAVING",
    "DISTINCT",
    "COUNT",
    "SUM",
    "AVG",
    "MAX",
    "MIN",
    "INSERT",
    "UPDATE",
    "DELETE",
    "CREATE",
    "ALTER",
    "DROP",
    "INDEX",
    "TABLE",
    "AND",
    "OR",
    "NOT",
    "IN",
    "LIKE",
    "BETWEEN",
    "IS NULL",
    "IS NOT NULL",
    "LIMIT",
    "OFFSET",
    "UNION",
    "CASE",
    "WHEN",
    "THEN",
    "ELSE",
    "END",
    "AS",
)

# (signature, one-line description)
SQL_FUNCTIONS: tuple[tuple[str, str], ...] = (
    ("COUNT(*)", "Count all rows"),
    ("COUNT(column)", "Count non-null values"),
    ("SUM(column)", "Sum of values"),
    ("AVG(column)", "Average of values"),
    ("MAX(column)", "Maximum value"),
    ("MIN(column)", "Minimum value"),
    ("UPPER(column)", "Convert to uppercase"),
    ("LOWER(column)", "Convert to lowercase"),
    ("LENGTH(column)", "String length"),
    ("SUBSTRING(column, start, length)", "Extract substring"),
    ("CONCAT(str1, str2)", "Concatenate strings"),
    ("NOW()", "Current timestamp"),
    ("DATE(column)", "Extract date part"),
)


def _keyword_suggestion(keyword: str) -> Suggestion:
    return Suggestion(
        label=keyword,
        kind=SuggestionKind.KEYWORD,
        insert_text=keyword,
        detail="SQL Keyword",
        documentation=f"SQL keyword: {keyword}",
    )


def _function_suggestion(signature: str, description: str) -> Suggestion:
    return Suggestion(
        label=signature,
        kind=SuggestionKind.FUNCTION,
        insert_text=signature,
        detail=description,
        documentation=description,
    )


KEYWORD_SUGGESTIONS: tuple[Suggestion, ...] = tuple(_keyword_suggestion(k) for k in SQL_KEYWORDS)
FUNCTION_SUGGESTIONS: tuple[Suggestion, ...] = tuple(_function_suggestion(s, d) for s, d in SQL_FUNCTIONS)
STATIC_SUGGESTIONS: tuple[Suggestion, ...] = KEYWORD_SUGGESTIONS + FUNCTION_SUGGESTIONS
