"""Shared fixtures for assist engine tests.

Provides small assignment schemas in the wire shape the backend sends and
pre-loaded catalogs built from them.
"""

from __future__ import annotations

from typing import Any

import pytest

from assist_engine.catalog import SchemaCatalog
from assist_engine.completion import SuggestionCatalog


@pytest.fixture
def users_schema() -> list[dict[str, Any]]:
    """The single-table schema used throughout the examples."""
    return [{"tableName": "users", "columns": [{"columnName": "id", "dataType": "INT"}]}]


@pytest.fixture
def shop_schema() -> list[dict[str, Any]]:
    """Two tables sharing an ``id`` column, with sample rows on one of them."""
    return [
        {
            "tableName": "customers",
            "columns": [
                {"columnName": "id", "dataType": "INT"},
                {"columnName": "name", "dataType": "VARCHAR(100)"},
            ],
            "rows": [{"id": 1, "name": "Ada"}],
        },
        {
            "tableName": "orders",
            "columns": [
                {"columnName": "id", "dataType": "INT"},
                {"columnName": "customer_id", "dataType": "INT"},
                {"columnName": "total", "dataType": "DECIMAL(10,2)"},
            ],
        },
    ]


@pytest.fixture
def users_catalog(users_schema: list[dict[str, Any]]) -> SchemaCatalog:
    return SchemaCatalog(users_schema)


@pytest.fixture
def shop_catalog(shop_schema: list[dict[str, Any]]) -> SchemaCatalog:
    return SchemaCatalog(shop_schema)


@pytest.fixture
def users_suggestions(users_catalog: SchemaCatalog) -> SuggestionCatalog:
    return SuggestionCatalog(users_catalog)
