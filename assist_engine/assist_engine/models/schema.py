"""Assignment schema models: tables and their columns.

Field names are Pythonic; the assignment wire shape
(``{"tableName": ..., "columns": [{"columnName": ..., "dataType": ...}], "rows": [...]}``)
is accepted through validation aliases.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Column(BaseModel):
    """A single column owned by exactly one table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        validation_alias=AliasChoices("name", "columnName"),
        description="Column name as shown to the learner.",
    )
    data_type: str = Field(
        ...,
        validation_alias=AliasChoices("data_type", "dataType"),
        description="Declared SQL data type (e.g. INT, VARCHAR(255)).",
    )


class Table(BaseModel):
    """A table in the assignment schema.

    Identity is the table name.  Names are expected to be unique
    case-insensitively within a catalog, but this is not enforced; lookups
    resolve duplicates by catalog order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        validation_alias=AliasChoices("name", "tableName"),
        description="Table name as shown to the learner.",
    )
    columns: list[Column] = Field(default_factory=list, description="Columns in declaration order.")
    sample_rows: list[dict[str, Any]] | None = Field(
        default=None,
        validation_alias=AliasChoices("sample_rows", "sampleRows", "rows"),
        description="Optional sample data rendered next to the editor.",
    )

    @field_validator("columns", mode="before")
    @classmethod
    def null_columns_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def column_count(self) -> int:
        return len(self.columns)
