"""Schema catalog for the current assignment."""

from assist_engine.catalog.schema_catalog import SchemaCatalog, parse_tables

__all__ = ["SchemaCatalog", "parse_tables"]
