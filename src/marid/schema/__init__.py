"""Schema model and catalog extraction."""

from marid.schema.extract import SchemaExtractor, SQLClient, extract
from marid.schema.models import Column, DatabaseSchema, ForeignKey, Table

__all__ = [
    "Column",
    "DatabaseSchema",
    "ForeignKey",
    "SQLClient",
    "SchemaExtractor",
    "Table",
    "extract",
]
