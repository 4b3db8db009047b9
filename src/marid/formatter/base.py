"""Formatter contract and the render model passed to formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from marid.schema.models import DatabaseSchema

__all__ = [
    "DEFAULT_FORMAT",
    "Formatter",
    "FormatterFactory",
    "RenderColumn",
    "RenderData",
    "RenderForeignKey",
    "RenderTable",
]

DEFAULT_FORMAT = "mermaid"


@dataclass(frozen=True)
class RenderColumn:
    name: str
    data_type: str
    is_nullable: bool = True
    is_primary: bool = False
    is_unique: bool = False
    comment: str = ""


@dataclass(frozen=True)
class RenderForeignKey:
    column_name: str
    referenced_table: str
    referenced_column: str
    relation_name: str


@dataclass(frozen=True)
class RenderTable:
    name: str
    comment: str = ""
    columns: tuple[RenderColumn, ...] = ()
    primary_key: tuple[str, ...] = ()
    foreign_keys: tuple[RenderForeignKey, ...] = ()

    def is_foreign_key_column(self, name: str) -> bool:
        """Check if a column owns at least one foreign key."""
        return any(fk.column_name == name for fk in self.foreign_keys)


@dataclass(frozen=True)
class RenderData:
    """Normalized schema information passed to formatters.

    Formatters depend only on these types, never on the extraction model.
    """

    tables: tuple[RenderTable, ...] = ()

    @classmethod
    def from_schema(cls, schema: DatabaseSchema) -> RenderData:
        """Copy a schema snapshot into render data, preserving table order."""
        return cls(
            tables=tuple(
                RenderTable(
                    name=table.name,
                    comment=table.comment,
                    columns=tuple(
                        RenderColumn(
                            name=col.name,
                            data_type=col.data_type,
                            is_nullable=col.is_nullable,
                            is_primary=col.is_primary,
                            is_unique=col.is_unique,
                            comment=col.comment,
                        )
                        for col in table.columns
                    ),
                    primary_key=tuple(table.primary_key),
                    foreign_keys=tuple(
                        RenderForeignKey(
                            column_name=fk.column_name,
                            referenced_table=fk.referenced_table,
                            referenced_column=fk.referenced_column,
                            relation_name=fk.relation_name,
                        )
                        for fk in table.foreign_keys
                    ),
                )
                for table in schema.tables
            )
        )


class Formatter(ABC):
    """Renders a schema into one output format."""

    #: Name the formatter is registered under (e.g. "mermaid").
    name: str = ""
    #: MIME type of the rendered output.
    media_type: str = "text/plain"

    @abstractmethod
    def render(self, data: RenderData) -> str:
        """Build the formatted representation of data.

        Raises:
            NoTablesError: If data contains no tables.
        """


FormatterFactory = Callable[[], Formatter]
