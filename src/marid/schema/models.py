"""Schema representation classes."""

from dataclasses import dataclass, field
from typing import Optional

from marid.config import Config


@dataclass(frozen=True)
class Column:
    """Column definition as reported by the catalog.

    data_type is the raw DATA_TYPE string; it is not normalized.
    """

    name: str
    data_type: str
    is_nullable: bool = True
    is_primary: bool = False
    is_unique: bool = False
    comment: str = ""


@dataclass(frozen=True)
class ForeignKey:
    """
    Foreign key reference from a column of the owning table.

    The referenced table may be absent from the snapshot when a table filter
    is in effect.
    """

    column_name: str
    referenced_table: str
    referenced_column: str
    relation_name: str


@dataclass(frozen=True)
class Table:
    """Table definition."""

    name: str
    comment: str = ""
    columns: tuple[Column, ...] = ()
    primary_key: tuple[str, ...] = ()
    foreign_keys: tuple[ForeignKey, ...] = ()

    def get_column(self, name: str) -> Optional[Column]:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None


@dataclass(frozen=True)
class DatabaseSchema:
    """Snapshot of a database schema.

    Table order is discovery order and is significant to renderers.
    """

    tables: tuple[Table, ...] = ()
    config: Config = field(default_factory=Config)

    def get_table(self, name: str) -> Optional[Table]:
        """Get a table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def table_names(self) -> list[str]:
        """Get all table names in discovery order."""
        return [table.name for table in self.tables]
