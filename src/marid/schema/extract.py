"""Schema extraction from MySQL INFORMATION_SCHEMA."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol, Sequence, TypeVar

from marid.config import Config
from marid.exceptions import ExtractionError
from marid.schema.models import Column, DatabaseSchema, ForeignKey, Table
from marid.types import ExtractionPhase

__all__ = ["SQLClient", "SchemaExtractor", "extract"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()

_LIST_TABLES_SQL = """
    SELECT TABLE_NAME AS table_name
    FROM INFORMATION_SCHEMA.TABLES
    WHERE TABLE_SCHEMA = %s
      AND TABLE_TYPE = 'BASE TABLE'
    ORDER BY TABLE_NAME
"""

_TABLE_COMMENT_SQL = """
    SELECT TABLE_COMMENT AS table_comment
    FROM INFORMATION_SCHEMA.TABLES
    WHERE TABLE_SCHEMA = %s
      AND TABLE_NAME = %s
"""

_COLUMNS_SQL = """
    SELECT
        COLUMN_NAME AS column_name,
        DATA_TYPE AS data_type,
        IS_NULLABLE AS is_nullable,
        COLUMN_KEY AS column_key,
        COLUMN_COMMENT AS column_comment
    FROM INFORMATION_SCHEMA.COLUMNS
    WHERE TABLE_SCHEMA = %s
      AND TABLE_NAME = %s
    ORDER BY ORDINAL_POSITION
"""

_PRIMARY_KEY_SQL = """
    SELECT COLUMN_NAME AS column_name
    FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE
    WHERE TABLE_SCHEMA = %s
      AND TABLE_NAME = %s
      AND CONSTRAINT_NAME = 'PRIMARY'
    ORDER BY ORDINAL_POSITION
"""

_FOREIGN_KEYS_SQL = """
    SELECT
        COLUMN_NAME AS column_name,
        REFERENCED_TABLE_NAME AS referenced_table_name,
        REFERENCED_COLUMN_NAME AS referenced_column_name,
        CONSTRAINT_NAME AS constraint_name
    FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE
    WHERE TABLE_SCHEMA = %s
      AND TABLE_NAME = %s
      AND REFERENCED_TABLE_NAME IS NOT NULL
    ORDER BY ORDINAL_POSITION
"""


class SQLClient(Protocol):
    """Protocol for the catalog query interface used by the extractor."""

    def fetchall(self, sql: str, params: Sequence[Any] = ()) -> list: ...


class _ScanError(Exception):
    """A catalog row did not have the expected shape."""


class SchemaExtractor:
    """Extract tables, columns and keys of one database from its catalog."""

    def __init__(
        self,
        client: SQLClient,
        database: str,
        tables: Optional[Sequence[str]] = None,
    ) -> None:
        self._client = client
        self._database = database
        self._table_filter = list(tables or [])

    def extract(self, config: Optional[Config] = None) -> DatabaseSchema:
        """Extract every retained table. Raises ExtractionError on any failure."""
        table_names = self._fetch_table_names()
        logger.info(f"Found {len(table_names)} tables in {self._database}")

        tables = tuple(self.extract_table(name) for name in table_names)
        if config is None:
            config = Config(
                database=self._database, tables=",".join(self._table_filter)
            )
        return DatabaseSchema(tables=tables, config=config)

    def extract_table(self, table_name: str) -> Table:
        """Extract a single table: comment, columns, primary key, foreign keys."""
        logger.debug(f"Extracting table {table_name}")
        comment = self._fetch_table_comment(table_name)
        columns = self._fetch_columns(table_name)
        primary_key = self._fetch_primary_key(table_name)
        foreign_keys = self._fetch_foreign_keys(table_name)
        logger.debug(
            f"Table {table_name}: {len(columns)} columns, "
            f"{len(primary_key)} primary key columns, {len(foreign_keys)} foreign keys"
        )

        return Table(
            name=table_name,
            comment=comment,
            columns=tuple(columns),
            primary_key=tuple(primary_key),
            foreign_keys=tuple(foreign_keys),
        )

    def _query(
        self,
        phase: ExtractionPhase,
        sql: str,
        params: Sequence[Any],
        table: Optional[str] = None,
    ) -> list:
        if table is None:
            logger.debug(f"Running {phase.value}")
        else:
            logger.debug(f"Running {phase.value} for {table}")
        try:
            return list(self._client.fetchall(sql, params))
        except Exception as e:
            raise ExtractionError(phase, str(e), table=table) from e

    def _scan(
        self,
        phase: ExtractionPhase,
        rows: list,
        scan_row: Callable[[Any], T],
        table: Optional[str] = None,
    ) -> list[T]:
        try:
            return [scan_row(row) for row in rows]
        except _ScanError as e:
            raise ExtractionError(phase, f"error scanning row: {e}", table=table) from e

    def _fetch_table_names(self) -> list[str]:
        """Fetch base table names, keeping only filtered names when a filter is set."""
        phase = ExtractionPhase.TABLE_LISTING
        rows = self._query(phase, _LIST_TABLES_SQL, (self._database,))
        names = self._scan(phase, rows, lambda row: _required_str(row, "table_name"))

        if not self._table_filter:
            return names

        wanted = set(self._table_filter)
        retained = [name for name in names if name in wanted]
        missing = wanted.difference(names)
        if missing:
            logger.debug(
                f"Ignoring unknown tables in filter: {', '.join(sorted(missing))}"
            )
        return retained

    def _fetch_table_comment(self, table_name: str) -> str:
        phase = ExtractionPhase.COMMENT_LOOKUP
        rows = self._query(
            phase, _TABLE_COMMENT_SQL, (self._database, table_name), table_name
        )
        if not rows:
            raise ExtractionError(phase, "table not found", table=table_name)
        comments = self._scan(
            phase, rows[:1], lambda row: _optional_str(row, "table_comment"), table_name
        )
        return comments[0]

    def _fetch_columns(self, table_name: str) -> list[Column]:
        """Fetch columns in ordinal order."""
        phase = ExtractionPhase.COLUMN_SCAN
        rows = self._query(phase, _COLUMNS_SQL, (self._database, table_name), table_name)
        return self._scan(phase, rows, _scan_column, table_name)

    def _fetch_primary_key(self, table_name: str) -> list[str]:
        """Fetch primary key column names in key ordinal order."""
        phase = ExtractionPhase.PRIMARY_KEY_SCAN
        rows = self._query(
            phase, _PRIMARY_KEY_SQL, (self._database, table_name), table_name
        )
        return self._scan(
            phase, rows, lambda row: _required_str(row, "column_name"), table_name
        )

    def _fetch_foreign_keys(self, table_name: str) -> list[ForeignKey]:
        """Fetch referential constraints only."""
        phase = ExtractionPhase.FOREIGN_KEY_SCAN
        rows = self._query(
            phase, _FOREIGN_KEYS_SQL, (self._database, table_name), table_name
        )
        return self._scan(phase, rows, _scan_foreign_key, table_name)


def extract(client: SQLClient, config: Config) -> DatabaseSchema:
    """Extract the schema selected by config, validating it first.

    Raises:
        ConfigError: If no database is configured.
        ExtractionError: If any catalog query or row scan fails.
    """
    config.validate_for_db_ops()
    extractor = SchemaExtractor(client, config.database, config.tables_list())
    return extractor.extract(config)


def _row_get(row: Any, key: str) -> Any:
    """Get a value from a row, supporting dict-like rows and key-only access."""
    if hasattr(row, "get"):
        value = row.get(key, _MISSING)
        if value is _MISSING:
            raise _ScanError(f"missing field {key!r}")
        return value
    try:
        return row[key]
    except (KeyError, IndexError, TypeError) as e:
        raise _ScanError(f"missing field {key!r}") from e


def _required_str(row: Any, key: str) -> str:
    value = _row_get(row, key)
    if value is None:
        raise _ScanError(f"NULL value in field {key!r}")
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise _ScanError(f"field {key!r} is not valid UTF-8") from e
    if not isinstance(value, str):
        raise _ScanError(f"field {key!r} is {type(value).__name__}, expected str")
    return value


def _optional_str(row: Any, key: str) -> str:
    if _row_get(row, key) is None:
        return ""
    return _required_str(row, key)


def _scan_column(row: Any) -> Column:
    name = _required_str(row, "column_name")
    if not name:
        raise _ScanError("empty column name")
    column_key = _optional_str(row, "column_key").upper()
    is_primary = column_key == "PRI"

    return Column(
        name=name,
        data_type=_required_str(row, "data_type"),
        is_nullable=_required_str(row, "is_nullable").upper() == "YES",
        is_primary=is_primary,
        is_unique=column_key == "UNI" and not is_primary,
        comment=_optional_str(row, "column_comment"),
    )


def _scan_foreign_key(row: Any) -> ForeignKey:
    return ForeignKey(
        column_name=_required_str(row, "column_name"),
        referenced_table=_required_str(row, "referenced_table_name"),
        referenced_column=_required_str(row, "referenced_column_name"),
        relation_name=_required_str(row, "constraint_name"),
    )
