"""Shared test helpers for marid tests."""

from typing import Any, Optional

from marid.config import Config
from marid.formatter import RenderColumn, RenderData, RenderForeignKey, RenderTable


class FakeRow:
    """Mock row from MySQLClient.fetchall().

    Supports dict-like access via __getitem__ and .get().
    """

    def __init__(self, data: dict):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def get(self, key, default=None):
        return self._data.get(key, default)


class FakeCatalogClient:
    """In-memory catalog answering the extractor's INFORMATION_SCHEMA queries.

    Args:
        tables: Table names in the order the catalog returns them
        comments: Dict mapping table_name -> table comment
        columns: Dict mapping table_name -> list of column row dicts
        primary_keys: Dict mapping table_name -> list of column names
        foreign_keys: Dict mapping table_name -> list of foreign key row dicts
        fail_on: Query kind to raise on ("tables", "comment", "columns",
            "primary_key", "foreign_keys")
    """

    def __init__(
        self,
        tables: Optional[list[str]] = None,
        comments: Optional[dict[str, str]] = None,
        columns: Optional[dict[str, list[dict]]] = None,
        primary_keys: Optional[dict[str, list[str]]] = None,
        foreign_keys: Optional[dict[str, list[dict]]] = None,
        fail_on: Optional[str] = None,
    ) -> None:
        self.tables = tables or []
        self.comments = comments or {}
        self.columns = columns or {}
        self.primary_keys = primary_keys or {}
        self.foreign_keys = foreign_keys or {}
        self.fail_on = fail_on
        self.queries: list[tuple[str, tuple]] = []

    def fetchall(self, sql: str, params: Any = ()) -> list:
        params = tuple(params)
        kind = classify_query(sql)
        self.queries.append((kind, params))

        if kind == self.fail_on:
            raise RuntimeError("connection lost")

        if kind == "tables":
            return [FakeRow({"table_name": name}) for name in self.tables]

        table = params[1]
        if kind == "comment":
            if table not in self.tables:
                return []
            return [FakeRow({"table_comment": self.comments.get(table, "")})]
        if kind == "columns":
            return [FakeRow(row) for row in self.columns.get(table, [])]
        if kind == "primary_key":
            return [
                FakeRow({"column_name": name})
                for name in self.primary_keys.get(table, [])
            ]
        if kind == "foreign_keys":
            return [FakeRow(row) for row in self.foreign_keys.get(table, [])]
        raise AssertionError(f"unexpected query: {sql}")


def classify_query(sql: str) -> str:
    """Name the catalog lookup a SQL statement performs."""
    text = " ".join(sql.split()).upper()
    if "REFERENCED_TABLE_NAME IS NOT NULL" in text:
        return "foreign_keys"
    if "CONSTRAINT_NAME = 'PRIMARY'" in text:
        return "primary_key"
    if "INFORMATION_SCHEMA.COLUMNS" in text:
        return "columns"
    if "TABLE_COMMENT" in text:
        return "comment"
    if "INFORMATION_SCHEMA.TABLES" in text:
        return "tables"
    return "unknown"


def column_row(
    name: str,
    data_type: str = "int",
    is_nullable: str = "NO",
    column_key: str = "",
    comment: str = "",
) -> dict:
    """Build an INFORMATION_SCHEMA.COLUMNS row."""
    return {
        "column_name": name,
        "data_type": data_type,
        "is_nullable": is_nullable,
        "column_key": column_key,
        "column_comment": comment,
    }


def fk_row(column: str, ref_table: str, ref_column: str, name: str) -> dict:
    """Build a KEY_COLUMN_USAGE foreign key row."""
    return {
        "column_name": column,
        "referenced_table_name": ref_table,
        "referenced_column_name": ref_column,
        "constraint_name": name,
    }


def make_test_config(database: str = "app", tables: str = "") -> Config:
    """Create a Config for tests with sensible defaults."""
    return Config(database=database, tables=tables)


def make_teams_users_client() -> FakeCatalogClient:
    """Catalog holding teams(id PK, name) and users(id PK, email UNIQUE, team_id FK)."""
    return FakeCatalogClient(
        tables=["teams", "users"],
        comments={"teams": "", "users": "Application users"},
        columns={
            "teams": [
                column_row("id", "int", column_key="PRI"),
                column_row("name", "text", is_nullable="YES"),
            ],
            "users": [
                column_row("id", "int", column_key="PRI"),
                column_row("email", "varchar", column_key="UNI"),
                column_row("team_id", "int", is_nullable="YES", column_key="MUL"),
            ],
        },
        primary_keys={"teams": ["id"], "users": ["id"]},
        foreign_keys={"users": [fk_row("team_id", "teams", "id", "belongs_to")]},
    )


def sample_render_data() -> RenderData:
    """Canonical render data for formatter tests."""
    return RenderData(
        tables=(
            RenderTable(
                name="teams",
                primary_key=("id",),
                columns=(
                    RenderColumn(name="id", data_type="int"),
                    RenderColumn(name="name", data_type="text"),
                ),
            ),
            RenderTable(
                name="users",
                primary_key=("id",),
                columns=(
                    RenderColumn(name="id", data_type="int"),
                    RenderColumn(name="email", data_type="varchar", is_unique=True),
                    RenderColumn(name="team_id", data_type="int"),
                ),
                foreign_keys=(
                    RenderForeignKey(
                        column_name="team_id",
                        referenced_table="teams",
                        referenced_column="id",
                        relation_name="belongs_to",
                    ),
                ),
            ),
        )
    )


SAMPLE_MERMAID_OUTPUT = """erDiagram
    teams {
        id int PK
        name text
    }
    users {
        id int PK
        email varchar UK
        team_id int FK
    }
    teams ||--o{ users : "belongs_to"
"""
