"""Tests for diagram generation."""

import pytest

from marid.config import Config
from marid.diagram import generate
from marid.exceptions import NoTablesError, UnknownFormatError
from marid.formatter import Formatter, FormatterRegistry, RenderData
from marid.schema.models import Column, DatabaseSchema, Table
from tests.helpers import SAMPLE_MERMAID_OUTPUT


class RecordingFormatter(Formatter):
    name = "recording"

    def __init__(self) -> None:
        self.calls: list[RenderData] = []

    def render(self, data: RenderData) -> str:
        self.calls.append(data)
        return "recorded\n"


def _schema(format_name: str = "") -> DatabaseSchema:
    return DatabaseSchema(
        tables=(
            Table(
                name="teams",
                columns=(Column("id", "int"), Column("name", "text")),
                primary_key=("id",),
            ),
        ),
        config=Config(database="app", format=format_name),
    )


class TestGenerate:
    def test_default_format_is_mermaid(self):
        output = generate(_schema())
        assert output == "erDiagram\n    teams {\n        id int PK\n        name text\n    }\n"

    def test_uses_format_from_snapshot_config(self):
        output = generate(_schema(format_name="markdown"))
        assert output.startswith("```mermaid\n")

    def test_explicit_format_overrides_config(self):
        output = generate(_schema(format_name="markdown"), "mermaid")
        assert output.startswith("erDiagram\n")

    def test_uses_given_registry(self):
        formatter = RecordingFormatter()
        registry = FormatterRegistry()
        registry.register("recording", lambda: formatter)

        output = generate(_schema(), "recording", registry)

        assert output == "recorded\n"
        assert [t.name for t in formatter.calls[0].tables] == ["teams"]

    def test_unknown_format_fails(self):
        with pytest.raises(UnknownFormatError, match="Available formats: markdown, mermaid, yaml"):
            generate(_schema(), "graphviz")

    def test_empty_schema_fails_before_lookup(self):
        with pytest.raises(NoTablesError):
            generate(DatabaseSchema(), "graphviz")

    def test_sample_output(self):
        from marid.schema.models import ForeignKey

        schema = DatabaseSchema(
            tables=(
                Table(
                    name="teams",
                    columns=(Column("id", "int", is_primary=True), Column("name", "text")),
                    primary_key=("id",),
                ),
                Table(
                    name="users",
                    columns=(
                        Column("id", "int", is_primary=True),
                        Column("email", "varchar", is_unique=True),
                        Column("team_id", "int"),
                    ),
                    primary_key=("id",),
                    foreign_keys=(ForeignKey("team_id", "teams", "id", "belongs_to"),),
                ),
            )
        )
        assert generate(schema) == SAMPLE_MERMAID_OUTPUT
