"""Mermaid ER diagram formatter."""

from __future__ import annotations

from marid.exceptions import NoTablesError
from marid.formatter.base import Formatter, RenderColumn, RenderData, RenderTable
from marid.formatter.relationships import collect_relationships

__all__ = ["MermaidFormatter"]


class MermaidFormatter(Formatter):
    """Renders ER diagrams using Mermaid erDiagram syntax."""

    name = "mermaid"
    media_type = "text/plain"

    def render(self, data: RenderData) -> str:
        if not data.tables:
            raise NoTablesError()

        lines: list[str] = ["erDiagram"]

        for table in data.tables:
            lines.extend(_render_table(table))

        for rel in collect_relationships(data):
            lines.append(
                f'    {rel.source_table} ||--o{{ {rel.target_table} : "{rel.relation_name}"'
            )

        return "".join(f"{line}\n" for line in lines)


def _render_table(table: RenderTable) -> list[str]:
    """Render a single entity block."""
    lines = [f"    {table.name} {{"]
    for col in table.columns:
        lines.append(f"        {_render_column(table, col)}")
    lines.append("    }")
    return lines


def _render_column(table: RenderTable, col: RenderColumn) -> str:
    """Render a column as `name type [tags] ["comment"]`."""
    flags: list[str] = []

    is_primary = col.name in table.primary_key
    if is_primary:
        flags.append("PK")
    if table.is_foreign_key_column(col.name):
        flags.append("FK")
    # Primary keys are implicitly unique.
    if col.is_unique and not is_primary:
        flags.append("UK")

    line = f"{col.name} {col.data_type}"
    if flags:
        line += " " + ", ".join(flags)
    if col.comment:
        line += f' "{col.comment}"'
    return line
