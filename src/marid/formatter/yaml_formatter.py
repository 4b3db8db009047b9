"""Export the render model as a YAML document."""

from typing import Any

import yaml

from marid.exceptions import NoTablesError
from marid.formatter.base import Formatter, RenderColumn, RenderData, RenderTable
from marid.formatter.relationships import collect_relationships

__all__ = ["YamlFormatter", "table_to_dict"]


def table_to_dict(table: RenderTable) -> dict[str, Any]:
    """Convert a RenderTable to a dictionary suitable for YAML export."""
    data: dict[str, Any] = {"table": table.name}

    if table.comment:
        data["comment"] = table.comment

    data["columns"] = [_column_to_dict(col) for col in table.columns]

    if table.primary_key:
        data["primary_key"] = list(table.primary_key)

    if table.foreign_keys:
        data["foreign_keys"] = [
            {
                "column": fk.column_name,
                "references": {
                    "table": fk.referenced_table,
                    "column": fk.referenced_column,
                },
                "name": fk.relation_name,
            }
            for fk in table.foreign_keys
        ]

    return data


def _column_to_dict(col: RenderColumn) -> dict[str, Any]:
    """Convert a RenderColumn to a dictionary."""
    data: dict[str, Any] = {"name": col.name, "type": col.data_type}

    if not col.is_nullable:
        data["nullable"] = False

    if col.is_primary:
        data["primary"] = True

    if col.is_unique:
        data["unique"] = True

    if col.comment:
        data["comment"] = col.comment

    return data


class YamlFormatter(Formatter):
    name = "yaml"
    media_type = "application/yaml"

    def render(self, data: RenderData) -> str:
        if not data.tables:
            raise NoTablesError()

        document = {
            "tables": [table_to_dict(table) for table in data.tables],
            "relationships": [
                {
                    "from": rel.source_table,
                    "to": rel.target_table,
                    "name": rel.relation_name,
                }
                for rel in collect_relationships(data)
            ],
        }
        return yaml.dump(
            document, default_flow_style=False, sort_keys=False, allow_unicode=True
        )
