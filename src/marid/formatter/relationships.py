"""Relationship collection and edge ordering."""

from dataclasses import dataclass

from marid.formatter.base import RenderData

__all__ = ["Relationship", "collect_relationships"]


@dataclass(frozen=True)
class Relationship:
    """One edge per foreign key: referenced table -> owning table."""

    source_table: str
    target_table: str
    relation_name: str
    crossing_distance: int


def collect_relationships(data: RenderData) -> list[Relationship]:
    """
    Collect one relationship per foreign key, shortest edges first.

    The crossing distance of an edge is the distance between the positions of
    its two tables in data.tables. Edges whose referenced table is not part of
    data get distance 0. The sort is stable, so edges of equal distance keep
    table order, then foreign key order.
    """
    positions = {table.name: i for i, table in enumerate(data.tables)}

    relationships = []
    for table in data.tables:
        for fk in table.foreign_keys:
            source_pos = positions.get(fk.referenced_table)
            target_pos = positions.get(table.name)

            distance = 0
            if source_pos is not None and target_pos is not None:
                distance = abs(source_pos - target_pos)

            relationships.append(
                Relationship(
                    source_table=fk.referenced_table,
                    target_table=table.name,
                    relation_name=fk.relation_name,
                    crossing_distance=distance,
                )
            )

    return sorted(relationships, key=lambda rel: rel.crossing_distance)
