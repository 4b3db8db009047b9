"""Render an extracted schema through a named formatter."""

import logging
from typing import Optional

from marid.exceptions import NoTablesError
from marid.formatter import FormatterRegistry, RenderData, default_registry
from marid.schema.models import DatabaseSchema

__all__ = ["generate"]

logger = logging.getLogger(__name__)


def generate(
    schema: DatabaseSchema,
    format_name: Optional[str] = None,
    registry: Optional[FormatterRegistry] = None,
) -> str:
    """Render schema with the formatter registered under format_name.

    Args:
        schema: Extracted schema snapshot.
        format_name: Registered format name; defaults to the snapshot's
            configured format, then to the registry default.
        registry: Formatter registry (default: the built-in formatters).

    Raises:
        NoTablesError: If the schema has no tables.
        UnknownFormatError: If format_name is not registered.
    """
    if not schema.tables:
        raise NoTablesError()

    if registry is None:
        registry = default_registry()
    if format_name is None:
        format_name = schema.config.format

    formatter = registry.get(format_name)
    logger.debug(f"Rendering {len(schema.tables)} tables as {formatter.name}")
    return formatter.render(RenderData.from_schema(schema))
