"""Formatters rendering a schema into diagram markup."""

from marid.formatter.base import (
    DEFAULT_FORMAT,
    Formatter,
    FormatterFactory,
    RenderColumn,
    RenderData,
    RenderForeignKey,
    RenderTable,
)
from marid.formatter.markdown import MarkdownFormatter
from marid.formatter.mermaid import MermaidFormatter
from marid.formatter.registry import (
    BUILTIN_FORMATTERS,
    FormatterRegistry,
    default_registry,
)
from marid.formatter.relationships import Relationship, collect_relationships
from marid.formatter.yaml_formatter import YamlFormatter

__all__ = [
    "BUILTIN_FORMATTERS",
    "DEFAULT_FORMAT",
    "Formatter",
    "FormatterFactory",
    "FormatterRegistry",
    "MarkdownFormatter",
    "MermaidFormatter",
    "Relationship",
    "RenderColumn",
    "RenderData",
    "RenderForeignKey",
    "RenderTable",
    "YamlFormatter",
    "collect_relationships",
    "default_registry",
]
