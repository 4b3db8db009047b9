"""marid - MySQL to Mermaid ER diagram generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("marid")
except PackageNotFoundError:
    __version__ = "0.1.0"

from marid.config import Config
from marid.diagram import generate
from marid.exceptions import (
    ConfigError,
    DatabaseConnectionError,
    ExtractionError,
    MaridError,
    NoTablesError,
    UnknownFormatError,
)
from marid.formatter import DEFAULT_FORMAT, FormatterRegistry, RenderData, default_registry
from marid.schema import DatabaseSchema, SchemaExtractor, extract

__all__ = [
    # Config
    "Config",
    # Errors
    "ConfigError",
    "DatabaseConnectionError",
    "ExtractionError",
    "MaridError",
    "NoTablesError",
    "UnknownFormatError",
    # Extraction
    "DatabaseSchema",
    "SchemaExtractor",
    "extract",
    # Rendering
    "DEFAULT_FORMAT",
    "FormatterRegistry",
    "RenderData",
    "default_registry",
    "generate",
]
