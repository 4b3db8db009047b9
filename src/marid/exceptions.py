"""Exception classes for marid."""

from typing import Optional

from marid.types import ExtractionPhase

__all__ = [
    "MaridError",
    "ConfigError",
    "DatabaseConnectionError",
    "ExtractionError",
    "NoTablesError",
    "UnknownFormatError",
]


class MaridError(Exception):
    """Base exception for marid."""


class ConfigError(MaridError):
    """Error in configuration."""


class DatabaseConnectionError(MaridError):
    """Error establishing a database connection."""


class ExtractionError(MaridError):
    """Catalog query or row scan failed while extracting the schema."""

    def __init__(
        self, phase: ExtractionPhase, message: str, table: Optional[str] = None
    ):
        self.phase = phase
        self.table = table
        if table is not None:
            text = f"error during {phase.value} for table {table}: {message}"
        else:
            text = f"error during {phase.value}: {message}"
        super().__init__(text)


class NoTablesError(MaridError):
    """No tables were available to render."""

    def __init__(self, message: str = "no tables found in schema"):
        super().__init__(message)


class UnknownFormatError(MaridError):
    """Requested output format is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"unknown format {name!r}. Available formats: {', '.join(self.available)}"
        )
