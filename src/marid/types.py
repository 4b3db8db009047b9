"""Core type definitions for marid."""

from enum import Enum

__all__ = ["ExtractionPhase"]


class ExtractionPhase(Enum):
    """Catalog lookups performed while extracting a schema."""

    TABLE_LISTING = "table listing"
    COMMENT_LOOKUP = "comment lookup"
    COLUMN_SCAN = "column scan"
    PRIMARY_KEY_SCAN = "primary-key scan"
    FOREIGN_KEY_SCAN = "foreign-key scan"
