"""MySQL connection handling."""

from marid.database.client import MySQLClient

__all__ = ["MySQLClient"]
