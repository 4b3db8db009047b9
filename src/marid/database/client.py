"""MySQL client exposing the catalog query interface."""

from typing import Any, Optional, Sequence

import pymysql
import pymysql.cursors

from marid.config import Config
from marid.exceptions import DatabaseConnectionError


class MySQLClient:
    """Thin wrapper around a PyMySQL connection for read-only catalog queries."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 3306,
        user: str = "root",
        password: str = "",
        database: Optional[str] = None,
        connect_timeout: int = 30,
    ) -> None:
        self._host = host
        self._port = port
        self._user = user
        self._password = password
        self._database = database
        self._connect_timeout = connect_timeout
        self._connection: Optional[pymysql.connections.Connection] = None

    @classmethod
    def from_config(cls, config: Config) -> "MySQLClient":
        return cls(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            connect_timeout=config.connect_timeout,
        )

    def connect(self) -> None:
        """Open the connection. Must be called before fetchall."""
        if self._connection is not None:
            raise RuntimeError("Already connected. Call close() before reconnecting.")

        try:
            self._connection = pymysql.connect(
                host=self._host,
                port=self._port,
                user=self._user,
                password=self._password,
                database=self._database,
                connect_timeout=self._connect_timeout,
                charset="utf8mb4",
                cursorclass=pymysql.cursors.DictCursor,
            )
        except pymysql.err.Error as e:
            raise DatabaseConnectionError(
                f"error connecting to {self._user}@{self._host}:{self._port}: {e}"
            ) from e

    def fetchall(
        self, sql: str, params: Sequence[Any] = ()
    ) -> list[dict[str, Any]]:
        """Execute a parameterized query and return rows as dicts."""
        if self._connection is None:
            raise RuntimeError("Not connected. Call connect() first.")
        with self._connection.cursor() as cursor:
            cursor.execute(sql, tuple(params))
            return list(cursor.fetchall())

    def close(self) -> None:
        if self._connection is not None:
            try:
                self._connection.close()
            finally:
                self._connection = None

    def __enter__(self) -> "MySQLClient":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
