"""Configuration management for marid."""

import configparser
import getpass
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from marid.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3306
DEFAULT_USER = "root"


def load_mycnf(path: Optional[Path] = None) -> dict[str, str]:
    """Load connection settings from the [client] section of ~/.my.cnf.

    Args:
        path: Option file to read (default: ~/.my.cnf)

    Returns:
        Dict with any of host, port, user, password, database

    Raises:
        ConfigError: If the file cannot be parsed or the port is not an integer
    """
    cnf_path = path if path is not None else Path.home() / ".my.cnf"
    if not cnf_path.exists():
        logger.warning(f"Option file {cnf_path} not found, continuing without it")
        return {}

    config = configparser.ConfigParser(interpolation=None, allow_no_value=True)
    try:
        config.read(cnf_path)
    except configparser.Error as e:
        raise ConfigError(f"Failed to read {cnf_path}: {e}") from e

    if "client" not in config:
        return {}

    section = config["client"]
    result = {}

    for key in ("host", "user", "password", "database"):
        value = section.get(key)
        if value is not None:
            result[key] = value.strip().strip("\"'")

    port = section.get("port")
    if port is not None:
        port = port.strip()
        if not port.isdigit():
            raise ConfigError(f"Invalid port {port!r} in {cnf_path}")
        result["port"] = port

    return result


def prompt_for_password(prompt: str = "Enter MySQL password: ") -> str:
    """Read a password from the terminal without echoing it."""
    return getpass.getpass(prompt).strip()


@dataclass
class Config:
    """Configuration for marid."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user: str = DEFAULT_USER
    password: str = ""
    database: Optional[str] = None
    tables: str = ""
    format: str = ""
    connect_timeout: int = 30

    @classmethod
    def from_env(
        cls,
        *,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        tables: Optional[str] = None,
        format: Optional[str] = None,
        use_mycnf: bool = False,
        mycnf_path: Optional[Path] = None,
    ) -> "Config":
        """Load configuration from env vars and ~/.my.cnf, with CLI overrides.

        Priority (highest to lowest):
        1. Explicit parameters (CLI args)
        2. Environment variables
        3. ~/.my.cnf [client] section (only when use_mycnf is set)
        4. Defaults

        Table filter and output format are only taken from explicit parameters.
        """
        mycnf = load_mycnf(mycnf_path) if use_mycnf else {}

        def resolve(explicit, env_key, cnf_key=None):
            if explicit is not None:
                return explicit
            env_val = os.environ.get(env_key)
            if env_val is not None:
                return env_val
            if cnf_key and cnf_key in mycnf:
                return mycnf[cnf_key]
            return None

        resolved_port = resolve(port, "MYSQL_PORT", "port")
        try:
            resolved_port = (
                int(resolved_port) if resolved_port is not None else DEFAULT_PORT
            )
        except ValueError as e:
            raise ConfigError(f"Invalid port: {resolved_port!r}") from e

        return cls(
            host=resolve(host, "MYSQL_HOST", "host") or DEFAULT_HOST,
            port=resolved_port,
            user=resolve(user, "MYSQL_USER", "user") or DEFAULT_USER,
            password=resolve(password, "MYSQL_PWD", "password") or "",
            database=resolve(database, "MYSQL_DATABASE", "database") or None,
            tables=tables or "",
            format=format or "",
        )

    def tables_list(self) -> list[str]:
        """Return the table filter as a list, ignoring spaces and empty items."""
        if not self.tables:
            return []
        names = (part.replace(" ", "") for part in self.tables.split(","))
        return [name for name in names if name]

    def validate_for_db_ops(self) -> None:
        """Validate that all required fields for database operations are present.

        Raises:
            ConfigError: If the database name is missing.
        """
        if not self.database:
            raise ConfigError(
                "database name is required (use --database or MYSQL_DATABASE)"
            )
