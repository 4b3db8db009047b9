"""Command-line interface for marid."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from marid import __version__
from marid.config import Config, prompt_for_password
from marid.database.client import MySQLClient
from marid.diagram import generate
from marid.exceptions import ConfigError, MaridError
from marid.formatter import DEFAULT_FORMAT, FormatterRegistry, default_registry
from marid.schema.extract import extract

logger = logging.getLogger(__name__)


def create_parser(registry: FormatterRegistry) -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="marid",
        description=(
            "Connect to a MySQL database, extract table definitions "
            "and generate an ER diagram of the schema."
        ),
    )

    connection = parser.add_argument_group("connection")
    connection.add_argument("-H", "--host", help="MySQL host address (default: localhost)")
    connection.add_argument("-P", "--port", type=int, help="MySQL port (default: 3306)")
    connection.add_argument("-u", "--user", help="MySQL username (default: root)")
    connection.add_argument(
        "-p", "--password", help="MySQL password (insecure, prefer --ask-password)"
    )
    connection.add_argument(
        "--ask-password", action="store_true", help="Prompt for password (secure)"
    )
    connection.add_argument(
        "-c",
        "--use-mycnf",
        action="store_true",
        help="Read connection info from ~/.my.cnf",
    )
    connection.add_argument(
        "-n", "--no-password", action="store_true", help="Connect without a password"
    )
    connection.add_argument("-d", "--database", help="Database name (required)")

    parser.add_argument(
        "-t",
        "--tables",
        help="Comma-separated list of tables (default: all tables)",
    )
    parser.add_argument(
        "-f",
        "--format",
        default=DEFAULT_FORMAT,
        help=(
            f"Output format (default: {DEFAULT_FORMAT}); "
            f"available: {', '.join(registry.available())}"
        ),
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Output file (default: stdout)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    registry = default_registry()
    parser = create_parser(registry)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    return run(args, registry)


def build_config(args: argparse.Namespace) -> Config:
    """Merge CLI arguments, environment and ~/.my.cnf into a validated Config."""
    config = Config.from_env(
        host=args.host,
        port=args.port,
        user=args.user,
        password=args.password,
        database=args.database,
        tables=args.tables,
        format=args.format,
        use_mycnf=args.use_mycnf,
    )
    config.validate_for_db_ops()

    if args.no_password:
        config.password = ""
    elif args.ask_password:
        config.password = prompt_for_password()

    return config


def run(args: argparse.Namespace, registry: FormatterRegistry) -> int:
    """Extract the schema and write the diagram."""
    try:
        config = build_config(args)

        # Fail on an unknown format before touching the database.
        registry.get(config.format)

        with MySQLClient.from_config(config) as client:
            schema = extract(client, config)

        output = generate(schema, config.format, registry)

        if args.output is None:
            sys.stdout.write(output)
        else:
            args.output.write_text(output, encoding="utf-8")
            logger.info(f"Written to {args.output}")
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except MaridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
