#!/usr/bin/env python3
"""Apply (or roll back) the database schema with logfire tracking.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--downgrade", action="store_true")
    parser.add_argument("--config", default="alembic.ini")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    direction = "downgrade" if args.downgrade else "upgrade"
    alembic_cfg = Config(args.config)
    alembic_cfg.attributes["configure_logger"] = False

    with logfire.span(
        "migrations.{direction}",
        direction=direction,
        revision=args.revision,
        environment=settings.environment,
    ):
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Deploys must not proceed against a half-migrated schema
            raise

    logfire.info("Database migrations completed", direction=direction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
