"""Stdlib logging setup.

Application events are emitted with logfire directly. Library loggers
(alembic, SQLAlchemy, asyncpg) still use stdlib logging; their records are
forwarded to logfire so everything lands in the same trace.
"""

import logging

import logfire

from forum.config import Settings

_LEVEL_BY_ENVIRONMENT = {
    "production": logging.WARNING,
    "staging": logging.INFO,
    "development": logging.INFO,
    "test": logging.WARNING,
}

# Chatty at INFO; engine echo covers SQL in debug mode
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg")


def setup_logging(settings: Settings) -> int:
    """Route stdlib logging into logfire.

    Args:
        settings: Application settings

    Returns:
        The root log level that was applied
    """
    level = logging.DEBUG if settings.debug else _LEVEL_BY_ENVIRONMENT[settings.environment]

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.debug(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
    return level
