# -*- coding: utf-8 -*-
"""Structured logging configuration using structlog.

JSON lines in production, colored console output in development. Request
scoped values (request id, acting user) are carried through contextvars so
repository and job code can log without passing them around.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from newsdesk.core.config import get_settings

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "sqlalchemy.engine",
    "apscheduler",
)


def get_log_level() -> int:
    """Resolve the configured log level.

    Returns:
        The stdlib level for ``settings.log_level``, or INFO when the name
        is not a standard level.
    """
    name = get_settings().log_level.upper()
    if name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return getattr(logging, name)
    return logging.INFO


def get_processors(json_format: bool = True) -> list[Processor]:
    """Build the structlog processor chain.

    Context variables, level, logger name and a UTC ISO timestamp are added to
    every event before it is rendered.

    Args:
        json_format: Render JSON when True, console output otherwise.

    Returns:
        Ordered list of processors for ``structlog.configure``.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def setup_logging() -> None:
    """Configure stdlib logging and structlog.

    Production always logs JSON; other environments follow
    ``settings.log_format``. Call once at application startup, before the
    first logger is used.
    """
    settings = get_settings()

    if settings.is_production:
        use_json = True
    else:
        use_json = settings.log_format == "json"

    log_level = get_log_level()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=get_processors(json_format=use_json),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        A structlog logger bound to the stdlib logger of that name.

    Example:
        logger = get_logger(__name__)
        logger.info("Article moved to recycle bin", article_id="a1", user_id="u1")
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values to every log line emitted in the current context.

    The request logging middleware binds the request id and acting user here,
    so repositories can log without passing them along.

    Args:
        **kwargs: Context key-value pairs to bind.

    Example:
        bind_context(request_id="3f9a1c2e", user_id="admin-1")
        logger.info("Restored from recycle bin")  # carries request_id and user_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound context values.

    Called when a request finishes so values never leak into the next one.
    """
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Remove specific bound context values.

    Args:
        *keys: Context keys to remove.
    """
    structlog.contextvars.unbind_contextvars(*keys)
