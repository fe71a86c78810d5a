"""Structured logging configuration.

Events are logged as snake_case names with keyword context, e.g.
``logger.info("session_issued", user_id=user_id)``. Development renders
coloured console output; every other environment renders one JSON object
per line.
"""

import logging
import sys

import structlog

from translation_hub.core.config import (
    Environment,
    get_settings,
)


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Minimum log level name
        fmt: Either "console" or "json"
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _format_for_environment() -> str:
    settings = get_settings()
    if settings.APP_ENV == Environment.DEVELOPMENT:
        return settings.LOG_FORMAT
    return "json"


configure_logging(get_settings().LOG_LEVEL, _format_for_environment())

logger = structlog.get_logger("translation_hub")
