"""
Loguru setup for the webinar scheduler.

One stderr sink, formatted from settings, with the request trace id injected
into every record. uvicorn and SQLAlchemy log through the standard library,
so their records are forwarded here by InterceptHandler.
"""

import logging
import sys
from typing import Any

from loguru import logger

from webinar_scheduler.config import get_settings
from webinar_scheduler.core.trace_context import trace_id_context

# Standard library loggers forwarded to loguru
FORWARDED_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "fastapi",
    "sqlalchemy.engine",
)


def add_trace_id(record: dict[str, Any]) -> bool:
    """Sink filter: set ``extra[trace_id]``, "N/A" outside a request."""
    record["extra"]["trace_id"] = trace_id_context.get() or "N/A"
    return True


def configure_logger() -> None:
    """Replace loguru's default sink with the configured stderr sink."""
    settings = get_settings()

    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        filter=add_trace_id,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug,
        enqueue=settings.logger_enqueue,
    )


configure_logger()


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging() -> None:
    """
    Route uvicorn and SQLAlchemy logging through loguru.

    SQL statements only appear when DATABASE_ECHO is enabled. Called once by
    main.py before the app is served.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)

    for name in FORWARDED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False


__all__ = ["logger", "InterceptHandler", "intercept_standard_logging"]
