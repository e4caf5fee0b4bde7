"""Logging configuration."""

import logging
import sys
from typing import Optional

import structlog

from ..config import settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Log level name; settings.log_level when omitted
        log_format: "json" or "console"; settings.log_format when omitted
    """
    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
