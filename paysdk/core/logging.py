"""
Structured logging for paysdk.

Modules log through ``get_logger(__name__)``. Applications that do not
configure structlog themselves can opt in to ``configure_logging()``, which
only touches the ``paysdk`` logger hierarchy and leaves the root logger alone.
"""
import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.types import Processor

from paysdk.core.config import settings

PACKAGE_LOGGER = "paysdk"


def configure_logging(
    environment: Optional[str] = None,
    log_level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route paysdk log events to ``stream`` (stderr by default).

    Args:
        environment: ``production`` renders JSON lines, anything else renders
            for the console. Defaults to ``settings.environment``.
        log_level: Level name for the ``paysdk`` logger. Defaults to
            ``settings.log_level``.
        stream: Destination of the package handler.

    Returns:
        The configured ``paysdk`` stdlib logger.
    """
    environment = environment or settings.environment
    level = getattr(logging, (log_level or settings.log_level).upper())

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if environment == "production":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    # Re-configuring swaps the handler rather than stacking another one
    for handler in list(package_logger.handlers):
        if getattr(handler, "_paysdk_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._paysdk_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
