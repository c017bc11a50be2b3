"""Logging setup.

Configures structlog on top of the standard library logger so that
every event carries the bound request context.
"""

import logging
import sys

import structlog

from plumbing.infrastructure.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog for the application.

    JSON lines are emitted in production, a console renderer is used
    elsewhere unless ``log_format`` says otherwise.

    Args:
        settings: Application settings.
    """
    log_format = settings.log_format or ("json" if settings.is_production else "console")
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
