"""
Structured Logging

DESIGN DECISION: Logging goes through structlog with the same processor chain
everywhere, so every event is a single machine-readable line.

Importing this module only configures structlog. Handlers and levels on the
standard library root logger belong to the embedding application; call
configure_logging() explicitly to have them set up here instead.

The calculation core only ever logs at DEBUG, which keeps the per-keystroke
recalculation path quiet in production.
"""

import logging
import sys
from typing import Optional

import structlog

from service_charge.config import get_settings


def _configure_structlog(json: bool) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(
    level: Optional[str] = None,
    json: Optional[bool] = None,
) -> None:
    """
    Configure the root logger and structlog for a standalone process.

    Replaces any handlers already on the root logger.

    Args:
        level: Minimum level name. Defaults to AppSettings.effective_log_level.
        json: Render JSON lines (True) or console output (False).
              Defaults to AppSettings.log_json.
    """
    app_settings = get_settings().app
    level = (level or app_settings.effective_log_level).upper()
    json = app_settings.log_json if json is None else json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
    _configure_structlog(json)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger, optionally named after the calling module."""
    return structlog.get_logger(name)


# Configure structlog for local logging
_configure_structlog(get_settings().app.log_json)
