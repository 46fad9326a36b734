"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging once at startup.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level.
    Output goes to stdout.
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # SQL echo goes through the engine; keep the driver quiet otherwise.
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.
    """
    return logging.getLogger(name)
