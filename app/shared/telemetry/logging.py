"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers kept at WARNING unless debugging
_NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def setup_logging() -> None:
    """Configure stdout logging: DEBUG when settings.debug, otherwise INFO.

    Safe to call more than once (force=True replaces earlier handlers).
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    if not settings.debug:
        for name in _NOISY_LOGGERS:
            if name == "sqlalchemy.engine" and settings.database_echo:
                continue
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
