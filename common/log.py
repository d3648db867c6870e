"""Shared logging utilities for FastAPI applications."""

import logging

import common.settings

APP_LOGGERS = ('blog', 'common')


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str | None = None) -> None:
    """Suppress health checks in uvicorn access logs and set app logger levels.

    The level defaults to ``common.settings.LOG_LEVEL``.
    """
    logging.getLogger('uvicorn.access').addFilter(HealthCheckFilter())
    level = (level or common.settings.LOG_LEVEL).upper()
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
