"""Shared logging utilities for FastAPI applications."""

import logging

import common.settings

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging and suppress health checks in uvicorn access logs.

    Args:
        level: Level name such as ``'DEBUG'``; defaults to ``LOG_LEVEL``.
    """
    logging.basicConfig(
        level=(level or common.settings.LOG_LEVEL).upper(), format=LOG_FORMAT
    )
    access_logger = logging.getLogger('uvicorn.access')
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
