"""Unit tests for common/log.py."""

import logging
import unittest

import common.log


def _access_record(path: str) -> logging.LogRecord:
    return logging.LogRecord(
        name='uvicorn.access',
        level=logging.INFO,
        pathname='',
        lineno=0,
        msg='%s - "%s %s HTTP/%s" %d',
        args=('127.0.0.1', 'GET', path, '1.1', 200),
        exc_info=None,
    )


class TestHealthCheckFilter(unittest.TestCase):
    """Tests for the HealthCheckFilter logging filter."""

    def test_health_path_filtered(self) -> None:
        """Health check requests are suppressed by the filter."""
        f = common.log.HealthCheckFilter()
        self.assertFalse(f.filter(_access_record('/health')))

    def test_game_path_not_filtered(self) -> None:
        """Game requests are not suppressed by the filter."""
        f = common.log.HealthCheckFilter()
        self.assertTrue(f.filter(_access_record('/api/melble/round')))


class TestConfigureLogging(unittest.TestCase):
    """Tests for configure_logging()."""

    def _health_filters(self) -> list[logging.Filter]:
        logger = logging.getLogger('uvicorn.access')
        return [
            f for f in logger.filters if isinstance(f, common.log.HealthCheckFilter)
        ]

    def test_installs_filter_on_uvicorn_access_logger(self) -> None:
        """configure_logging() installs HealthCheckFilter on uvicorn.access."""
        common.log.configure_logging()
        self.assertTrue(self._health_filters())

    def test_repeated_calls_install_one_filter(self) -> None:
        """Calling configure_logging() twice does not stack filters."""
        common.log.configure_logging()
        common.log.configure_logging('debug')
        self.assertEqual(len(self._health_filters()), 1)


if __name__ == '__main__':
    unittest.main()
