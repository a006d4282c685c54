"""Tests for logging setup."""

import logging
import os

import pytest

from drawing_app import settings
from drawing_app.log_config import LOGGER_NAME, configure_logging
from drawing_app.settings import LOG_FILE


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers = []
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers = saved


class TestConfigureLogging:
    def test_writes_to_log_dir(self, clean_logger, tmp_path):
        logger = configure_logging(log_dir=tmp_path)

        logging.getLogger('drawing_app.compositor').info('hello from test')
        for h in logger.handlers:
            h.flush()

        text = (tmp_path / LOG_FILE).read_text(encoding='utf-8')
        assert 'hello from test' in text
        assert 'drawing_app.compositor' in text

    def test_no_duplicate_handlers(self, clean_logger, tmp_path):
        configure_logging(log_dir=tmp_path)
        count = len(clean_logger.handlers)

        configure_logging(log_dir=tmp_path)

        assert len(clean_logger.handlers) == count == 2

    def test_unwritable_default_falls_back_to_console(self, clean_logger, tmp_path, monkeypatch):
        """A log dir that cannot be created leaves console logging only."""
        blocker = tmp_path / 'not_a_dir'
        blocker.write_text('x', encoding='utf-8')
        monkeypatch.setattr(settings, 'LOG_DIR', str(blocker / 'logs'))

        logger = configure_logging()

        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert not (blocker / 'logs').exists()

    def test_default_log_dir_outside_package(self):
        package_dir = os.path.dirname(os.path.dirname(os.path.abspath(settings.__file__)))

        assert not os.path.abspath(settings.LOG_DIR).startswith(package_dir + os.sep)
