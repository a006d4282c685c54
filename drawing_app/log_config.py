"""Logging setup for the drawing application.

Modules log through ``logging.getLogger(__name__)``; this attaches the file
and console handlers to the ``drawing_app`` logger once, at startup. When the
log directory cannot be created or opened, only the console handler is used.
"""
import logging
import os

from . import settings

LOGGER_NAME = 'drawing_app'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_dir=None, level=logging.INFO):
    """Attach file + console handlers to the package logger; returns it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # Check if handlers already exist to avoid duplicate logs
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    sh = logging.StreamHandler()
    sh.setLevel(logging.WARNING)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    log_dir = log_dir or settings.LOG_DIR
    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, settings.LOG_FILE))
    except OSError as e:
        logger.warning(f'File logging disabled, cannot write to {log_dir}: {e}')
        return logger
    fh.setLevel(level)
    fh.setFormatter(formatter)
    logger.addHandler(fh)
    return logger
