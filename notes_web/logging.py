"""
Logging configuration for the notes workbench.
"""

import logging
import sys

from notes_web import config


def setup_logging() -> logging.Logger:
    """
    Configure application logging.

    :return: Root logger for the notes application
    :rtype: logging.Logger
    """
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    return logging.getLogger('notes')


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    :param name: The module name for the logger
    :type name: str
    :return: Logger instance for the specified module
    :rtype: logging.Logger
    """
    return logging.getLogger(f'notes.{name}')
