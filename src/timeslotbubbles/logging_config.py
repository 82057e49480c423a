"""
Logging Configuration
Attaches handlers to the 'timeslotbubbles' logger for the command-line tool.

The layout modules never configure logging themselves; they only log to
child loggers, so embedding applications keep full control.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "timeslotbubbles"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'timeslotbubbles' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The package logger, so callers can add their own handlers or
        children to it.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # main() may run several times in one process (tests, notebooks)
    if logger.hasHandlers():
        logger.handlers.clear()

    # stdout carries the tab-separated layout table and must stay parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # DEBUG, not INFO: the CLI runs at WARNING and must print only the table
    logger.debug("Logging initialized.")
    return logger
