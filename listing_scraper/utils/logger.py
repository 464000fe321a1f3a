"""
Logging configuration module.

Every module of the scraper obtains its logger through get_logger(__name__).
Loggers write to the console and, unless LOG_TO_FILE is disabled, to a
rotating log file in LOGS_DIR.

Attributes:
    LOG_MAX_BYTES: Size after which the log file is rotated.
    LOG_BACKUP_COUNT: Number of rotated log files kept.

Functions:
    get_logger: Creates and returns a configured logger for the module.
"""

import logging
import logging.handlers

from listing_scraper.config.settings import (
    LOG_DATE_FORMAT,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
    LOG_TO_FILE,
    LOGS_DIR,
)

LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module, configuring it on first use.

    A logger that already has handlers is returned untouched, so calling
    get_logger() repeatedly for the same name never duplicates output.

    Args:
        name (str): Module name, usually passed as __name__.

    Returns:
        logging.Logger: Logger with console and (optionally) file handlers.

    Examples:
        >>> from listing_scraper.utils.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Found 25 cards on page 3")
        >>> logger.error("Page fetch failed", exc_info=True)
    """
    logger = logging.getLogger(name)
    logger.propagate = False

    if logger.handlers:
        return logger

    logger.setLevel(LOG_LEVEL)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if LOG_TO_FILE:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=LOGS_DIR / LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
