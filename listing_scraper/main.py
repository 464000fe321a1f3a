"""
Main module for launching the listing extractor.

This module contains the application entry point: it registers signal
handlers for proper shutdown, runs one extraction with the defaults from
application settings and prints the collected records as JSON.
Scheduled runs go through Celery tasks instead.

Attributes:
    logger: Logger for registering main module events.

Functions:
    signal_handler: Signal handler for proper shutdown.
    main: Main application startup function.
"""

import json
import signal
import sys
from typing import Any, NoReturn

from listing_scraper.core.exceptions import ScraperError
from listing_scraper.scraper.extractor import Extractor, serialize_record
from listing_scraper.utils.logger import get_logger

logger = get_logger(__name__)


def signal_handler(signum: int, frame: Any) -> NoReturn:
    """
    Signal handler for proper shutdown.

    Args:
        signum (int): Signal number (e.g., SIGINT = 2, SIGTERM = 15).
        frame (Any): Current execution frame.
    """
    logger.info(f"Received signal {signum}. Shutting down...")
    sys.exit(0)


def main() -> None:
    """
    Run one extraction and print its records.

    Raises:
        SystemExit: With code 1 when the extraction fails.

    Examples:
        >>> # python -m listing_scraper.main
        >>> # celery -A listing_scraper call listing_scraper.tasks.scraping.manual_scrape
    """
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        extractor = Extractor()
        records = extractor.run()
    except ScraperError as e:
        logger.critical(f"Extraction failed: {e}", exc_info=True)
        sys.exit(1)

    json.dump(
        [serialize_record(record) for record in records],
        sys.stdout,
        ensure_ascii=False,
        indent=2,
    )
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
