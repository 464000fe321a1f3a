"""
Celery tasks for listing extraction.

This module contains Celery tasks for scheduled and manual launch of the
Extractor. Tasks never retry: a failed extraction is reported in the task
result and the next scheduled run starts over.

Attributes:
    logger: Logger for registering task events.
    celery_app: Celery application instance imported from configuration.

Functions:
    scrape_listing: Task for scheduled extraction with the settings defaults.
    manual_scrape: Task for manual extraction with option overrides.
"""

from typing import Any, Dict, Optional

from listing_scraper.config.celery_config import celery_app
from listing_scraper.core.exceptions import ScraperError
from listing_scraper.scraper.extractor import Extractor, serialize_record
from listing_scraper.utils.logger import get_logger

logger = get_logger(__name__)


def _run_extraction(options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run one extraction and build the task result.

    Args:
        options (Optional[Dict[str, Any]]): Extractor option overrides.

    Returns:
        dict: On success {"status": "success", "url", "pages", "count",
        "records"}, on failure {"status": "error", "error", "url"}.
    """
    extractor = Extractor(**(options or {}))
    url = extractor.config.base_url
    try:
        records = extractor.run()
    except ScraperError as e:
        logger.error(f"Error executing extraction from {url}: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "url": url}

    logger.info(
        f"Extraction from {url} completed. Pages: {extractor.progress.pages_fetched}, "
        f"records: {len(records)}"
    )
    return {
        "status": "success",
        "url": url,
        "pages": extractor.progress.pages_fetched,
        "count": len(records),
        "records": [serialize_record(record) for record in records],
    }


@celery_app.task(name="listing_scraper.tasks.scraping.scrape_listing")
def scrape_listing():
    """
    Task for scheduled extraction.

    Runs the extractor with the defaults from application settings.

    Returns:
        dict: Task result, see _run_extraction().
    """
    logger.info("Starting scheduled listing extraction task")
    return _run_extraction()


@celery_app.task(name="listing_scraper.tasks.scraping.manual_scrape")
def manual_scrape(options=None):
    """
    Task for manual extraction.

    Args:
        options (dict, optional): Extractor options overriding the settings
            defaults, e.g. {"base_url": "https://jobs.example.com/", "total": 100}.

    Returns:
        dict: Task result, see _run_extraction(). Invalid options are reported
        as an error result as well.

    Examples:
        >>> result = manual_scrape.delay({"total": 100})
    """
    logger.info(f"Starting manual listing extraction with options: {options or {}}")
    try:
        return _run_extraction(options)
    except ScraperError as e:
        logger.error(f"Invalid extraction options: {e}")
        return {"status": "error", "error": str(e), "url": (options or {}).get("base_url")}
