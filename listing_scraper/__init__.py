"""
Root package of the listing scraper.

This package extracts structured records from paginated listing pages:
a repeating card element is located on every page and a configurable set of
fields is read from each card.

Package structure:
    config: Configuration modules (settings, Celery configuration).
    core: Configuration models and exceptions.
    scraper: Fetching, parsing and the paginated extractor.
    tasks: Celery tasks for automation.
    utils: Helper utilities (logging).

Attributes:
    celery_app: Celery application instance imported from configuration.
"""

from listing_scraper.config.celery_config import celery_app

__all__ = ["celery_app"]
