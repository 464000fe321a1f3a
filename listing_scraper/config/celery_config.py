"""
Celery settings for managing scraping tasks.

This module initializes and configures a Celery instance for scheduling
and executing extraction tasks. Settings are loaded from the settings.py module.

A single periodic task runs the extraction daily at SCRAPER_START_TIME.

Attributes:
    celery_app (Celery): Celery application instance for the listing scraper.
    scraper_hour (int): Scraper start hour, extracted from SCRAPER_START_TIME.
    scraper_minute (int): Scraper start minute, extracted from SCRAPER_START_TIME.

Note:
    Celery requires a running Redis server specified in settings.
"""

from celery import Celery
from celery.schedules import crontab

from listing_scraper.config.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    SCRAPER_START_TIME,
)

# Create Celery instance
celery_app = Celery(
    "listing_scraper",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
    include=["listing_scraper.tasks.scraping"],
)

# Celery settings
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    worker_max_tasks_per_child=1,  # Fresh worker process for every extraction run
)

# Parse time from settings
scraper_hour, scraper_minute = map(int, SCRAPER_START_TIME.split(":"))

# Configure periodic tasks
celery_app.conf.beat_schedule = {
    "scrape-listing-daily": {
        "task": "listing_scraper.tasks.scraping.scrape_listing",
        "schedule": crontab(hour=scraper_hour, minute=scraper_minute),
    },
}

if __name__ == "__main__":
    celery_app.start()
