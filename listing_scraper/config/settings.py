"""
Main application settings.

This module contains all main configuration parameters for the listing scraper.
Settings are loaded from environment variables using python-dotenv,
with default values in case of missing variables.

Attributes:
    BASE_DIR (Path): Base application directory.
    LOGS_DIR (Path): Directory for storing application logs.

    REDIS_HOST (str): Redis host.
    REDIS_PORT (str): Redis port.
    REDIS_URL (str): Full URL for Redis connection.

    CELERY_BROKER_URL (str): Message broker URL for Celery.
    CELERY_RESULT_BACKEND (str): Result backend URL for Celery.

    SCRAPER_BASE_URL (str): Calibration page URL and prefix of page URLs.
    SCRAPER_PATH (str): Path appended to the base URL for paginated fetches.
    SCRAPER_PAGE_PARAM (str): Query parameter carrying the page number.
    SCRAPER_START_PAGE (int): First page of the pagination loop.
    SCRAPER_PER_PAGE (int): Expected cards per page (replaced after calibration).
    SCRAPER_TOTAL (int): Expected total number of records.
    SCRAPER_PARENT (dict): Card selector as {element, name, type} (JSON).
    SCRAPER_TARGETS (list): Field targets as {key, element, name, type} (JSON).
    SCRAPER_START_TIME (str): Daily scraping start time in "HH:MM" format.
    REQUEST_TIMEOUT (float): HTTP request timeout in seconds.
    USER_AGENT (str): User-Agent header sent with every request.
    DEFAULT_OPTIONS (dict): Extractor options assembled from the values above.

    LOG_LEVEL (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    LOG_FILE (str): Log file name.
    LOG_TO_FILE (bool): Whether to write logs to a rotating file in LOGS_DIR.
    LOG_FORMAT (str): Log entry format.
    LOG_DATE_FORMAT (str): Date and time format in logs.
"""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(os.getenv("BASE_DIR", Path.cwd()))
LOGS_DIR = Path(os.getenv("LOGS_DIR", BASE_DIR / "logs"))

# Redis settings
REDIS_HOST = os.getenv("REDIS_HOST", "redis")
REDIS_PORT = os.getenv("REDIS_PORT", "6379")
REDIS_URL = f"redis://{REDIS_HOST}:{REDIS_PORT}/0"

# Celery settings
CELERY_BROKER_URL = REDIS_URL
CELERY_RESULT_BACKEND = REDIS_URL

# Scraper settings
SCRAPER_BASE_URL = os.getenv("SCRAPER_BASE_URL", "https://example.com/")
SCRAPER_PATH = os.getenv("SCRAPER_PATH", "listing")
SCRAPER_PAGE_PARAM = os.getenv("SCRAPER_PAGE_PARAM", "page")
SCRAPER_START_PAGE = int(os.getenv("SCRAPER_START_PAGE", "1"))
SCRAPER_PER_PAGE = int(os.getenv("SCRAPER_PER_PAGE", "50"))
SCRAPER_TOTAL = int(os.getenv("SCRAPER_TOTAL", "200"))
SCRAPER_PARENT = json.loads(
    os.getenv(
        "SCRAPER_PARENT",
        '{"element": "div", "name": "listingCard", "type": "class"}',
    )
)
SCRAPER_TARGETS = json.loads(
    os.getenv(
        "SCRAPER_TARGETS",
        json.dumps(
            [
                {"key": "title", "element": "span", "name": "title", "type": "class"},
                {"key": "company", "element": "span", "name": "company", "type": "class"},
                {"key": "location", "element": "span", "name": "location", "type": "class"},
                {"key": "url", "element": "a", "name": None, "type": "href"},
            ]
        ),
    )
)
SCRAPER_START_TIME = os.getenv("SCRAPER_START_TIME", "12:00")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36",
)

DEFAULT_OPTIONS = {
    "base_url": SCRAPER_BASE_URL,
    "path": SCRAPER_PATH,
    "param": SCRAPER_PAGE_PARAM,
    "current_page": SCRAPER_START_PAGE,
    "per_page": SCRAPER_PER_PAGE,
    "total": SCRAPER_TOTAL,
    "parent": SCRAPER_PARENT,
    "targets": SCRAPER_TARGETS,
}

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "scraper.log")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("1", "true", "yes")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Create directories if they don't exist
if LOG_TO_FILE:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
