"""
The config package contains application settings.

This package includes all configuration files for the listing scraper,
providing centralized access to Redis, Celery, logging settings
and extraction parameters.

Modules:
    settings: Main application settings, including paths, logging and extractor defaults.
    celery_config: Celery settings for scheduling scraping tasks.
"""
