"""
Celery tasks package.

Modules:
    scraping: Scheduled and manual launch of the listing extractor.
"""
