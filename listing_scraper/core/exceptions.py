"""
Scraper exceptions.

This module defines the error taxonomy raised by the extractor. Every error
that happens while walking the listing aborts the current run; the records
collected before the failure remain available on the extractor.

Classes:
    ScraperError: Base class for all scraper errors.
    ConfigurationError: Invalid options or an unusable calibration page.
    FetchError: Network failure or unsuccessful HTTP status.
    ParseError: Response body rejected by the HTML parser.
    MissingFieldError: A required field could not be read from a card.
"""

from typing import Optional


def describe_page(page: Optional[int]) -> str:
    """Human readable page label used in error messages and logs."""
    return "calibration page" if page is None else f"page {page}"


class ScraperError(Exception):
    """Base class for all scraper errors."""


class ConfigurationError(ScraperError):
    """Raised when the extractor cannot run with the given configuration."""


class FetchError(ScraperError):
    """
    Raised when a page could not be downloaded.

    Attributes:
        url (str): Requested URL.
        cause (Exception): Underlying httpx error.
        page (Optional[int]): Page number, None for the calibration page.
    """

    def __init__(self, url: str, cause: Exception, page: Optional[int] = None):
        self.url = url
        self.cause = cause
        self.page = page
        super().__init__(f"Failed to fetch {describe_page(page)} ({url}): {cause}")


class ParseError(ScraperError):
    """
    Raised when a response body cannot be parsed as HTML.

    Attributes:
        url (str): URL the body was fetched from.
        cause (Exception): Error reported by the parser.
        page (Optional[int]): Page number, None for the calibration page.
    """

    def __init__(self, url: str, cause: Exception, page: Optional[int] = None):
        self.url = url
        self.cause = cause
        self.page = page
        super().__init__(f"Failed to parse {describe_page(page)} ({url}): {cause}")


class MissingFieldError(ScraperError):
    """
    Raised when an href field has no anchor to read from.

    Attributes:
        key (str): Field key of the target.
        selector (str): Selector that found nothing usable.
        page (Optional[int]): Page number the card belongs to.
    """

    def __init__(self, key: str, selector: str, page: Optional[int] = None):
        self.key = key
        self.selector = selector
        self.page = page
        super().__init__(
            f"Field '{key}' has no '{selector}' element with href on {describe_page(page)}"
        )
