"""
Base synchronous scraper class.

This module provides an abstract base class for scrapers in the project.
It wraps the two external collaborators every scraper needs, the HTTP client
(httpx) and the HTML parser (BeautifulSoup with lxml), and converts their
failures into the project's FetchError and ParseError.

Attributes:
    logger: Logger for registering fetch and parse events.

Classes:
    BaseScraper: Abstract base class for all scrapers.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx  # type: ignore
from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from listing_scraper.core.exceptions import FetchError, ParseError, describe_page
from listing_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class BaseScraper(ABC):
    """
    Base class for synchronous scrapers.

    Methods:
        get_soup: Creates BeautifulSoup object from HTML code.
        fetch: Downloads a page and returns its body.
        run: Abstract method performing the scrape, implemented in inheritors.
    """

    @staticmethod
    def get_soup(
        html: str, url: str = "", page: Optional[int] = None
    ) -> BeautifulSoup:
        """
        Create BeautifulSoup object from HTML.

        Uses the lxml parser, which recovers from most malformed markup.

        Args:
            html (str): Page HTML code for parsing.
            url (str): URL the HTML came from, for error reporting.
            page (Optional[int]): Page number, None for the calibration page.

        Returns:
            BeautifulSoup: Parsed document.

        Raises:
            ParseError: If the parser rejects the markup.

        Examples:
            >>> soup = BaseScraper.get_soup("<html><body><h1>Title</h1></body></html>")
            >>> soup.h1.text
            'Title'
        """
        try:
            return BeautifulSoup(html, "lxml")
        except (ParserRejectedMarkup, FeatureNotFound) as e:
            logger.error(f"Failed to parse HTML of {describe_page(page)} ({url}): {e}")
            raise ParseError(url, e, page) from e

    @staticmethod
    def fetch(client: httpx.Client, url: str, page: Optional[int] = None) -> str:
        """
        Download a page.

        Args:
            client (httpx.Client): HTTP client for making requests.
            url (str): Page URL.
            page (Optional[int]): Page number, None for the calibration page.

        Returns:
            str: Response body.

        Raises:
            FetchError: On transport errors and non-success status codes.
        """
        try:
            resp = client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to get HTML for {describe_page(page)} ({url}): {e}")
            raise FetchError(url, e, page) from e
        return resp.text

    @abstractmethod
    def run(self, *args, **kwargs) -> Any:
        """
        Abstract scraping method.

        Must be implemented in child classes.

        Raises:
            NotImplementedError: If method is not overridden in child class.
        """
        raise NotImplementedError
