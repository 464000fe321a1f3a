"""
Configurable paginated listing extractor (synchronous, httpx+bs4).

This module implements the Extractor: it fetches a calibration page to learn
how many cards a listing page holds, derives the last page from the expected
total, then walks the listing pages one after another and turns every card
into a record.

A record maps each target key to its value, in target order. Class/id targets
yield the ordered list of matched sub-elements (bs4 Tags); href targets yield
the href string of the first matching anchor. serialize_record() produces a
JSON-friendly view of a record.

Attributes:
    logger: Logger for registering extraction events.

Classes:
    Extractor: Paginated card extractor.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

import httpx  # type: ignore
from bs4 import BeautifulSoup, Tag

from listing_scraper.config.settings import DEFAULT_OPTIONS, REQUEST_TIMEOUT, USER_AGENT
from listing_scraper.core.exceptions import (
    ConfigurationError,
    MissingFieldError,
    ScraperError,
    describe_page,
)
from listing_scraper.core.models import (
    ExtractorConfig,
    FieldSpec,
    HrefTarget,
    ScrapeProgress,
    SelectorSpec,
    get_last_page,
    selector_for,
)
from listing_scraper.scraper.base import BaseScraper
from listing_scraper.utils.logger import get_logger

logger = get_logger(__name__)

Record = Dict[str, Any]


def serialize_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert a record into JSON-serializable values.

    Lists of matched elements become lists of their stripped text, strings
    are kept as they are.

    Args:
        record: Record produced by Extractor.extract_record().

    Returns:
        Dict[str, Any]: Record with the same keys in the same order.
    """
    serialized = {}
    for key, value in record.items():
        if isinstance(value, list):
            serialized[key] = [
                item.get_text(" ", strip=True) if isinstance(item, Tag) else item
                for item in value
            ]
        else:
            serialized[key] = value
    return serialized


class Extractor(BaseScraper):
    """
    Paginated extractor of repeating card elements.

    The configuration is immutable for the lifetime of the extractor; the
    page cursor and derived page counts of a run live in progress.

    Attributes:
        config (ExtractorConfig): Configuration of the extraction.
        progress (ScrapeProgress): Cursor of the current or last run.

    Examples:
        >>> extractor = Extractor(base_url="https://jobs.example.com/", total=100)
        >>> records = extractor.run()
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        client: Optional[httpx.Client] = None,
        **options: Any,
    ):
        """
        Initialize the extractor.

        Args:
            config (Optional[ExtractorConfig]): Base configuration. By default
                built from DEFAULT_OPTIONS of the application settings.
            client (Optional[httpx.Client]): HTTP client to use. If not
                specified, a client is created for each run and closed after it.
            **options: Options overriding any subset of the configuration
                (base_url, path, param, current_page/page, per_page, total,
                last_page, parent, targets).

        Raises:
            ConfigurationError: If the resulting configuration is invalid.
        """
        if config is None:
            config = ExtractorConfig.from_options(DEFAULT_OPTIONS)
        if options:
            config = config.with_options(options)
        self.config = config
        self.progress = ScrapeProgress.from_config(config)
        self._client = client
        self._results: List[Record] = []

    @property
    def results(self) -> List[Record]:
        """Records collected so far, in page order then card order."""
        return list(self._results)

    @staticmethod
    def selector_for(spec: Union[SelectorSpec, FieldSpec]) -> str:
        """Build the CSS selector of a selector spec or field target."""
        return selector_for(spec)

    @contextmanager
    def _http_client(self) -> Iterator[httpx.Client]:
        """
        Provide the HTTP client for the current operation.

        An injected client, or the client of a run in progress, is reused and
        left open. Otherwise a new client is created and closed afterwards.
        """
        if self._client is not None:
            yield self._client
            return

        client = httpx.Client(
            headers={"User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT,
            follow_redirects=True,
        )
        self._client = client
        try:
            yield client
        finally:
            client.close()
            self._client = None

    def fetch_and_parse(self, url: str, page: Optional[int] = None) -> BeautifulSoup:
        """
        Download a page and parse it.

        Args:
            url (str): Page URL.
            page (Optional[int]): Page number, None for the calibration page.

        Returns:
            BeautifulSoup: Parsed document.

        Raises:
            FetchError: If the page could not be downloaded.
            ParseError: If the body could not be parsed.
        """
        with self._http_client() as client:
            html = self.fetch(client, url, page)
        return self.get_soup(html, url, page)

    def extract_record(self, card: Tag, page: Optional[int] = None) -> Record:
        """
        Extract one record from a card element.

        Args:
            card (Tag): Card element matched by the parent selector.
            page (Optional[int]): Page the card was found on, for error reporting.

        Returns:
            Record: One entry per target, in target order.

        Raises:
            MissingFieldError: If an href target finds no anchor with href.
        """
        record: Record = {}
        for target in self.config.targets:
            if isinstance(target, HrefTarget):
                anchor = card.select_one(target.element)
                if anchor is None or not anchor.has_attr("href"):
                    raise MissingFieldError(target.key, target.element, page)
                record[target.key] = anchor["href"]
            else:
                record[target.key] = list(card.select(self.selector_for(target)))
        return record

    def paginated_fetch(self, current_page: int, last_page: int) -> None:
        """
        Fetch pages current_page..last_page (inclusive) one after another.

        Records of every card are appended to results. A page without cards
        contributes no records and does not stop the loop.

        Args:
            current_page (int): First page to fetch.
            last_page (int): Last page to fetch.
        """
        parent_selector = self.config.parent_selector
        self.progress.current_page = current_page
        while self.progress.current_page <= last_page:
            page = self.progress.current_page
            url = self.config.page_url(page)
            logger.info(f"Parsing listing page {page}/{last_page}: {url}")

            cards = self.fetch_and_parse(url, page).select(parent_selector)
            for card in cards:
                self._results.append(self.extract_record(card, page))

            logger.info(f"Found {len(cards)} cards on page {page}")
            self.progress.pages_fetched += 1
            self.progress.current_page += 1

    def run(self) -> List[Record]:
        """
        Run the full paginated extraction.

        Fetches the calibration page at base_url, sets per_page to the number
        of cards found there, computes last_page = ceil(total / per_page) and
        walks pages current_page..last_page.

        Returns:
            List[Record]: Collected records.

        Raises:
            ConfigurationError: If the calibration page has no cards.
            FetchError: If any page could not be downloaded.
            ParseError: If any page could not be parsed.
            MissingFieldError: If an href field is missing on a card.

        Note:
            Every run starts with a fresh cursor and no results. When a run
            fails, the records collected before the failure stay available
            through results.
        """
        self.progress = ScrapeProgress.from_config(self.config)
        self._results = []
        parent_selector = self.config.parent_selector
        logger.info(
            f"Starting extraction of '{parent_selector}' cards from {self.config.base_url}"
        )

        try:
            with self._http_client():
                calibration = self.fetch_and_parse(self.config.base_url)
                per_page = len(calibration.select(parent_selector))
                if per_page == 0:
                    raise ConfigurationError(
                        f"no matching parent elements found for '{parent_selector}' "
                        f"on {self.config.base_url}"
                    )

                self.progress.per_page = per_page
                self.progress.last_page = get_last_page(self.config.total, per_page)
                logger.info(
                    f"Calibrated: {per_page} cards per page, "
                    f"{self.progress.last_page} pages for {self.config.total} records"
                )

                self.paginated_fetch(self.progress.current_page, self.progress.last_page)
        except ScraperError as e:
            failed_on = describe_page(getattr(e, "page", None))
            logger.error(f"Extraction aborted on {failed_on}: {e}")
            raise

        logger.info(
            f"Extraction completed. Pages processed: {self.progress.pages_fetched}. "
            f"Records: {len(self._results)}"
        )
        return self.results
