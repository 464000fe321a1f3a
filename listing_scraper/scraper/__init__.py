"""
The scraper package contains data collection components.

This package implements synchronous extraction of repeating card elements
from paginated listing pages. Implementation uses httpx for HTTP requests and
BeautifulSoup (lxml) for HTML parsing.

Modules:
    base: Abstract base class wrapping the HTTP client and the HTML parser.
    extractor: Paginated card extractor.
"""
