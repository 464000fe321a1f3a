import os

os.environ.setdefault("LOG_TO_FILE", "false")

from typing import Dict, List, Optional  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

BASE_URL = "https://jobs.example.com/"
PATH = "listing"


def card_html(title: str, href: Optional[str] = None, company: str = "Acme") -> str:
    anchor = f'<a href="{href}">View</a>' if href is not None else ""
    return (
        '<div class="listingCard">'
        f'<span class="title">{title}</span>'
        f'<span class="company">{company}</span>'
        f"{anchor}"
        "</div>"
    )


def page_html(cards: List[str]) -> str:
    return f"<html><body><main>{''.join(cards)}</main></body></html>"


def listing_page(page: int, count: int) -> str:
    return page_html(
        [card_html(f"Job {page}-{i}", f"/jobs/{page}-{i}") for i in range(count)]
    )


def page_url(page: int) -> str:
    return f"{BASE_URL}{PATH}?page={page}"


class FakeSite:
    """Serves canned HTML by URL and records requested URLs."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.requested: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url not in self.pages:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=self.pages[url])

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


TARGETS = [
    {"key": "title", "element": "span", "name": "title", "type": "class"},
    {"key": "url", "element": "a", "name": None, "type": "href"},
]


@pytest.fixture
def options() -> dict:
    return {
        "base_url": BASE_URL,
        "path": PATH,
        "param": "page",
        "page": 1,
        "total": 100,
        "parent": {"element": "div", "name": "listingCard", "type": "class"},
        "targets": TARGETS,
    }


@pytest.fixture
def four_page_site() -> FakeSite:
    pages = {BASE_URL: listing_page(1, 25)}
    for page in range(1, 5):
        pages[page_url(page)] = listing_page(page, 25)
    return FakeSite(pages)
