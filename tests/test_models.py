import pytest

from listing_scraper.core.exceptions import ConfigurationError
from listing_scraper.core.models import (
    ClassOrIdTarget,
    ExtractorConfig,
    HrefTarget,
    ScrapeProgress,
    SelectorSpec,
    field_spec_from_dict,
    get_last_page,
    selector_for,
)


def test_selector_for_class_and_id() -> None:
    assert selector_for(SelectorSpec("div", "listingCard", "class")) == "div.listingCard"
    assert selector_for(SelectorSpec("span", "price", "id")) == "span#price"


def test_selector_for_without_name_or_kind_is_element() -> None:
    assert selector_for(SelectorSpec("article")) == "article"
    assert selector_for(SelectorSpec("article", name="card")) == "article"
    assert selector_for(ClassOrIdTarget(key="tags", element="li", kind="class")) == "li"
    assert selector_for(HrefTarget(key="url")) == "a"


@pytest.mark.parametrize(
    ("total", "per_page", "expected"),
    [(100, 25, 4), (101, 25, 5), (200, 50, 4), (1, 50, 1), (24, 25, 1)],
)
def test_get_last_page_rounds_up(total: int, per_page: int, expected: int) -> None:
    assert get_last_page(total, per_page) == expected


@pytest.mark.parametrize(("total", "per_page"), [(100, 0), (0, 25), (-1, 25)])
def test_get_last_page_rejects_non_positive(total: int, per_page: int) -> None:
    with pytest.raises(ConfigurationError):
        get_last_page(total, per_page)


def test_field_spec_from_dict_builds_tagged_targets() -> None:
    title = field_spec_from_dict(
        {"key": "title", "element": "span", "name": "title", "type": "class"}
    )
    url = field_spec_from_dict({"key": "url", "element": "a", "name": None, "type": "href"})

    assert title == ClassOrIdTarget(key="title", element="span", name="title", kind="class")
    assert url == HrefTarget(key="url", element="a")


def test_field_spec_from_dict_rejects_unknown_type() -> None:
    with pytest.raises(ConfigurationError):
        field_spec_from_dict({"key": "x", "element": "span", "name": "x", "type": "data"})


def test_field_spec_from_dict_requires_key() -> None:
    with pytest.raises(ConfigurationError):
        field_spec_from_dict({"element": "span", "name": "title", "type": "class"})


def test_default_config_matches_listing_defaults() -> None:
    config = ExtractorConfig()

    assert config.parent_selector == "div.listingCard"
    assert config.keys == ("title", "company", "location", "url")
    assert (config.start_page, config.per_page, config.total, config.last_page) == (1, 50, 200, 4)


def test_with_options_overrides_subset_and_accepts_page_aliases() -> None:
    base = ExtractorConfig()

    config = base.with_options({"total": 100, "page": 3, "path": "jobs"})

    assert config.total == 100
    assert config.start_page == 3
    assert config.path == "jobs"
    assert config.param == base.param
    assert base.total == 200
    assert base.with_options({"current_page": 2}).start_page == 2


def test_with_options_converts_parent_and_targets() -> None:
    config = ExtractorConfig.from_options(
        {
            "parent": {"element": "li", "name": "result", "type": "id"},
            "targets": [{"key": "link", "element": "a", "type": "href"}],
        }
    )

    assert config.parent_selector == "li#result"
    assert config.targets == (HrefTarget(key="link"),)


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        ExtractorConfig.from_options({"max_pages": 3})


@pytest.mark.parametrize(
    "options",
    [
        {"total": 0},
        {"per_page": 0},
        {"per_page": -5},
        {"page": -1},
        {"targets": []},
        {"total": "many"},
        {"page": None},
        {"per_page": "ten"},
        {"targets": ["title"]},
        {"targets": "title"},
        {"parent": "div.listingCard"},
        {
            "targets": [
                {"key": "title", "element": "span", "name": "a", "type": "class"},
                {"key": "title", "element": "span", "name": "b", "type": "class"},
            ]
        },
    ],
)
def test_invalid_configuration_is_rejected(options: dict) -> None:
    with pytest.raises(ConfigurationError):
        ExtractorConfig.from_options(options)


def test_page_url_concatenates_template() -> None:
    config = ExtractorConfig.from_options(
        {"base_url": "https://jobs.example.com/", "path": "listing", "param": "p"}
    )

    assert config.page_url(7) == "https://jobs.example.com/listing?p=7"


def test_config_is_immutable() -> None:
    config = ExtractorConfig()
    with pytest.raises(AttributeError):
        config.total = 10


def test_progress_starts_from_config() -> None:
    progress = ScrapeProgress.from_config(ExtractorConfig.from_options({"page": 2}))

    assert progress.current_page == 2
    assert progress.per_page == 50
    assert progress.last_page == 4
    assert progress.pages_fetched == 0
