"""
Extractor configuration models.

This module defines the values that describe one paginated extraction: the
selector of the repeating card element, the field targets read from every card,
the immutable configuration of a run and the mutable progress of that run.

Field targets are a tagged variant: ClassOrIdTarget collects the matched
sub-elements of a card, HrefTarget reads the href attribute of the first anchor.
Option dictionaries in the {key, element, name, type} form are converted into
these types by field_spec_from_dict().

Attributes:
    ATTRIBUTE_PREFIXES: CSS prefix for each supported attribute kind.

Classes:
    SelectorSpec: Selector of the repeating card element.
    ClassOrIdTarget: Field collecting matched sub-elements.
    HrefTarget: Field reading the href of the first anchor.
    ExtractorConfig: Immutable configuration of a run.
    ScrapeProgress: Mutable cursor of a run.
"""

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from listing_scraper.core.exceptions import ConfigurationError

ATTRIBUTE_PREFIXES = {"class": ".", "id": "#"}
HREF_TYPE = "href"

# Option names accepted for the starting page
_START_PAGE_ALIASES = ("current_page", "page", "start_page")


def _to_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Option '{name}' must be an integer, got {value!r}") from e


def _check_kind(kind: Optional[str]) -> None:
    if kind is not None and kind not in ATTRIBUTE_PREFIXES:
        raise ConfigurationError(
            f"Unsupported attribute type '{kind}', expected one of "
            f"{sorted(ATTRIBUTE_PREFIXES)}"
        )


@dataclass(frozen=True)
class SelectorSpec:
    """Selector of an element by tag and optional class or id."""

    element: str
    name: Optional[str] = None
    kind: Optional[str] = None

    def __post_init__(self):
        if not self.element:
            raise ConfigurationError("Selector element must not be empty")
        _check_kind(self.kind)


@dataclass(frozen=True)
class ClassOrIdTarget:
    """Field whose value is the ordered list of matched sub-elements."""

    key: str
    element: str
    name: Optional[str] = None
    kind: Optional[str] = None

    def __post_init__(self):
        if not self.key:
            raise ConfigurationError("Target key must not be empty")
        if not self.element:
            raise ConfigurationError(f"Target '{self.key}' has no element")
        _check_kind(self.kind)


@dataclass(frozen=True)
class HrefTarget:
    """Field whose value is the href of the first matching anchor in a card."""

    key: str
    element: str = "a"

    def __post_init__(self):
        if not self.key:
            raise ConfigurationError("Target key must not be empty")


FieldSpec = Union[ClassOrIdTarget, HrefTarget]


def selector_for(spec: Union[SelectorSpec, FieldSpec]) -> str:
    """
    Build the CSS selector for a selector spec or field target.

    Args:
        spec: Any spec with element, and optionally name and kind.

    Returns:
        str: element alone when name or kind is absent, otherwise
        element + prefix + name (e.g. "div.listingCard", "span#price").

    Examples:
        >>> selector_for(SelectorSpec("div", "listingCard", "class"))
        'div.listingCard'
    """
    name = getattr(spec, "name", None)
    kind = getattr(spec, "kind", None)
    if name is None or kind is None:
        return spec.element
    return "".join([spec.element, ATTRIBUTE_PREFIXES[kind], name])


def get_last_page(total: int, per_page: int) -> int:
    """
    Compute the number of pages holding total records.

    Args:
        total (int): Expected number of records across all pages.
        per_page (int): Number of records on one page.

    Returns:
        int: ceil(total / per_page).

    Raises:
        ConfigurationError: If total or per_page is not positive.
    """
    if total <= 0:
        raise ConfigurationError(f"total must be positive, got {total}")
    if per_page <= 0:
        raise ConfigurationError(f"per_page must be positive, got {per_page}")
    return math.ceil(total / per_page)


def selector_spec_from_dict(data: Union[SelectorSpec, Mapping[str, Any]]) -> SelectorSpec:
    """Build a SelectorSpec from an {element, name, type} mapping."""
    if isinstance(data, SelectorSpec):
        return data
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Parent selector must be a mapping, got {data!r}")
    if "element" not in data:
        raise ConfigurationError(f"Parent selector {dict(data)} has no element")
    return SelectorSpec(
        element=data["element"],
        name=data.get("name"),
        kind=data.get("type"),
    )


def field_spec_from_dict(data: Union[FieldSpec, Mapping[str, Any]]) -> FieldSpec:
    """
    Build a typed field target from an {key, element, name, type} mapping.

    A type of "href" yields an HrefTarget; "class", "id" or no type yields a
    ClassOrIdTarget.

    Raises:
        ConfigurationError: If key or element is missing or type is unknown.
    """
    if isinstance(data, (ClassOrIdTarget, HrefTarget)):
        return data
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Target must be a mapping, got {data!r}")
    key = data.get("key")
    if not key:
        raise ConfigurationError(f"Target {dict(data)} has no key")
    kind = data.get("type")
    if kind == HREF_TYPE:
        return HrefTarget(key=str(key), element=data.get("element") or "a")
    if "element" not in data:
        raise ConfigurationError(f"Target '{key}' has no element")
    return ClassOrIdTarget(
        key=str(key),
        element=data["element"],
        name=data.get("name"),
        kind=kind,
    )


def normalize_targets(targets: Sequence[Union[FieldSpec, Mapping[str, Any]]]) -> Tuple[FieldSpec, ...]:
    """Convert a sequence of target dictionaries or specs into typed specs."""
    if isinstance(targets, (str, bytes, Mapping)) or not isinstance(targets, Sequence):
        raise ConfigurationError(f"targets must be a list of target mappings, got {targets!r}")
    return tuple(field_spec_from_dict(t) for t in targets)


DEFAULT_PARENT = SelectorSpec(element="div", name="listingCard", kind="class")
DEFAULT_TARGETS: Tuple[FieldSpec, ...] = (
    ClassOrIdTarget(key="title", element="span", name="title", kind="class"),
    ClassOrIdTarget(key="company", element="span", name="company", kind="class"),
    ClassOrIdTarget(key="location", element="span", name="location", kind="class"),
    HrefTarget(key="url"),
)


@dataclass(frozen=True)
class ExtractorConfig:
    """
    Immutable configuration of a paginated extraction.

    Attributes:
        base_url (str): URL of the calibration page and prefix of page URLs.
        path (str): Path appended to base_url for paginated fetches.
        param (str): Query parameter carrying the page number.
        start_page (int): First page fetched by the pagination loop.
        per_page (int): Expected cards per page, replaced by the observed count.
        total (int): Expected number of records across all pages.
        last_page (int): Expected last page, replaced by ceil(total / per_page).
        parent (SelectorSpec): Selector of the repeating card element.
        targets (Tuple[FieldSpec, ...]): Fields read from every card, in order.
    """

    base_url: str = "https://example.com/"
    path: str = "listing"
    param: str = "page"
    start_page: int = 1
    per_page: int = 50
    total: int = 200
    last_page: int = 4
    parent: SelectorSpec = DEFAULT_PARENT
    targets: Tuple[FieldSpec, ...] = DEFAULT_TARGETS

    def __post_init__(self):
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.total <= 0:
            raise ConfigurationError(f"total must be positive, got {self.total}")
        if self.per_page <= 0:
            raise ConfigurationError(f"per_page must be positive, got {self.per_page}")
        if self.start_page < 0:
            raise ConfigurationError(
                f"start page must not be negative, got {self.start_page}"
            )
        if not self.targets:
            raise ConfigurationError("At least one target is required")
        keys = [target.key for target in self.targets]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate target keys: {', '.join(duplicates)}")

    @property
    def parent_selector(self) -> str:
        """CSS selector of the card element, e.g. 'div.listingCard'."""
        return selector_for(self.parent)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(target.key for target in self.targets)

    def page_url(self, page: int) -> str:
        """Build the URL of a listing page: base_url + path + '?' + param + '=' + page."""
        return "".join([self.base_url, self.path, "?", self.param, "=", str(page)])

    def with_options(self, options: Mapping[str, Any]) -> "ExtractorConfig":
        """
        Return a copy of this configuration with some options overridden.

        Args:
            options: Any subset of base_url, path, param, current_page (or
                page, start_page), per_page, total, last_page, parent, targets.
                parent and targets may be given as dictionaries.

        Returns:
            ExtractorConfig: New validated configuration.

        Raises:
            ConfigurationError: On unknown options or invalid values.
        """
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for name, value in options.items():
            if name in _START_PAGE_ALIASES:
                changes["start_page"] = _to_int(name, value)
            elif name == "parent":
                changes["parent"] = selector_spec_from_dict(value)
            elif name == "targets":
                changes["targets"] = normalize_targets(value)
            elif name in ("per_page", "total", "last_page"):
                changes[name] = _to_int(name, value)
            elif name in known:
                changes[name] = value
            else:
                raise ConfigurationError(f"Unknown option '{name}'")
        return replace(self, **changes)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "ExtractorConfig":
        """Build a configuration from defaults overridden by options."""
        return cls().with_options(options or {})


@dataclass
class ScrapeProgress:
    """
    Mutable cursor of one extraction run.

    Attributes:
        current_page (int): Next page the pagination loop will fetch.
        per_page (int): Cards observed on the calibration page.
        last_page (int): Last page to fetch, computed once after calibration.
        pages_fetched (int): Listing pages processed so far.
    """

    current_page: int
    per_page: int
    last_page: int
    pages_fetched: int = 0

    @classmethod
    def from_config(cls, config: ExtractorConfig) -> "ScrapeProgress":
        return cls(
            current_page=config.start_page,
            per_page=config.per_page,
            last_page=config.last_page,
        )
