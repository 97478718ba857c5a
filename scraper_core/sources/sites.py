"""Site-specific session scenarios."""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable, List, Sequence, Tuple

from playwright.async_api import Page

from scraper_core.config import HotelSearch, PageCapture, ProductSearch, format_date
from scraper_core.models import ExtractionSpec, FieldSpec, Locator, Record, Step, StepPolicy
from scraper_core.reporter import format_hotel_table, format_page_capture, format_product_listing
from .playwright_common import capture_page_source, extract_records

Extractor = Callable[[Page], Awaitable[List[Record]]]
Reporter = Callable[[Sequence[Record]], str]


@dataclass(frozen=True)
class Scenario:
    """Everything a session run needs to know about one target site."""

    name: str
    url: str
    steps: Tuple[Step, ...]
    extract: Extractor
    report: Reporter


def _build_extractor(spec: ExtractionSpec) -> Extractor:
    async def extractor(page: Page) -> List[Record]:
        return await extract_records(page, spec)

    return extractor


PRODUCT_RESULTS = Locator.by_attribute("data-component-type", "s-search-result")

PRODUCT_EXTRACTION_FIELDS = (
    FieldSpec("title", "h2"),
    FieldSpec("price", ".a-price .a-offscreen"),
    FieldSpec("rating", ".a-icon-star-small"),
)

PROPERTY_CARD = Locator.by_attribute("data-testid", "property-card")

HOTEL_EXTRACTION = ExtractionSpec(
    container=PROPERTY_CARD,
    fields=(
        FieldSpec("name", '[data-testid="title"]'),
        FieldSpec("price", '[data-testid="price-and-discounted-price"]'),
        FieldSpec("rating", '[data-testid="review-score"]'),
    ),
)

POPUP_TIMEOUT = 25.0
RESULTS_TIMEOUT = 30.0


def build_page_capture_scenario(target: PageCapture) -> Scenario:
    """Screenshot a page and dump its rendered source."""

    return Scenario(
        name="page-capture",
        url=target.url,
        steps=(
            Step(
                "screenshot",
                value=str(target.screenshot_path),
                description="take a screenshot of the page",
            ),
        ),
        extract=capture_page_source,
        report=format_page_capture,
    )


def build_product_search_scenario(search: ProductSearch) -> Scenario:
    """Search the shop and list the first few results."""

    extraction = ExtractionSpec(
        container=PRODUCT_RESULTS,
        fields=PRODUCT_EXTRACTION_FIELDS,
        limit=search.max_results,
    )
    return Scenario(
        name="product-search",
        url=search.url,
        steps=(
            Step(
                "fill",
                Locator.by_id("twotabsearchtextbox"),
                value=search.search_term,
                description="enter search term",
            ),
            Step(
                "click",
                Locator.by_id("nav-search-submit-button"),
                description="submit search",
            ),
            Step("wait", PRODUCT_RESULTS, description="wait for results"),
        ),
        extract=_build_extractor(extraction),
        report=partial(format_product_listing, search.search_term),
    )


def build_hotel_search_scenario(search: HotelSearch) -> Scenario:
    """Fill the hotel search form for the configured stay and list every property."""

    check_in = format_date(search.check_in)
    check_out = format_date(search.check_out)
    return Scenario(
        name="hotel-search",
        url=search.url,
        steps=(
            Step(
                "click",
                Locator.by_attribute("aria-label", "Dismiss sign-in info."),
                timeout=POPUP_TIMEOUT,
                policy=StepPolicy.BEST_EFFORT,
                description="dismiss sign-in popup",
            ),
            Step(
                "fill",
                Locator.by_css('[data-testid="destination-container"] input'),
                value=search.location,
                description="enter search location",
            ),
            Step(
                "click",
                Locator.by_attribute("data-testid", "searchbox-dates-container"),
                description="open date picker",
            ),
            Step(
                "wait",
                Locator.by_attribute("data-testid", "searchbox-datepicker-calendar"),
                description="wait for calendar",
            ),
            Step(
                "click",
                Locator.by_attribute("data-date", check_in),
                description="select check-in date",
            ),
            Step(
                "click",
                Locator.by_attribute("data-date", check_out),
                description="select check-out date",
            ),
            Step(
                "click",
                Locator.by_css('button[type="submit"]'),
                description="submit search",
            ),
            Step(
                "wait",
                PROPERTY_CARD,
                timeout=RESULTS_TIMEOUT,
                description="wait for search results",
            ),
        ),
        extract=_build_extractor(HOTEL_EXTRACTION),
        report=format_hotel_table,
    )


__all__ = [
    "Extractor",
    "Reporter",
    "Scenario",
    "build_hotel_search_scenario",
    "build_page_capture_scenario",
    "build_product_search_scenario",
]
