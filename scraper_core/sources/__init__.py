"""Site scenarios and the Playwright helpers they are built from."""
from .sites import (
    Scenario,
    build_hotel_search_scenario,
    build_page_capture_scenario,
    build_product_search_scenario,
)

__all__ = [
    "Scenario",
    "build_hotel_search_scenario",
    "build_page_capture_scenario",
    "build_product_search_scenario",
]
