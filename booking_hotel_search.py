"""Search hotels through the remote scraping browser and print them as a table."""
from __future__ import annotations

import logging
from typing import Final

from scraper_core import RunResult, create_hotel_search, create_session_config, load_environment, run_session
from scraper_core.sources import build_hotel_search_scenario

logging.basicConfig(level=logging.INFO)
LOGGER = logging.getLogger(__name__)

BOOKING_URL: Final[str] = "https://www.booking.com/"
SEARCH_LOCATION: Final[str] = "New York"
CHECK_IN_DAYS_FROM_NOW: Final[int] = 1
CHECK_OUT_DAYS_FROM_NOW: Final[int] = 2


def run() -> RunResult:
    load_environment()
    config = create_session_config()
    search = create_hotel_search(
        SEARCH_LOCATION,
        check_in_days=CHECK_IN_DAYS_FROM_NOW,
        check_out_days=CHECK_OUT_DAYS_FROM_NOW,
        url=BOOKING_URL,
    )
    LOGGER.info("Searching for hotels in: %s", search.location)
    LOGGER.info("Check-in date: %s", search.check_in.isoformat())
    LOGGER.info("Check-out date: %s", search.check_out.isoformat())
    return run_session(build_hotel_search_scenario(search), config)


def main() -> None:
    run()


if __name__ == "__main__":
    main()
