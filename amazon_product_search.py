"""Search the shop through the remote scraping browser and list the top products."""
from __future__ import annotations

import logging
from typing import Final

from scraper_core import ProductSearch, RunResult, create_session_config, load_environment, run_session
from scraper_core.sources import build_product_search_scenario

logging.basicConfig(level=logging.INFO)
LOGGER = logging.getLogger(__name__)

AMAZON_URL: Final[str] = "https://www.amazon.com"
SEARCH_TERM: Final[str] = "laptop"
MAX_RESULTS: Final[int] = 5


def run() -> RunResult:
    load_environment()
    config = create_session_config()
    search = ProductSearch(search_term=SEARCH_TERM, url=AMAZON_URL, max_results=MAX_RESULTS)
    LOGGER.info("Searching for: %s", search.search_term)
    return run_session(build_product_search_scenario(search), config)


def main() -> None:
    run()


if __name__ == "__main__":
    main()
