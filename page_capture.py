"""Screenshot a page through the remote scraping browser and print its source."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from scraper_core import PageCapture, RunResult, create_session_config, load_environment, run_session
from scraper_core.sources import build_page_capture_scenario

logging.basicConfig(level=logging.INFO)
LOGGER = logging.getLogger(__name__)

PAGE_URL: Final[str] = "https://example.com"
SCREENSHOT_PATH: Final[Path] = Path("page.png")


def run() -> RunResult:
    load_environment()
    config = create_session_config()
    target = PageCapture(url=PAGE_URL, screenshot_path=SCREENSHOT_PATH)
    LOGGER.info("Starting the scraping process for %s", target.url)
    return run_session(build_page_capture_scenario(target), config)


def main() -> None:
    run()


if __name__ == "__main__":
    main()
