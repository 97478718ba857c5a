"""Configuration helpers for the remote browser sessions."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

ENDPOINT_ENV_VAR = "BRIGHT_DATA_SCRAPING_BROWSER_ENDPOINT"
PLACEHOLDER_ENDPOINT = "YOUR_BRIGHT_DATA_SCRAPING_BROWSER_ENDPOINT"

SUPPORTED_BROWSERS = ("chromium",)


@dataclass(frozen=True)
class SessionConfig:
    """Remote endpoint and timeouts used by one session run.

    Sessions attach over the Chrome DevTools Protocol, so ``chromium`` is the
    only engine the Scraping Browser serves.
    """

    endpoint: str
    browser: str = "chromium"
    timeout: float = 10.0
    navigation_timeout: float = 120.0

    def __post_init__(self) -> None:
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser engine: {self.browser}")

    @property
    def uses_placeholder(self) -> bool:
        return self.endpoint == PLACEHOLDER_ENDPOINT

    def to_dict(self) -> dict:
        """Return a printable version with the credentials masked."""

        return {
            "endpoint": _mask_credentials(self.endpoint),
            "browser": self.browser,
            "timeout": self.timeout,
            "navigation_timeout": self.navigation_timeout,
        }


@dataclass(frozen=True)
class PageCapture:
    """Target of the plain page capture run."""

    url: str = "https://example.com"
    screenshot_path: Path = Path("page.png")


@dataclass(frozen=True)
class ProductSearch:
    """Search term and bounds for the product search run."""

    search_term: str = "laptop"
    url: str = "https://www.amazon.com"
    max_results: int = 5


@dataclass(frozen=True)
class HotelSearch:
    """Location and absolute stay dates for the hotel search run."""

    location: str
    check_in: date
    check_out: date
    url: str = "https://www.booking.com/"

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be after the check-in date")


def _mask_credentials(endpoint: str) -> str:
    if "@" not in endpoint:
        return endpoint
    scheme, sep, rest = endpoint.partition("://")
    if not sep:
        scheme, rest = "", endpoint
    host = rest.rsplit("@", 1)[1]
    return f"{scheme}://***@{host}" if scheme else f"***@{host}"


def load_environment() -> None:
    """Load variables from a ``.env`` file without overriding the real environment."""

    load_dotenv(find_dotenv(usecwd=True))


def create_session_config(
    environ: Optional[Mapping[str, str]] = None, browser: str = "chromium"
) -> SessionConfig:
    """Build the session configuration from the environment.

    The endpoint must be the Scraping Browser CDP websocket URL, e.g.
    ``wss://brd-customer-<id>-zone-<zone>:<password>@brd.superproxy.io:9222``.
    The Selenium WebDriver URL (``https://...:9515``) does not accept CDP
    connections.

    A missing endpoint is replaced by a placeholder so that the failure
    surfaces when the session connects rather than at startup.
    """

    source = os.environ if environ is None else environ
    endpoint = (source.get(ENDPOINT_ENV_VAR) or "").strip() or PLACEHOLDER_ENDPOINT
    return SessionConfig(endpoint=endpoint, browser=browser)


def add_days(value: datetime, days: int) -> date:
    return (value + timedelta(days=days)).date()


def format_date(value: date) -> str:
    """Format a date the way the booking date picker addresses its cells."""

    return value.isoformat()


def create_hotel_search(
    location: str,
    check_in_days: int = 1,
    check_out_days: int = 2,
    now: Optional[datetime] = None,
    url: str = "https://www.booking.com/",
) -> HotelSearch:
    """Resolve relative stay offsets into absolute dates once, at startup."""

    current = now or datetime.now(timezone.utc)
    return HotelSearch(
        location=location,
        check_in=add_days(current, check_in_days),
        check_out=add_days(current, check_out_days),
        url=url,
    )
