"""Reusable Playwright helpers shared by the session scenarios."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from scraper_core.exceptions import ElementNotFoundError, ExtractionError
from scraper_core.models import NOT_FOUND, ExtractionSpec, FieldSpec, Locator, Record, Step

LOGGER = logging.getLogger(__name__)


def _to_ms(seconds: float) -> float:
    return seconds * 1000


async def locate(page: Page, locator: Locator, timeout: float) -> Any:
    """Wait until the element is attached to the document and return its handle."""

    selector = locator.to_selector()
    try:
        element = await page.wait_for_selector(
            selector, state="attached", timeout=_to_ms(timeout)
        )
    except PlaywrightTimeoutError as exc:
        raise ElementNotFoundError(selector, timeout) from exc
    if element is None:
        raise ElementNotFoundError(selector, timeout)
    return element


async def perform_step(page: Page, step: Step, default_timeout: float) -> bool:
    """Run a single interaction step.

    Returns ``False`` when a best-effort step was skipped because its element
    never appeared or the action on it failed. For required steps every
    failure propagates. The step timeout bounds both the wait and the action.
    """

    if step.action == "screenshot":
        path = Path(step.value or "")
        await page.screenshot(path=str(path))
        LOGGER.info("Screenshot saved as '%s'", path)
        return True

    locator = step.locator
    if locator is None:
        raise ValueError(f"{step.action!r} steps need a locator")
    timeout = step.timeout if step.timeout is not None else default_timeout
    try:
        element = await locate(page, locator, timeout)
        if step.action == "fill":
            await element.fill(step.value or "", timeout=_to_ms(timeout))
        elif step.action == "click":
            await element.click(timeout=_to_ms(timeout))
    except (ElementNotFoundError, PlaywrightError) as exc:
        if not step.best_effort:
            raise
        LOGGER.info("Skipping optional step %s: %s", step.description or step.action, exc)
        return False
    return True


async def read_field(handle: Any, field: FieldSpec) -> str:
    """Return the text or attribute for ``field`` or the not-found placeholder."""

    element = await handle.query_selector(field.selector)
    if element is None:
        return NOT_FOUND
    if field.attribute:
        value: Optional[str] = await element.get_attribute(field.attribute)
    else:
        value = await element.inner_text()
    if not value:
        return NOT_FOUND
    stripped = value.strip()
    return stripped or NOT_FOUND


async def extract_records(page: Page, spec: ExtractionSpec) -> List[Record]:
    """Interpret an extraction spec against the current document."""

    try:
        containers = await page.query_selector_all(spec.container.to_selector())
        if spec.limit is not None:
            containers = containers[: spec.limit]
        records: List[Record] = []
        for container in containers:
            record: Record = {}
            for field in spec.fields:
                record[field.name] = await read_field(container, field)
            records.append(record)
    except PlaywrightError as exc:
        raise ExtractionError(f"Extraction failed: {exc}") from exc
    return records


async def capture_page_source(page: Page) -> List[Record]:
    """Return the rendered document as a single record."""

    try:
        html = await page.content()
        title = await page.title()
    except PlaywrightError as exc:
        raise ExtractionError(f"Could not read page content: {exc}") from exc
    return [
        {
            "url": page.url or NOT_FOUND,
            "title": title.strip() or NOT_FOUND,
            "html": html or NOT_FOUND,
        }
    ]
