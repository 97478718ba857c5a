"""Scripted remote-browser session runner."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Callable, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from .config import SessionConfig
from .exceptions import BrowserConnectionError, NavigationError
from .models import Record
from .sources.playwright_common import perform_step
from .sources.sites import Scenario

LOGGER = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    NAVIGATING = "navigating"
    READY = "ready"
    INTERACTING = "interacting"
    EXTRACTING = "extracting"
    REPORTING = "reporting"
    CLOSING = "closing"
    CLOSED = "closed"


_TRANSITIONS = {
    SessionState.IDLE: {SessionState.CONNECTING},
    SessionState.CONNECTING: {SessionState.CONNECTED},
    SessionState.CONNECTED: {SessionState.NAVIGATING},
    SessionState.NAVIGATING: {SessionState.READY},
    SessionState.READY: {SessionState.INTERACTING, SessionState.EXTRACTING},
    SessionState.INTERACTING: {SessionState.INTERACTING, SessionState.EXTRACTING},
    SessionState.EXTRACTING: {SessionState.REPORTING},
    SessionState.REPORTING: {SessionState.CLOSING},
    SessionState.CLOSING: {SessionState.CLOSED},
    SessionState.CLOSED: set(),
}


@dataclass
class RunResult:
    """Outcome of one :class:`SessionRunner` run."""

    scenario: str
    state: SessionState
    history: List[SessionState]
    records: List[Record] = field(default_factory=list)
    report: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, object]:
        return {
            "scenario": self.scenario,
            "state": self.state.value,
            "history": [state.value for state in self.history],
            "records": [dict(record) for record in self.records],
            "report": self.report,
            "error": str(self.error) if self.error else None,
        }


class SessionRunner:
    """Drive one scenario through a single remote browser session.

    The runner is single-use: the browser handle it acquires is released on
    every exit path and is never shared with another run.
    """

    def __init__(
        self,
        scenario: Scenario,
        config: SessionConfig,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.scenario = scenario
        self.config = config
        self.echo = echo
        self.state = SessionState.IDLE
        self.history: List[SessionState] = [SessionState.IDLE]
        self._browser: Any = None

    def _transition(self, new_state: SessionState) -> None:
        allowed = _TRANSITIONS[self.state]
        if self.state is not SessionState.CLOSED and new_state is SessionState.CLOSING:
            allowed = allowed | {SessionState.CLOSING}
        if new_state not in allowed:
            raise RuntimeError(f"Invalid session transition {self.state.value} -> {new_state.value}")
        self.state = new_state
        self.history.append(new_state)

    async def run(self) -> RunResult:
        """Run every stage, log any failure once and always release the browser."""

        if self.state is not SessionState.IDLE:
            raise RuntimeError("Session runners cannot be reused")

        LOGGER.info("Starting %s session for %s", self.scenario.name, self.scenario.url)
        records: List[Record] = []
        report: Optional[str] = None
        error: Optional[Exception] = None
        try:
            async with async_playwright() as playwright:
                try:
                    page = await self._acquire(playwright)
                    await self._navigate(page)
                    await self._interact(page)
                    records = await self._extract(page)
                    report = self._report(records)
                finally:
                    self._transition(SessionState.CLOSING)
                    await self._release()
        except Exception as exc:
            LOGGER.exception("Error occurred: %s", exc)
            error = exc
            records = []
            report = None
        finally:
            if self.state is not SessionState.CLOSING:
                self._transition(SessionState.CLOSING)
            self._transition(SessionState.CLOSED)

        return RunResult(
            scenario=self.scenario.name,
            state=self.state,
            history=list(self.history),
            records=records,
            report=report,
            error=error,
        )

    async def _acquire(self, playwright: Any) -> Page:
        self._transition(SessionState.CONNECTING)
        LOGGER.info(
            "Connecting to %s browser at %s",
            self.config.browser,
            self.config.to_dict()["endpoint"],
        )
        launcher = getattr(playwright, self.config.browser)
        try:
            browser = await launcher.connect_over_cdp(self.config.endpoint)
        except Exception as exc:
            raise BrowserConnectionError(f"Could not connect to the remote browser: {exc}") from exc
        self._browser = browser

        try:
            page = await browser.new_page()
        except PlaywrightError as exc:
            raise BrowserConnectionError(f"Could not open a page on the remote browser: {exc}") from exc
        self._transition(SessionState.CONNECTED)
        LOGGER.info("Connected to browser")
        return page

    async def _navigate(self, page: Page) -> None:
        self._transition(SessionState.NAVIGATING)
        LOGGER.info("Opening %s", self.scenario.url)
        try:
            await page.goto(self.scenario.url, timeout=self.config.navigation_timeout * 1000)
        except PlaywrightError as exc:
            raise NavigationError(f"Could not load {self.scenario.url}: {exc}") from exc
        self._transition(SessionState.READY)
        LOGGER.info("Page loaded")

    async def _interact(self, page: Page) -> None:
        for step in self.scenario.steps:
            self._transition(SessionState.INTERACTING)
            LOGGER.info("Step: %s", step.description or step.action)
            await perform_step(page, step, self.config.timeout)

    async def _extract(self, page: Page) -> List[Record]:
        self._transition(SessionState.EXTRACTING)
        LOGGER.info("Extracting data")
        return await self.scenario.extract(page)

    def _report(self, records: List[Record]) -> str:
        self._transition(SessionState.REPORTING)
        report = self.scenario.report(records)
        self.echo(report)
        return report

    async def _release(self) -> None:
        if self._browser is None:
            return
        browser, self._browser = self._browser, None
        LOGGER.info("Closing browser")
        await browser.close()
        LOGGER.info("Browser closed")


def run_session(
    scenario: Scenario,
    config: SessionConfig,
    echo: Callable[[str], None] = print,
) -> RunResult:
    """Run a scenario from synchronous code."""

    async def runner() -> RunResult:
        return await SessionRunner(scenario, config, echo=echo).run()

    return asyncio.run(runner())
