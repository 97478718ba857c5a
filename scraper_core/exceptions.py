"""Error types raised while driving a remote browser session."""
from __future__ import annotations

from typing import Optional


class SessionError(Exception):
    """Base class for failures of a scripted browser session."""


class BrowserConnectionError(SessionError, ConnectionError):
    """The remote browser endpoint was unreachable or rejected the credentials."""


class NavigationError(SessionError):
    """Loading the target address failed."""


class ElementNotFoundError(SessionError):
    """A locate step timed out before its element appeared."""

    def __init__(self, selector: str, timeout: Optional[float] = None) -> None:
        self.selector = selector
        self.timeout = timeout
        if timeout is None:
            message = f"Element not found: {selector}"
        else:
            message = f"Element not found within {timeout:g}s: {selector}"
        super().__init__(message)


class ExtractionError(SessionError):
    """The in-page query over the rendered document failed."""


__all__ = [
    "BrowserConnectionError",
    "ElementNotFoundError",
    "ExtractionError",
    "NavigationError",
    "SessionError",
]
