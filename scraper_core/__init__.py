"""Scripted remote-browser sessions with declarative extraction."""
from .config import (
    HotelSearch,
    PageCapture,
    ProductSearch,
    SessionConfig,
    create_hotel_search,
    create_session_config,
    load_environment,
)
from .runner import RunResult, SessionRunner, SessionState, run_session

__all__ = [
    "HotelSearch",
    "PageCapture",
    "ProductSearch",
    "RunResult",
    "SessionConfig",
    "SessionRunner",
    "SessionState",
    "create_hotel_search",
    "create_session_config",
    "load_environment",
    "run_session",
]
