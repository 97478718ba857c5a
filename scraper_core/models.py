"""Declarative building blocks shared by the session scenarios."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

Record = Dict[str, str]

NOT_FOUND = "N/A"

_STRATEGIES = ("id", "css", "attribute")


@dataclass(frozen=True)
class Locator:
    """Rule identifying one DOM element by id, CSS selector or attribute match."""

    strategy: str
    value: str
    attribute: Optional[str] = None

    def __post_init__(self) -> None:
        if self.strategy not in _STRATEGIES:
            raise ValueError(f"Unsupported locator strategy: {self.strategy}")
        if self.strategy == "attribute" and not self.attribute:
            raise ValueError("Attribute locators need an attribute name")

    @classmethod
    def by_id(cls, element_id: str) -> "Locator":
        return cls("id", element_id)

    @classmethod
    def by_css(cls, selector: str) -> "Locator":
        return cls("css", selector)

    @classmethod
    def by_attribute(cls, attribute: str, value: str) -> "Locator":
        return cls("attribute", value, attribute)

    def to_selector(self) -> str:
        """Render the locator as a CSS selector understood by the page."""

        if self.strategy == "id":
            return f'[id="{self.value}"]'
        if self.strategy == "attribute":
            return f'[{self.attribute}="{self.value}"]'
        return self.value


class StepPolicy(str, Enum):
    """Whether a missing element aborts the run or is skipped."""

    REQUIRED = "required"
    BEST_EFFORT = "best_effort"


_ACTIONS = ("fill", "click", "wait", "screenshot")


@dataclass(frozen=True)
class Step:
    """One page interaction performed between navigation and extraction."""

    action: str
    locator: Optional[Locator] = None
    value: Optional[str] = None
    timeout: Optional[float] = None
    policy: StepPolicy = StepPolicy.REQUIRED
    description: str = ""

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            raise ValueError(f"Unsupported step action: {self.action}")
        if self.action == "screenshot":
            if not self.value:
                raise ValueError("Screenshot steps need a target path")
        elif self.locator is None:
            raise ValueError(f"{self.action!r} steps need a locator")
        if self.action == "fill" and self.value is None:
            raise ValueError("Fill steps need a value")

    @property
    def best_effort(self) -> bool:
        return self.policy is StepPolicy.BEST_EFFORT


@dataclass(frozen=True)
class FieldSpec:
    """Field read from each result container: inner text or an attribute."""

    name: str
    selector: str
    attribute: Optional[str] = None


@dataclass(frozen=True)
class ExtractionSpec:
    """Which containers to read from the rendered page and which fields to pull."""

    container: Locator
    fields: Tuple[FieldSpec, ...]
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit <= 0:
            raise ValueError("Extraction limit must be positive")
        if not self.fields:
            raise ValueError("Extraction spec needs at least one field")
