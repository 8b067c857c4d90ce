"""
================================================================================
Locator Registry
================================================================================

Declarative element locators for page objects.

Each page object declares its elements once, at class level, as a
LocatorRegistry of SelectorRef values. Selectors are resolved against the
live page on every access, so no page object ever holds a stale element
handle across re-renders or navigation.

    - SelectorRef: immutable (name, selector, fallbacks) triple
    - LocatorRegistry: name -> SelectorRef mapping with lazy resolution

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from loguru import logger
from playwright.async_api import Locator, Page


class UnknownElementError(KeyError):
    """Raised when a page object asks for an element it never declared."""
    pass


@dataclass(frozen=True)
class SelectorRef:
    """
    Named selector expression scoped to one page object.

    Attributes:
        name: Semantic element name (e.g. "email_input")
        selector: Primary Playwright selector
        fallbacks: Alternative selectors unioned with the primary one
    """
    name: str
    selector: str
    fallbacks: Tuple[str, ...] = ()

    def resolve(self, page: Page) -> Locator:
        """
        Build a fresh Locator for this reference.

        Fallbacks are combined with ``Locator.or_`` so the driver matches
        whichever strategy the current markup satisfies.
        """
        locator = page.locator(self.selector)
        for fallback in self.fallbacks:
            locator = locator.or_(page.locator(fallback))
        return locator

    @property
    def selectors(self) -> Tuple[str, ...]:
        return (self.selector, *self.fallbacks)


class LocatorRegistry:
    """
    Immutable mapping of element names to SelectorRefs.

    Usage:
        >>> LOCATORS = LocatorRegistry(
        ...     SelectorRef("email_input", "#email"),
        ...     SelectorRef("sign_in_button", "#send2", ("button.action.login",)),
        ... )
        >>> LOCATORS.resolve(page, "email_input").fill("john@example.com")
    """

    def __init__(self, *refs: SelectorRef):
        entries: Dict[str, SelectorRef] = {}
        for ref in refs:
            if ref.name in entries:
                raise ValueError(f"Duplicate element name in registry: {ref.name}")
            entries[ref.name] = ref
        self._refs = entries

    def __contains__(self, name: object) -> bool:
        return name in self._refs

    def __iter__(self) -> Iterator[SelectorRef]:
        return iter(self._refs.values())

    def __len__(self) -> int:
        return len(self._refs)

    def get(self, name: str) -> SelectorRef:
        """
        Look up a declared reference.

        Raises:
            UnknownElementError: When the name was not declared
        """
        try:
            return self._refs[name]
        except KeyError:
            raise UnknownElementError(
                f"Element '{name}' is not declared. "
                f"Known elements: {', '.join(sorted(self._refs))}"
            ) from None

    def resolve(self, page: Page, name: str) -> Locator:
        """Resolve a declared element against the live page."""
        ref = self.get(name)
        logger.trace(f"Resolving '{name}' -> {' | '.join(ref.selectors)}")
        return ref.resolve(page)


__all__ = [
    "LocatorRegistry",
    "SelectorRef",
    "UnknownElementError",
]
