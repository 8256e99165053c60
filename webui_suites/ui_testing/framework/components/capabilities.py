"""
Capabilities shared by typed widgets.

``Locatable`` owns a WebComponent and forwards the cross-cutting operations
to it, so every widget gets the same resilience policy by delegation.
``Clickable``, ``Typeable`` and ``Readable`` describe what a widget can do;
each widget implements the ones that make sense for it.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Union, runtime_checkable

from playwright.async_api import Locator

from ..interaction_driver import InteractionDriver
from ..selector_type import SelectorType
from .web_component import WebComponent


@runtime_checkable
class Clickable(Protocol):
    async def click(self) -> None: ...


@runtime_checkable
class Typeable(Protocol):
    async def slow_type(self, text: str) -> None: ...

    async def fast_type(self, text: str) -> None: ...

    async def script_type(self, text: str) -> None: ...


@runtime_checkable
class Readable(Protocol):
    async def get_text(self) -> str: ...

    async def get_attribute(self, attribute_name: str) -> Optional[str]: ...


class Locatable:
    """
    Holds the (driver, selector type, locator) recipe for one element.

    The driver is always passed in explicitly; widgets never look up a
    page on their own.
    """

    def __init__(self, driver: InteractionDriver, selector_type: SelectorType, locator: str):
        self.component = WebComponent(driver, selector_type, locator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.selector_type.name}, {self.locator!r})"

    @property
    def driver(self) -> InteractionDriver:
        return self.component.driver

    @property
    def selector_type(self) -> SelectorType:
        return self.component.selector_type

    @property
    def locator(self) -> str:
        return self.component.locator

    async def hover(self) -> None:
        await self.component.hover()

    async def get_attribute(self, attribute_name: str) -> Optional[str]:
        return await self.component.get_attribute(attribute_name)

    async def find_multiple_elements(self) -> List[Locator]:
        return await self.component.find_multiple_elements()

    async def find_element_or_fail(self) -> Union[Locator, List[Locator]]:
        return await self.component.find_element_or_fail()

    async def is_available_and_displayed(self, timeout: Optional[float] = None) -> bool:
        return await self.component.is_available_and_displayed(timeout)

    async def wait_until_element_visible(self, timeout: Optional[float] = None) -> bool:
        return await self.component.wait_until_element_visible(timeout)


__all__ = [
    "Clickable",
    "Typeable",
    "Readable",
    "Locatable",
]
