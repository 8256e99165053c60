"""
================================================================================
Web Component
================================================================================

A reusable handle to "the same logical element" across the life of a test.

A WebComponent stores only the recipe for finding its element (selector type,
locator, driver) and re-resolves it on every call. On top of the driver's
primitives it layers the resilience policy:

    - click: native click, falling back once to a script click
    - is_available_and_displayed: answers yes/no, never raises
    - wait_until_element_visible: readiness poll with a component-scoped error

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator

from ..errors import ConfigurationError, ElementNotReadyError, rewrap
from ..interaction_driver import InteractionDriver
from ..selector_type import SelectorType


class WebComponent:
    """
    Resilience wrapper around one (selector type, locator) pair.

    Usage:
        >>> submit = WebComponent(driver, SelectorType.TEXT, "Submit")
        >>> await submit.click()
        >>> await submit.is_available_and_displayed()
        True
    """

    def __init__(self, driver: InteractionDriver, selector_type: SelectorType, locator: str):
        """
        Args:
            driver: Interaction driver for the page the element lives on
            selector_type: Strategy to interpret the locator with
            locator: Locator string
        """
        if not isinstance(selector_type, SelectorType):
            raise ConfigurationError(f"Unsupported selector type: {selector_type!r}", None, locator)
        self.driver = driver
        self.selector_type = selector_type
        self.locator = locator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.selector_type.name}, {self.locator!r})"

    @property
    def description(self) -> str:
        return f"{self.selector_type.name} : {self.locator}"

    async def click(self) -> None:
        """
        Scroll into view and click natively; on any failure click via script.

        The script click does not repeat the readiness poll. If it fails too,
        its error propagates.
        """
        with allure.step(f"Click: {self.description}"):
            try:
                await self.driver.scroll_into_view(self.selector_type, self.locator)
                await self.driver.click(self.selector_type, self.locator)
            except ConfigurationError:
                raise
            except Exception as e:
                logger.error(
                    f"Native click failed for {self.description}, "
                    f"falling back to script click: {e}"
                )
                await self.driver.click_via_script(
                    self.selector_type, self.locator, wait_until_ready=False
                )

    async def find_multiple_elements(self) -> List[Locator]:
        """Return every element currently matching the locator."""
        try:
            return await self.driver.find_by_selector_type(
                self.selector_type, self.locator, multiple=True
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise rewrap(e, "Unable to find multiple elements", self.selector_type, self.locator) from e

    async def find_element_or_fail(self) -> Union[Locator, List[Locator]]:
        """Resolve the element, logging and re-raising when it cannot be found."""
        try:
            return await self.driver.find_by_selector_type(self.selector_type, self.locator)
        except Exception as e:
            logger.error(f"Error finding element {self.description}: {e}")
            raise

    async def get_attribute(self, attribute_name: str) -> Optional[str]:
        try:
            return await self.driver.get_attribute_value(
                self.selector_type, self.locator, attribute_name
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise rewrap(
                e, f"Unable to get attribute {attribute_name}", self.selector_type, self.locator
            ) from e

    async def hover(self) -> None:
        await self.driver.hover(self.selector_type, self.locator)

    async def is_available_and_displayed(self, timeout: Optional[float] = None) -> bool:
        """
        Whether the element becomes ready and is displayed.

        Any failure, including never becoming visible, yields False.
        """
        try:
            return await self.driver.is_element_visible(self.selector_type, self.locator, timeout)
        except Exception as e:
            logger.debug(f"{self.description} is not available: {e}")
            return False

    async def wait_until_element_visible(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until the element is visible and enabled.

        Raises:
            ElementNotReadyError: Names this component's selector type and locator
        """
        try:
            return await self.driver.wait_until_element_visible_and_enabled(
                self.selector_type, self.locator, timeout
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise ElementNotReadyError(
                f"Element {self.description} is not visible yet",
                self.selector_type,
                self.locator,
            ) from e


__all__ = ["WebComponent"]
