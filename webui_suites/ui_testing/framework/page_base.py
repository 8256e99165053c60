"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation to the page URL (or any URL)
    - History navigation and current URL access
    - Typed widget factories bound to the page's interaction driver

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from webui_tools.common import get_config

from .components import Button, CheckBox, TextInput, TextView
from .interaction_driver import InteractionDriver
from .selector_type import SelectorType


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class SearchPage(BasePage):
            async def search(self, query: str):
                await self.text_input(SelectorType.PLACEHOLDER, "Search").slow_type(query)
                await self.button(SelectorType.TEXT, "Go").click()
    """

    # Override in subclasses; empty means the configured base URL
    URL: str = ""

    def __init__(self, driver: InteractionDriver):
        """
        Initialize page object.

        Args:
            driver: Interaction driver for the page
        """
        self.driver = driver

    @property
    def page(self) -> Page:
        return self.driver.page

    @property
    def url(self) -> str:
        return self.URL or get_config("browser.base_url", "")

    async def go_to(self, url: Optional[str] = None) -> None:
        """
        Navigate to ``url`` or to this page's URL.

        Navigation failures are logged, not raised; the next interaction
        reports what is missing on the page.
        """
        target = url or self.url
        with allure.step(f"Navigate to {target}"):
            try:
                await self.driver.navigate(target)
            except Exception as e:
                logger.error(f"Navigation to {target} failed: {e}")

    async def navigate_back(self) -> None:
        await self.driver.navigate_back()

    async def current_url(self) -> str:
        return await self.driver.get_current_url()

    # =========================================================================
    # Widget Factories
    # =========================================================================

    def button(self, selector_type: SelectorType, locator: str) -> Button:
        return Button(self.driver, selector_type, locator)

    def checkbox(self, selector_type: SelectorType, locator: str) -> CheckBox:
        return CheckBox(self.driver, selector_type, locator)

    def text_input(self, selector_type: SelectorType, locator: str) -> TextInput:
        return TextInput(self.driver, selector_type, locator)

    def text_view(self, selector_type: SelectorType, locator: str) -> TextView:
        return TextView(self.driver, selector_type, locator)


__all__ = [
    "BasePage",
]
