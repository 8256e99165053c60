"""
================================================================================
Search Page Object (Async / Playwright)
================================================================================

Home page search flow: type a query like a user would, submit it, open the
matching result and scroll through it.

NOTE:
  Locators target the public demo site configured under browser.base_url.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from webui_suites.ui_testing.framework.page_base import BasePage
from webui_suites.ui_testing.framework.selector_type import SelectorType


class SearchPage(BasePage):
    """Home page with a site search box (async)."""

    SEARCH_INPUT = (SelectorType.CSS, '[aria-label="Search"]')
    RESULT_LINK = (
        SelectorType.CSS,
        'a[href*="blog/system-integration-testing-a-complete-guide"]',
    )

    @allure.step("Open home page")
    async def navigate_to_home_page(self) -> "SearchPage":
        await self.go_to()
        return self

    @allure.step("Search for: {query}")
    async def search(self, query: str) -> None:
        """Slow-type ``query`` into the search box and submit with Enter."""
        await self.text_input(*self.SEARCH_INPUT).slow_type(query)
        await self.driver.press_key("Enter")

    @allure.step("Open search result")
    async def open_result(self) -> None:
        """Wait for the result link, then click it."""
        link = self.button(*self.RESULT_LINK)
        await self.driver.dynamic_wait_for_element(*self.RESULT_LINK, wait_time=10000, interval=500)
        await link.click()

    @allure.step("Scroll through result ({pages} pages)")
    async def browse_result(self, pages: int = 5, pause_ms: int = 3000) -> None:
        for _ in range(pages):
            await self.driver.scroll_page(0, 100)
            await self.driver.delay(pause_ms)

    async def verify_user_able_to_search(self, query: str) -> str:
        """
        Full search flow.

        Returns:
            URL of the opened result
        """
        await self.search(query)
        await self.open_result()
        await self.browse_result()
        url = await self.current_url()
        logger.info(f"Search result opened: {url}")
        return url
