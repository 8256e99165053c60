"""
================================================================================
Browser Manager
================================================================================

Thin browser launcher for UI automation.

Features:
    - Browser type and headless mode from configuration
    - Per-browser launch presets (maximized Chromium, kiosk Firefox)
    - Pages and interaction drivers on isolated contexts

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from webui_tools.common import get_config, to_bool

from .errors import ConfigurationError
from .interaction_driver import InteractionDriver, InteractionSettings


class BrowserManager:
    """
    Launches one browser and hands out pages and drivers.

    Usage:
        async with BrowserManager() as manager:
            driver = await manager.new_driver()
            await driver.navigate("https://example.com")

        # Explicit browser, visible window
        async with BrowserManager(browser_type="firefox", headless=False) as manager:
            page = await manager.new_page()
    """

    # Launch arguments per supported browser
    LAUNCH_ARGS: Dict[str, List[str]] = {
        "chromium": ["--start-maximized"],
        "firefox": ["--kiosk"],
        "webkit": [],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "no_viewport": True,
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
    ):
        """
        Initialize browser manager.

        Args:
            browser_type: 'chromium', 'firefox' or 'webkit'. Defaults to browser.name
            headless: Run without a window. Defaults to browser.headless
        """
        if browser_type is None:
            browser_type = get_config("browser.name", "")
        if headless is None:
            headless = to_bool(get_config("browser.headless", True))

        self.browser_type = (browser_type or "").strip().lower()
        self.headless = headless

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _launch_args(self) -> List[str]:
        if self.browser_type not in self.LAUNCH_ARGS:
            message = "User has not selected any browser to run automation tests upon!"
            logger.error(f"{message} (browser.name={self.browser_type!r})")
            raise ConfigurationError(message)
        return self.LAUNCH_ARGS[self.browser_type]

    async def start(self) -> None:
        """Validate the browser selection, start Playwright and launch the browser."""
        args = self._launch_args()
        logger.info(
            f"Creating driver from given browser: {self.browser_type} "
            f"with headless mode: {self.headless}"
        )

        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        try:
            self._browser = await launcher.launch(headless=self.headless, args=args)
        except Exception as e:
            logger.error(f"Error creating {self.browser_type} browser: {e}")
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(f"Browser started: {self.browser_type} (headless={self.headless})")

    async def close(self) -> None:
        """Close all contexts and the browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create a new isolated browser context.

        Args:
            **options: Overrides for DEFAULT_CONTEXT_OPTIONS
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**{**self.DEFAULT_CONTEXT_OPTIONS, **options})
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create a page in ``context``, or in a fresh context when omitted."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    async def new_driver(
        self,
        settings: Optional[InteractionSettings] = None,
        **context_options: Any,
    ) -> InteractionDriver:
        """Create a page in a fresh context and wrap it in an InteractionDriver."""
        page = await self.new_page(**context_options)
        return InteractionDriver(page, settings=settings)

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
]
