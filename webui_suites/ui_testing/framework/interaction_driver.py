# ================================================================================
# Interaction Driver Module
# ================================================================================
#
# Low-level element interaction over a single Playwright page.
#
# Key Features:
#   - Selector-type dispatch (CSS, XPath, text, label, placeholder, alt text,
#     title, test id)
#   - Readiness polling (visible + enabled) before clicks and typing
#   - Native, scripted and simulated-human typing
#   - Fixed, randomized and dynamically bounded waits
#   - Descriptive errors naming the operation, selector type and locator
#
# Every call re-resolves its element; no element handle outlives the call
# that produced it unless the call returns it explicitly.
#
# ================================================================================

from __future__ import annotations

import asyncio
import random
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from webui_tools.common import get_config

from .errors import (
    ConfigurationError,
    ElementNotFoundError,
    ElementNotReadyError,
    rewrap,
)
from .polling import PollState, poll_until
from .selector_type import SelectorType


CLICK_SCRIPT = "(element) => element.click()"
CLEAR_VALUE_SCRIPT = "(element) => { element.value = ''; }"
SET_VALUE_SCRIPT = "(element, value) => { element.value = value; }"
INNER_TEXT_SCRIPT = "(element) => element.innerText"

# Page method and error wording for each attribute/content strategy.
_ATTRIBUTE_STRATEGIES: Dict[SelectorType, Tuple[str, str]] = {
    SelectorType.TEXT: ("get_by_text", "text"),
    SelectorType.LABEL: ("get_by_label", "label"),
    SelectorType.PLACEHOLDER: ("get_by_placeholder", "placeholder"),
    SelectorType.ALT_TEXT: ("get_by_alt_text", "alt text"),
    SelectorType.TITLE: ("get_by_title", "title"),
    SelectorType.TEST_ID: ("get_by_test_id", "test id"),
}

ElementResult = Union[Locator, List[Locator]]


@dataclass
class InteractionSettings:
    """
    Timing defaults for the interaction driver, all in milliseconds.

    Attributes:
        selector_timeout_ms: How long CSS/XPath resolution waits for a match
        readiness_timeout_ms: How long to wait for visible + enabled
        polling_interval_ms: Pause between readiness checks
        navigation_timeout_ms: Cap for page.goto
        page_load_timeout_ms: Cap for waiting on the document body
        script_settle_ms: Pause between scripted typing steps
        slow_type_lead_in_ms: Pause before simulated typing starts
        click_settle_ms: Pause after a Button click
    """
    selector_timeout_ms: int = 30000
    readiness_timeout_ms: int = 60000
    polling_interval_ms: int = 500
    navigation_timeout_ms: int = 60000
    page_load_timeout_ms: int = 60000
    script_settle_ms: int = 200
    slow_type_lead_in_ms: int = 2000
    click_settle_ms: int = 1000

    @classmethod
    def from_config(cls) -> "InteractionSettings":
        """Build settings from the ``interaction`` configuration section."""
        defaults = cls()
        values = {}
        for name in defaults.__dataclass_fields__:
            raw = get_config(f"interaction.{name}", getattr(defaults, name))
            try:
                values[name] = int(raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid value for interaction.{name}: {raw!r}"
                ) from e
        return cls(**values)


class InteractionDriver:
    """
    Resolves (selector type, locator) pairs on one page and acts on them.

    The driver is not safe to share between concurrently running flows; the
    components that hold it are expected to be used one at a time.

    Example:
        driver = InteractionDriver(page)
        await driver.click(SelectorType.TEXT, "Submit")
        await driver.send_keys(SelectorType.PLACEHOLDER, "Search", "playwright")
    """

    def __init__(
        self,
        page: Page,
        settings: Optional[InteractionSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            page: Playwright Page object
            settings: Timing defaults; read from configuration when omitted
            clock: Monotonic clock in seconds, used for readiness timeouts
        """
        self.page = page
        self.settings = settings or InteractionSettings.from_config()
        self.clock = clock

    @contextmanager
    def _error_boundary(
        self,
        operation: str,
        selector_type: Optional[SelectorType] = None,
        locator: Optional[str] = None,
    ) -> Iterator[None]:
        try:
            yield
        except ConfigurationError:
            raise
        except Exception as e:
            raise rewrap(e, operation, selector_type, locator) from e

    # =========================================================================
    # Selector Dispatch
    # =========================================================================

    @staticmethod
    def _check_selector_type(selector_type: Any) -> SelectorType:
        if not isinstance(selector_type, SelectorType):
            raise ConfigurationError(f"Unsupported selector type: {selector_type!r}")
        return selector_type

    async def find_by_selector_type(
        self,
        selector_type: SelectorType,
        locator: str,
        multiple: bool = False,
        timeout: Optional[float] = None,
    ) -> ElementResult:
        """
        Resolve a locator under the given selector type.

        Args:
            selector_type: Strategy to interpret the locator with
            locator: Locator string
            multiple: Return every match instead of a single locator
            timeout: Override for CSS/XPath resolution, in milliseconds

        Returns:
            A Locator, or a list of Locators when ``multiple`` is set

        Raises:
            ConfigurationError: Unsupported selector type
            ElementNotFoundError: Nothing matched
        """
        selector_type = self._check_selector_type(selector_type)

        if selector_type.is_structural:
            return await self.find_by_selector(
                locator, multiple=multiple, timeout=timeout, selector_type=selector_type
            )

        method_name, criterion = _ATTRIBUTE_STRATEGIES[selector_type]
        return await self._find_by_attribute(
            selector_type, method_name, criterion, locator, multiple
        )

    async def find_by_selector(
        self,
        selector: str,
        multiple: bool = False,
        timeout: Optional[float] = None,
        selector_type: SelectorType = SelectorType.CSS,
    ) -> ElementResult:
        """
        Wait for a CSS/XPath selector to match, then return its locator(s).

        Blocks until a matching node is attached or the timeout elapses.
        """
        # None and 0 both mean the configured default.
        wait_ms = timeout or self.settings.selector_timeout_ms
        try:
            await self.page.wait_for_selector(selector, state="attached", timeout=wait_ms)
            elements = self.page.locator(selector)
            return await elements.all() if multiple else elements
        except Exception as e:
            raise ElementNotFoundError(
                f"Could not load element with given selector: {selector}",
                selector_type,
                selector,
            ) from e

    async def _find_by_attribute(
        self,
        selector_type: SelectorType,
        method_name: str,
        criterion: str,
        value: str,
        multiple: bool,
    ) -> ElementResult:
        try:
            elements = getattr(self.page, method_name)(value)
            return await elements.all() if multiple else elements
        except Exception as e:
            raise ElementNotFoundError(
                f"Could not load element with given {criterion}: {value}",
                selector_type,
                value,
            ) from e

    async def find_by_text(self, text: str, multiple: bool = False) -> ElementResult:
        return await self.find_by_selector_type(SelectorType.TEXT, text, multiple)

    async def find_by_label(self, label: str, multiple: bool = False) -> ElementResult:
        return await self.find_by_selector_type(SelectorType.LABEL, label, multiple)

    async def find_by_placeholder(self, placeholder: str, multiple: bool = False) -> ElementResult:
        return await self.find_by_selector_type(SelectorType.PLACEHOLDER, placeholder, multiple)

    async def find_by_alt_text(self, alt_text: str, multiple: bool = False) -> ElementResult:
        return await self.find_by_selector_type(SelectorType.ALT_TEXT, alt_text, multiple)

    async def find_by_title(self, title: str, multiple: bool = False) -> ElementResult:
        return await self.find_by_selector_type(SelectorType.TITLE, title, multiple)

    async def find_by_test_id(self, test_id: str, multiple: bool = False) -> ElementResult:
        return await self.find_by_selector_type(SelectorType.TEST_ID, test_id, multiple)

    # =========================================================================
    # Waits
    # =========================================================================

    async def delay(self, ms: float = 1000) -> None:
        """Suspend the calling flow for ``ms`` milliseconds."""
        with self._error_boundary("Error delaying execution"):
            await self.page.wait_for_timeout(ms)

    async def random_delay(self, max_delay: int) -> None:
        """Suspend for a random 1..``max_delay`` milliseconds."""
        with self._error_boundary("Error introducing random delay"):
            await self.delay(random.randint(1, max(1, max_delay)))

    async def wait_until_element_visible_and_enabled(
        self,
        selector_type: SelectorType,
        locator: str,
        timeout: Optional[float] = None,
        polling_interval: Optional[float] = None,
    ) -> bool:
        """
        Poll until the element is both visible and enabled.

        Resolution errors during a cycle are logged and polling continues.

        Args:
            selector_type: Strategy to interpret the locator with
            locator: Locator string
            timeout: Total wait in milliseconds (default 60000)
            polling_interval: Pause between checks in milliseconds (default 500)

        Returns:
            True once the element is ready

        Raises:
            ConfigurationError: Unsupported selector type
            ElementNotReadyError: Not visible and enabled within the timeout
        """
        selector_type = self._check_selector_type(selector_type)
        timeout = self.settings.readiness_timeout_ms if timeout is None else timeout
        interval = (
            self.settings.polling_interval_ms if polling_interval is None else polling_interval
        )

        async def is_ready(state: PollState) -> bool:
            # Playwright treats 0 as "no timeout".
            resolve_timeout = max(state.remaining_ms, 1) if selector_type.is_structural else None
            element = await self.find_by_selector_type(
                selector_type, locator, timeout=resolve_timeout
            )
            visible, enabled = await asyncio.gather(
                element.is_visible(), element.is_enabled(timeout=interval)
            )
            return visible and enabled

        ready = await poll_until(
            is_ready,
            timeout_ms=timeout,
            interval_ms=interval,
            delay=self.delay,
            clock=self.clock,
            description=f"{selector_type.name} '{locator}' visible and enabled",
        )
        if not ready:
            raise ElementNotReadyError(
                f"Element not visible and enabled within {timeout} ms",
                selector_type,
                locator,
            )
        return True

    async def is_element_visible(
        self,
        selector_type: SelectorType,
        locator: str,
        timeout: Optional[float] = None,
    ) -> bool:
        """
        Wait for readiness, then report the element's visibility.

        Raises:
            ElementNotReadyError: The element never became ready
        """
        with self._error_boundary("Error checking element visibility", selector_type, locator):
            await self.wait_until_element_visible_and_enabled(selector_type, locator, timeout)
            element = await self.find_by_selector_type(selector_type, locator)
            return await element.is_visible()

    async def _is_currently_visible(
        self,
        selector_type: SelectorType,
        locator: str,
        timeout: float,
    ) -> bool:
        try:
            element = await self.find_by_selector_type(selector_type, locator, timeout=timeout)
            return await element.is_visible()
        except Exception as e:
            logger.debug(f"{selector_type.name} '{locator}' not visible yet: {e}")
            return False

    async def dynamic_wait_for_element(
        self,
        selector_type: SelectorType,
        locator: str,
        wait_time: float,
        interval: float,
    ) -> bool:
        """
        Poll visibility on a caller-provided budget.

        The budget shrinks by ``interval`` on every pause; the wait ends when
        the element is visible or the budget is spent. Running out of budget
        does not raise.

        Returns:
            Whether the element was visible when the wait ended
        """
        selector_type = self._check_selector_type(selector_type)
        return await poll_until(
            lambda state: self._is_currently_visible(selector_type, locator, interval),
            timeout_ms=wait_time,
            interval_ms=interval,
            delay=self.delay,
            clock=None,
            description=f"{selector_type.name} '{locator}' visible",
        )

    async def wait_for_page_load(self, timeout: Optional[float] = None) -> None:
        """Wait until the document body is attached and visible."""
        timeout = self.settings.page_load_timeout_ms if timeout is None else timeout
        with self._error_boundary("Error waiting for page to load"):
            await self.page.wait_for_selector("body", state="attached", timeout=timeout)
            await self.page.wait_for_selector("body", state="visible", timeout=timeout)

    # =========================================================================
    # Element Actions
    # =========================================================================

    @allure.step("Scroll into view: {locator}")
    async def scroll_into_view(self, selector_type: SelectorType, locator: str) -> None:
        with self._error_boundary("Error scrolling element into view", selector_type, locator):
            element = await self.find_by_selector_type(selector_type, locator)
            await element.scroll_into_view_if_needed()

    @allure.step("Click element: {locator}")
    async def click(self, selector_type: SelectorType, locator: str) -> None:
        """Native click once the element is visible and enabled."""
        with self._error_boundary("Error clicking element", selector_type, locator):
            await self.wait_until_element_visible_and_enabled(selector_type, locator)
            element = await self.find_by_selector_type(selector_type, locator)
            await element.click()
            logger.info(f"Clicked {selector_type.name}: {locator}")

    @allure.step("Click element via script: {locator}")
    async def click_via_script(
        self,
        selector_type: SelectorType,
        locator: str,
        wait_until_ready: bool = True,
    ) -> None:
        """
        Dispatch a click from page script, bypassing hit-testing.

        Args:
            selector_type: Strategy to interpret the locator with
            locator: Locator string
            wait_until_ready: Run the readiness poll first
        """
        with self._error_boundary("Error clicking element using script", selector_type, locator):
            if wait_until_ready:
                await self.wait_until_element_visible_and_enabled(selector_type, locator)
            element = await self.find_by_selector_type(selector_type, locator)
            await element.evaluate(CLICK_SCRIPT)
            logger.info(f"Clicked via script {selector_type.name}: {locator}")

    @allure.step("Hover element: {locator}")
    async def hover(self, selector_type: SelectorType, locator: str) -> None:
        with self._error_boundary("Error performing hover action", selector_type, locator):
            element = await self.find_by_selector_type(selector_type, locator)
            await element.hover()

    @allure.step("Send keys: {locator}")
    async def send_keys(
        self,
        selector_type: SelectorType,
        locator: str,
        text: str,
        clear: bool = True,
    ) -> Locator:
        """
        Fill an input in one step.

        Args:
            selector_type: Strategy to interpret the locator with
            locator: Locator string
            text: Text to enter
            clear: Clear the field first

        Returns:
            The filled element's locator
        """
        with self._error_boundary("Error sending keys to element", selector_type, locator):
            await self.wait_until_element_visible_and_enabled(selector_type, locator)
            element = await self.find_by_selector_type(selector_type, locator)
            if clear:
                await element.clear()
            await element.fill(text)
            logger.info(f"Filled {selector_type.name}: {locator}")
            return element

    @allure.step("Send keys via script: {locator}")
    async def send_keys_via_script(
        self,
        selector_type: SelectorType,
        locator: str,
        text: str,
    ) -> Locator:
        """Clear and set an input's value from page script, pausing between steps."""
        with self._error_boundary(
            "Error sending keys to element using script", selector_type, locator
        ):
            await self.wait_until_element_visible_and_enabled(selector_type, locator)
            element = await self.find_by_selector_type(selector_type, locator)
            await self.delay(self.settings.script_settle_ms)
            await element.evaluate(CLEAR_VALUE_SCRIPT)
            await self.delay(self.settings.script_settle_ms)
            await element.evaluate(SET_VALUE_SCRIPT, text)
            return element

    @staticmethod
    def keystroke_pause(index: int, length: int) -> int:
        """
        Scheduled pause after typing character ``index`` of ``length``.

        Short while more than four characters remain, longer near the end,
        none after the last character.
        """
        if index == length - 1:
            return 0
        return 25 if length - index > 4 else 75

    @allure.step("Slow type into: {locator}")
    async def slow_type(
        self,
        selector_type: SelectorType,
        locator: str,
        text: str,
    ) -> Locator:
        """
        Type one key at a time with a human-like cadence.

        The element is re-resolved before every key press so re-rendering
        inputs (search boxes, autocompletes) are handled.
        """
        with self._error_boundary("Error typing text slowly", selector_type, locator):
            await self.delay(self.settings.slow_type_lead_in_ms)
            element = await self.find_by_selector_type(selector_type, locator)
            await element.fill("")

            typed_text = ""
            for index, char in enumerate(text):
                current = await self.find_by_selector_type(selector_type, locator)
                await current.press(char)
                typed_text += char
                pause = self.keystroke_pause(index, len(text))
                if pause:
                    await self.delay(pause)
                await self.random_delay(50)

            logger.info(f"Slow-typed text is: {typed_text}")
            return element

    async def get_text(self, selector_type: SelectorType, locator: str) -> str:
        """Return the element's inner text."""
        with self._error_boundary("Error getting inner text of element", selector_type, locator):
            element = await self.find_by_selector_type(selector_type, locator)
            return await element.inner_text()

    async def get_attribute_value(
        self,
        selector_type: SelectorType,
        locator: str,
        attribute_name: str,
    ) -> Optional[str]:
        with self._error_boundary(
            f"Error getting attribute '{attribute_name}'", selector_type, locator
        ):
            element = await self.find_by_selector_type(selector_type, locator)
            return await element.get_attribute(attribute_name)

    async def press_key(self, key: str) -> None:
        """Press a keyboard key on whatever has focus (e.g. "Enter")."""
        with self._error_boundary(f"Error pressing key {key}"):
            await self.page.keyboard.press(key)

    async def scroll_page(self, delta_x: float = 0, delta_y: float = 100) -> None:
        """Scroll the page with the mouse wheel."""
        with self._error_boundary("Error scrolling page"):
            await self.page.mouse.wheel(delta_x, delta_y)

    # =========================================================================
    # Script Execution
    # =========================================================================

    async def execute_script(self, script: str, *args: Any) -> Any:
        """
        Evaluate ``script`` in the page context.

        A single extra argument is passed as-is; several are passed as a list.
        """
        with self._error_boundary("Error executing script"):
            if not args:
                return await self.page.evaluate(script)
            arg = args[0] if len(args) == 1 else list(args)
            return await self.page.evaluate(script, arg)

    async def execute_script_on_element(
        self,
        selector_type: SelectorType,
        locator: str,
        script: str,
        arg: Any = None,
    ) -> Any:
        """Evaluate ``script`` with the resolved element as its first parameter."""
        with self._error_boundary("Error executing script on element", selector_type, locator):
            element = await self.find_by_selector_type(selector_type, locator)
            if arg is None:
                return await element.evaluate(script)
            return await element.evaluate(script, arg)

    # =========================================================================
    # Navigation
    # =========================================================================

    @allure.step("Navigate to {url}")
    async def navigate(self, url: str) -> None:
        with self._error_boundary(f"Error navigating to {url}"):
            await self.page.goto(url, timeout=self.settings.navigation_timeout_ms)
            logger.debug(f"Navigated to: {url}")

    async def navigate_back(self) -> None:
        with self._error_boundary("Error navigating back"):
            await self.page.go_back()

    async def refresh(self) -> None:
        with self._error_boundary("Error refreshing page"):
            await self.page.reload()

    async def get_current_url(self) -> str:
        """Wait for the page to load, then return its URL."""
        with self._error_boundary("Error getting current URL"):
            await self.wait_for_page_load()
            return self.page.url


__all__ = [
    "InteractionDriver",
    "InteractionSettings",
    "CLICK_SCRIPT",
    "CLEAR_VALUE_SCRIPT",
    "SET_VALUE_SCRIPT",
    "INNER_TEXT_SCRIPT",
]
