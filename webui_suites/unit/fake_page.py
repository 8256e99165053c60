"""
In-memory stand-in for a Playwright page, driven by a virtual clock.

Only the calls the interaction driver makes are modelled. Waiting never
sleeps: ``wait_for_timeout`` and selector timeouts advance the clock, so a
30 second timeout runs instantly and can be asserted exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from webui_suites.ui_testing.framework.interaction_driver import (
    CLEAR_VALUE_SCRIPT,
    CLICK_SCRIPT,
    INNER_TEXT_SCRIPT,
    SET_VALUE_SCRIPT,
)


class FakeClock:
    """Monotonic clock in seconds that only moves when told to."""

    def __init__(self) -> None:
        self.now_ms = 0.0

    def __call__(self) -> float:
        return self.now_ms / 1000.0

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@dataclass
class FakeElement:
    """One DOM node; each strategy matches on the field of the same name."""
    css: Optional[str] = None
    text: Optional[str] = None
    label: Optional[str] = None
    placeholder: Optional[str] = None
    alt_text: Optional[str] = None
    title: Optional[str] = None
    test_id: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    attached_after_ms: float = 0.0
    visible_after_ms: float = 0.0
    hidden: bool = False
    enabled: bool = True
    obscured: bool = False
    script_click_fails: bool = False
    value: str = ""
    clicks: List[str] = field(default_factory=list)
    presses: List[str] = field(default_factory=list)
    hovered: int = 0
    scrolled: int = 0


class FakeLocator:
    def __init__(self, page: "FakePage", kind: str, value: str, index: Optional[int] = None):
        self.page = page
        self.kind = kind
        self.value = value
        self.index = index

    def __repr__(self) -> str:
        return f"FakeLocator({self.kind}={self.value!r}, index={self.index})"

    def _matches(self) -> List[FakeElement]:
        return self.page.match(self.kind, self.value)

    def _resolve(self) -> FakeElement:
        matches = self._matches()
        if self.index is not None:
            if self.index < len(matches):
                return matches[self.index]
            raise PlaywrightError(f"Element {self.index} of {self} is detached")
        if not matches:
            raise PlaywrightTimeoutError(f"Timeout 30000ms exceeded waiting for {self}")
        if len(matches) > 1:
            raise PlaywrightError(f"strict mode violation: {self} resolved to {len(matches)} elements")
        return matches[0]

    async def all(self) -> List["FakeLocator"]:
        return [
            FakeLocator(self.page, self.kind, self.value, index)
            for index in range(len(self._matches()))
        ]

    async def is_visible(self) -> bool:
        self.page.calls.append(("is_visible", self.value))
        matches = self._matches()
        if not matches:
            return False
        return self.page.is_visible(self._resolve())

    async def is_enabled(self, timeout: Optional[float] = None) -> bool:
        self.page.calls.append(("is_enabled", self.value))
        return self._resolve().enabled

    async def click(self) -> None:
        element = self._resolve()
        if element.obscured:
            raise PlaywrightError("<div class=\"overlay\"> intercepts pointer events")
        element.clicks.append("native")

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        element = self._resolve()
        self.page.evaluations.append((script, arg))
        if script == CLICK_SCRIPT:
            if element.script_click_fails:
                raise PlaywrightError("script click rejected")
            element.clicks.append("script")
            return None
        if script == CLEAR_VALUE_SCRIPT:
            element.value = ""
            return None
        if script == SET_VALUE_SCRIPT:
            element.value = arg
            return None
        if script == INNER_TEXT_SCRIPT:
            return element.text
        raise PlaywrightError(f"Unknown script: {script}")

    async def fill(self, text: str) -> None:
        self._resolve().value = text

    async def clear(self) -> None:
        self._resolve().value = ""

    async def press(self, key: str) -> None:
        element = self._resolve()
        element.presses.append(key)
        element.value += key

    async def hover(self) -> None:
        self._resolve().hovered += 1

    async def inner_text(self) -> str:
        return self._resolve().text or ""

    async def get_attribute(self, name: str) -> Optional[str]:
        return self._resolve().attributes.get(name)

    async def scroll_into_view_if_needed(self) -> None:
        self._resolve().scrolled += 1


class FakeKeyboard:
    def __init__(self) -> None:
        self.pressed: List[str] = []

    async def press(self, key: str) -> None:
        self.pressed.append(key)


class FakeMouse:
    def __init__(self) -> None:
        self.wheel_events: List[Tuple[float, float]] = []

    async def wheel(self, delta_x: float, delta_y: float) -> None:
        self.wheel_events.append((delta_x, delta_y))


class FakePage:
    """
    Page double for the interaction driver.

    Attributes:
        elements: Nodes on the page
        delays: Every wait_for_timeout duration, in order
        selector_waits: (selector, state, timeout) for every wait_for_selector
        evaluations: (script, arg) for page and element script evaluations
        calls: Other recorded calls
        broken_methods: get_by_* method names that raise when called
    """

    def __init__(self, clock: Optional[FakeClock] = None, url: str = "about:blank"):
        self.clock = clock or FakeClock()
        self.elements: List[FakeElement] = []
        self.delays: List[float] = []
        self.selector_waits: List[Tuple[str, str, float]] = []
        self.evaluations: List[Tuple[str, Any]] = []
        self.calls: List[Tuple[str, Any]] = []
        self.broken_methods: set = set()
        self.script_results: Dict[str, Any] = {}
        self.goto_fails = False
        self.url = url
        self.history: List[str] = []
        self.reloads = 0
        self.keyboard = FakeKeyboard()
        self.mouse = FakeMouse()

    def add(self, **fields: Any) -> FakeElement:
        element = FakeElement(**fields)
        self.elements.append(element)
        return element

    def is_attached(self, element: FakeElement) -> bool:
        return self.clock.now_ms >= element.attached_after_ms

    def is_visible(self, element: FakeElement) -> bool:
        return (
            self.is_attached(element)
            and not element.hidden
            and self.clock.now_ms >= element.visible_after_ms
        )

    def match(self, kind: str, value: str) -> List[FakeElement]:
        return [
            element
            for element in self.elements
            if getattr(element, kind) == value and self.is_attached(element)
        ]

    # ------------------------------------------------------------------
    # Locating
    # ------------------------------------------------------------------

    async def wait_for_selector(
        self,
        selector: str,
        state: str = "visible",
        timeout: float = 30000,
    ) -> None:
        self.selector_waits.append((selector, state, timeout))
        if selector == "body":
            return None
        deadline = self.clock.now_ms + timeout
        candidates = [
            element.attached_after_ms
            for element in self.elements
            if element.css == selector and element.attached_after_ms <= deadline
        ]
        if candidates:
            self.clock.now_ms = max(self.clock.now_ms, min(candidates))
            return None
        self.clock.now_ms = deadline
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, "css", selector)

    def _get_by(self, method: str, kind: str, value: str) -> FakeLocator:
        if method in self.broken_methods:
            raise PlaywrightError(f"{method} failed")
        return FakeLocator(self, kind, value)

    def get_by_text(self, text: str) -> FakeLocator:
        return self._get_by("get_by_text", "text", text)

    def get_by_label(self, label: str) -> FakeLocator:
        return self._get_by("get_by_label", "label", label)

    def get_by_placeholder(self, placeholder: str) -> FakeLocator:
        return self._get_by("get_by_placeholder", "placeholder", placeholder)

    def get_by_alt_text(self, alt_text: str) -> FakeLocator:
        return self._get_by("get_by_alt_text", "alt_text", alt_text)

    def get_by_title(self, title: str) -> FakeLocator:
        return self._get_by("get_by_title", "title", title)

    def get_by_test_id(self, test_id: str) -> FakeLocator:
        return self._get_by("get_by_test_id", "test_id", test_id)

    # ------------------------------------------------------------------
    # Page-level actions
    # ------------------------------------------------------------------

    async def wait_for_timeout(self, ms: float) -> None:
        self.delays.append(ms)
        self.clock.advance(ms)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        self.evaluations.append((script, arg))
        return self.script_results.get(script)

    async def goto(self, url: str, timeout: float = 30000) -> None:
        self.calls.append(("goto", (url, timeout)))
        if self.goto_fails:
            raise PlaywrightError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.history.append(self.url)
        self.url = url

    async def go_back(self) -> None:
        if self.history:
            self.url = self.history.pop()

    async def reload(self) -> None:
        self.reloads += 1
