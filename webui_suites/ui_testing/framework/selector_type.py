"""
Selector strategies understood by the interaction driver.

Each member names one way of addressing a page element. The locator string
paired with a member is interpreted under that member's rules only.
"""

from enum import Enum


class SelectorType(Enum):
    """
    Ways to locate an element.

    - CSS: CSS selector.
    - XPATH: XPath (path-query) selector.
    - TEXT: Visible text content.
    - LABEL: Accessible label (aria-label, <label for=...>).
    - PLACEHOLDER: Placeholder attribute.
    - ALT_TEXT: Alt attribute (images, areas).
    - TITLE: Title attribute.
    - TEST_ID: Test identifier attribute (data-testid by default).
    """

    CSS = "css"
    XPATH = "xpath"
    TEXT = "text"
    LABEL = "label"
    PLACEHOLDER = "placeholder"
    ALT_TEXT = "alt_text"
    TITLE = "title"
    TEST_ID = "test_id"

    @property
    def is_structural(self) -> bool:
        """True for strategies resolved through selector syntax (CSS/XPath)."""
        return self in (SelectorType.CSS, SelectorType.XPATH)


__all__ = ["SelectorType"]
