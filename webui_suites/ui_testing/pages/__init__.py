"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators as (SelectorType, locator) pairs
    - Page-specific flows built from typed widgets

Author: Automation Team
License: MIT
================================================================================
"""

from webui_suites.ui_testing.framework.interaction_driver import InteractionDriver

from .search_page import SearchPage


class AllPages:
    """Every page object for one driver, created together."""

    def __init__(self, driver: InteractionDriver):
        self.search = SearchPage(driver)


__all__ = [
    "AllPages",
    "SearchPage",
]
