"""Read-only text widget."""

from __future__ import annotations

from ..interaction_driver import INNER_TEXT_SCRIPT
from .capabilities import Locatable


class TextView(Locatable):
    """
    Readers for an element's text and the page URL.

    Errors from the driver propagate unchanged.
    """

    async def get_text(self) -> str:
        return await self.driver.get_text(self.selector_type, self.locator)

    async def get_text_by_script(self) -> str:
        """Read ``innerText`` from page script."""
        return await self.driver.execute_script_on_element(
            self.selector_type, self.locator, INNER_TEXT_SCRIPT
        )

    async def get_current_url(self) -> str:
        return await self.driver.get_current_url()


__all__ = ["TextView"]
