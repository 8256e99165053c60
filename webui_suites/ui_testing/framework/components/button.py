"""Button widget."""

from __future__ import annotations

from .capabilities import Locatable


class Button(Locatable):
    """A clickable button. Both click paths pause briefly afterwards so the page can react."""

    async def click(self) -> None:
        """Click with the component's script-click fallback."""
        await self.component.click()
        await self.driver.delay(self.driver.settings.click_settle_ms)

    async def click_via_script(self) -> None:
        """Wait for readiness, then click from page script."""
        await self.driver.click_via_script(self.selector_type, self.locator)
        await self.driver.delay(self.driver.settings.click_settle_ms)


__all__ = ["Button"]
