"""CheckBox widget."""

from __future__ import annotations

from .capabilities import Locatable


class CheckBox(Locatable):

    async def select(self) -> None:
        """
        Click the checkbox.

        This toggles; calling it twice clicks twice. It does not ensure a
        checked state.
        """
        await self.component.click()


__all__ = ["CheckBox"]
