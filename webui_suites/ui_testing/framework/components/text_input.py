"""
Text input widget.

Three typing strategies are offered. Each logs a failure and carries on
instead of raising, so a flaky input does not abort the surrounding flow;
callers that need certainty should read the value back.
"""

from __future__ import annotations

from loguru import logger

from ..errors import ConfigurationError
from .capabilities import Locatable


class TextInput(Locatable):

    async def slow_type(self, text: str) -> None:
        """Type ``text`` one key at a time with a human-like cadence."""
        try:
            await self.driver.slow_type(self.selector_type, self.locator, text)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Slow typing into {self.component.description} failed: {e}")

    async def fast_type(self, text: str) -> None:
        """Clear the field and fill ``text`` in one step."""
        try:
            await self.driver.send_keys(self.selector_type, self.locator, text)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Fast typing into {self.component.description} failed: {e}")

    async def script_type(self, text: str) -> None:
        """Set the field's value from page script."""
        try:
            await self.driver.send_keys_via_script(self.selector_type, self.locator, text)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Script typing into {self.component.description} failed: {e}")


__all__ = ["TextInput"]
