"""
================================================================================
UI Interaction Errors
================================================================================

Error taxonomy for the interaction layer:

    - ElementNotFoundError: strategy dispatch produced no matching element
    - ElementNotReadyError: element found but never became visible + enabled
    - ElementActionError: a ready element still rejected the action
    - ConfigurationError: unsupported selector type or missing configuration

Every error remembers the selector type and locator it was raised for, so a
failing test names the UI element directly.

================================================================================
"""

from __future__ import annotations

from typing import Optional

from .selector_type import SelectorType


class UIInteractionError(Exception):
    """Base class for all interaction-layer failures."""

    def __init__(
        self,
        reason: str,
        selector_type: Optional[SelectorType] = None,
        locator: Optional[str] = None,
    ):
        self.reason = reason
        self.selector_type = selector_type
        self.locator = locator
        super().__init__(self._format())

    def _format(self) -> str:
        if self.selector_type is None and self.locator is None:
            return self.reason
        type_name = self.selector_type.name if self.selector_type else "?"
        return f"{self.reason} [{type_name}: {self.locator!r}]"


class ElementNotFoundError(UIInteractionError):
    """No element matched the locator under its selector type."""


class ElementNotReadyError(UIInteractionError):
    """Element did not become visible and enabled within its timeout."""


class ElementActionError(UIInteractionError):
    """A resolved element rejected the requested action."""


class ConfigurationError(UIInteractionError):
    """Unsupported selector type or missing required configuration. Never retried."""


def rewrap(
    error: BaseException,
    operation: str,
    selector_type: Optional[SelectorType] = None,
    locator: Optional[str] = None,
) -> UIInteractionError:
    """
    Build a descriptive error for ``operation`` that keeps the taxonomy class.

    Not-found and not-ready errors stay what they are; any other failure
    becomes an ElementActionError. Callers raise the result ``from error``.
    """
    if isinstance(error, UIInteractionError):
        error_cls = type(error)
        cause = error.reason
        selector_type = selector_type or error.selector_type
        locator = locator if locator is not None else error.locator
    else:
        error_cls = ElementActionError
        cause = str(error) or type(error).__name__
    return error_cls(f"{operation}: {cause}", selector_type, locator)


__all__ = [
    "UIInteractionError",
    "ElementNotFoundError",
    "ElementNotReadyError",
    "ElementActionError",
    "ConfigurationError",
    "rewrap",
]
