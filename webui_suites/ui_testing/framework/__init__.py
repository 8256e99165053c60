"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based resilient element interaction layer.

Components:
    - selector_type: Selector strategies (CSS, XPath, text, label, ...)
    - polling: Bounded poll-until-predicate primitive
    - interaction_driver: Selector dispatch, readiness polling, element actions
    - components: WebComponent resilience wrapper and typed widgets
    - page_base: Base page object
    - browser_manager: Browser launcher

Author: Automation Team
License: MIT
================================================================================
"""

from .selector_type import SelectorType
from .errors import (
    ConfigurationError,
    ElementActionError,
    ElementNotFoundError,
    ElementNotReadyError,
    UIInteractionError,
)
from .polling import PollState, poll_until
from .interaction_driver import InteractionDriver, InteractionSettings
from .components import (
    Button,
    CheckBox,
    Clickable,
    Locatable,
    Readable,
    TextInput,
    TextView,
    Typeable,
    WebComponent,
)
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "SelectorType",
    "UIInteractionError",
    "ElementNotFoundError",
    "ElementNotReadyError",
    "ElementActionError",
    "ConfigurationError",
    "PollState",
    "poll_until",
    "InteractionDriver",
    "InteractionSettings",
    "WebComponent",
    "Locatable",
    "Clickable",
    "Typeable",
    "Readable",
    "Button",
    "CheckBox",
    "TextInput",
    "TextView",
    "BasePage",
    "BrowserManager",
]
