"""
================================================================================
UI Components
================================================================================

Typed widgets built on the WebComponent resilience wrapper.

Components:
    - WebComponent: shared click fallback, availability and wait policy
    - Locatable: delegation base every widget builds on
    - Button, CheckBox, TextInput, TextView: typed widgets
    - Clickable, Typeable, Readable: capability protocols

Author: Automation Team
License: MIT
================================================================================
"""

from .button import Button
from .capabilities import Clickable, Locatable, Readable, Typeable
from .checkbox import CheckBox
from .text_input import TextInput
from .text_view import TextView
from .web_component import WebComponent

__all__ = [
    "WebComponent",
    "Locatable",
    "Clickable",
    "Typeable",
    "Readable",
    "Button",
    "CheckBox",
    "TextInput",
    "TextView",
]
