"""
================================================================================
Web UI Tools Common Utilities
================================================================================

Shared configuration and logging setup for the UI interaction layer.

Exports:
    - get_config / set_config / reload_config: layered configuration access
    - init_logger / get_logger: loguru setup with standard settings
    - to_bool: interpret boolean flags coming from YAML or the environment

Usage:
    from webui_tools.common import get_config, init_logger

    init_logger()
    browser_name = get_config("browser.name", "chromium")

================================================================================
"""

from .global_config import (
    get_config,
    get_logger,
    init_logger,
    reload_config,
    set_config,
    to_bool,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "init_logger",
    "get_logger",
    "to_bool",
]
