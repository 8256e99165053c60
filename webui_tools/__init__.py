"""
================================================================================
Web UI Tools
================================================================================

Infrastructure utilities shared by the UI interaction layer and its tests.

Modules:
    - common: Layered YAML/env configuration and loguru logging setup

Example:
    from webui_tools.common import get_config, init_logger

    init_logger()
    timeout = get_config("interaction.readiness_timeout_ms", 60000)

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
]
