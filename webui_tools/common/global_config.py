"""
================================================================================
Global Configuration for the UI Interaction Layer
================================================================================

Centralized configuration and logging setup shared by the framework, the
page objects and the test runner.

Features:
    - YAML-based configuration loading (config/config.yaml + config/{ENV}.yaml)
    - Environment variable overrides (SECTION__KEY=value)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_DEFAULTS: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": DEFAULT_LOG_FORMAT,
    },
    "browser": {
        "name": "chromium",
        "headless": True,
        "base_url": "https://www.alphabin.co/blog/system-integration-testing-a-complete-guide",
    },
    "interaction": {
        "selector_timeout_ms": 30000,
        "readiness_timeout_ms": 60000,
        "polling_interval_ms": 500,
        "navigation_timeout_ms": 60000,
        "page_load_timeout_ms": 60000,
        "script_settle_ms": 200,
        "slow_type_lead_in_ms": 2000,
        "click_settle_ms": 1000,
    },
}


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call more than once; only the first call installs handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = str(level or get_config("logging.level", "INFO"))
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """
    Returns the configured Loguru logger instance, initializing it on first use.
    """
    if not _logger_initialized:
        init_logger()
    return logger


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _find_config_dir() -> Optional[Path]:
    possible_config_dirs = [
        Path(os.getenv("WEBUI_CONFIG_DIR", "config")),
        Path(__file__).parent.parent.parent / "config",
    ]
    for dir_path in possible_config_dirs:
        if dir_path.is_dir():
            return dir_path
    return None


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config

    _config = copy.deepcopy(_DEFAULTS)

    config_dir = _find_config_dir()
    if config_dir is None:
        logger.debug("No configuration directory found. Using defaults.")
    else:
        default_config_path = config_dir / "config.yaml"
        if default_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(default_config_path))
            logger.debug(f"Loaded configuration from {default_config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(env_config_path))
            logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Only variables whose first segment names a known section are applied.
    Example: BROWSER__NAME=firefox overrides browser.name
    """
    for key, value in os.environ.items():
        if "__" not in key:
            continue
        parts = [p.lower() for p in key.split("__")]
        if parts[0] in _DEFAULTS:
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: List[str], value: Any) -> None:
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "browser.name").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("interaction.polling_interval_ms", 500)
        500
    """
    _ensure_config_loaded()

    value: Any = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config() -> None:
    """
    Reloads the configuration from files and environment.
    """
    global _config
    _config = {}
    _load_config()
    logger.info("Configuration reloaded.")


def to_bool(value: Any) -> bool:
    """Interpret config values that may arrive as strings from the environment."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
