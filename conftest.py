"""
Repository-level pytest configuration.

Sets predictable environment defaults and configures logging once per
session, before any test imports configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from webui_tools.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _session_env_defaults(project_root: Path) -> Generator[None, None, None]:
    """
    Point configuration at the repo's config directory unless CI provides one,
    then initialize the logger.
    """
    os.environ.setdefault("WEBUI_CONFIG_DIR", str(project_root / "config"))
    os.environ.setdefault("ENV", "dev")
    init_logger()

    yield
