"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures for exercising the interaction layer without a browser:
    - a virtual clock and fake page
    - an InteractionDriver bound to them with default timings
    - a loguru sink collecting messages for assertions

================================================================================
"""

from typing import Generator, List

import pytest
from loguru import logger

from webui_suites.ui_testing.framework.interaction_driver import (
    InteractionDriver,
    InteractionSettings,
)
from webui_suites.unit.fake_page import FakeClock, FakePage


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_page(clock: FakeClock) -> FakePage:
    return FakePage(clock=clock, url="https://app.example.com/home")


@pytest.fixture
def settings() -> InteractionSettings:
    """Default timings, independent of any config file or environment."""
    return InteractionSettings()


@pytest.fixture
def driver(fake_page: FakePage, settings: InteractionSettings, clock: FakeClock) -> InteractionDriver:
    return InteractionDriver(fake_page, settings=settings, clock=clock)


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collect formatted loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)
