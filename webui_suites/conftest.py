"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project markers and tags tests by the directory they live in.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Core interaction guarantees - must always pass"
    )
    config.addinivalue_line(
        "markers", "P1: Readiness, typing and waiting behaviour"
    )
    config.addinivalue_line(
        "markers", "P2: Edge cases of widgets and page objects"
    )
    config.addinivalue_line(
        "markers", "P3: Convenience reads and helpers"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Fast checks that the layer works end to end"
    )
    config.addinivalue_line(
        "markers", "regression: Behaviour pinned against regressions"
    )
    config.addinivalue_line(
        "markers", "e2e: Live-site flows, run only with RUN_E2E=1"
    )

    # Layer markers
    config.addinivalue_line(
        "markers", "unit: Browserless tests against the fake page"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add the layer marker from the test's directory."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Resilient Web UI Interaction Layer",
        "=" * 60,
        "",
    ]
