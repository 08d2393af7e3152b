"""
================================================================================
Test Suites Pytest Configuration
================================================================================

Registers the project's markers and tags tests by location.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests against in-memory fakes"
    )
    config.addinivalue_line(
        "markers", "live: Needs a real browser and network access to the demo site"
    )


def pytest_collection_modifyitems(config, items):
    """
    Tag collected tests by directory.

    Everything under ui_testing drives a real browser against the public
    site, so it is both ``ui`` and ``live``.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
            item.add_marker(pytest.mark.live)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)
