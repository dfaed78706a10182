"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and provides shared fixtures.

Fixtures:
    - test_logger: per-test TestLogger bound to the test method

================================================================================
"""

from typing import Generator

import pytest

from storefront_tools import ConfigLoader, TestLogger
from storefront_tools.reporting import write_environment_properties


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
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework itself"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "api: API-specific tests"
    )
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "products: Tests related to the product catalogue"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "analytics: Tests related to sales analytics"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add domain markers from the test location.
    """
    for item in items:
        path = str(item.fspath)
        if "api_testing" in path:
            item.add_marker(pytest.mark.api)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        if "unit" in path.replace("\\", "/").split("/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Storefront Automation Testing Framework",
        "=" * 60,
        "",
    ]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Store each phase report on the item (rep_setup, rep_call, rep_teardown).

    Fixtures read item.rep_call during teardown to learn the test outcome.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def call_passed(node) -> bool:
    """True when the call phase of the test ran and passed."""
    report = getattr(node, "rep_call", None)
    return report is not None and report.passed


@pytest.fixture
def test_logger(request) -> Generator[TestLogger, None, None]:
    """
    Per-test logger handle.

    Writes to logs/<TestClass>/<TestClass>_<timestamp>.log with start and end
    banners around the test method.
    """
    test_class = request.cls.__name__ if request.cls else request.module.__name__.rsplit(".", 1)[-1]
    test_method = request.node.name

    class_logger = TestLogger(test_class)
    case_logger = class_logger.for_test_method(test_method)
    yield case_logger

    class_logger.end_test_method(test_method, passed=call_passed(request.node))
    class_logger.close()


def pytest_sessionfinish(session, exitstatus):
    """Write environment.properties when results go to an Allure directory."""
    results_dir = session.config.getoption("allure_report_dir", default=None)
    if not results_dir:
        return

    config = ConfigLoader()
    properties = dict(config.get("allure.environment", {}) or {})
    properties["API.BaseUrl"] = config.get("api.base_url", "")
    properties["UI.BaseUrl"] = config.get("playwright.base_url", "")
    properties["Browser"] = config.get("playwright.browser_type", "")
    write_environment_properties(results_dir, properties)
