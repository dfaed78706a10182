"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Browser lifecycle per test through BrowserManager
- Page Object fixtures for all pages
- Screenshot capture on failure
- Suite skipped when the storefront UI or the browser is unavailable

================================================================================
"""

from __future__ import annotations

from typing import AsyncGenerator, Tuple

import httpx
import pytest
from playwright.async_api import Error as PlaywrightError, Page

from storefront_tools import ConfigLoader, PlaywrightSettings, TestLogger
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.helpers import take_screenshot
from testsuites.ui_testing.pages import LoginPage, UserPage, WebElementsPage


# ================================================================================
# Settings Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def playwright_settings(config: ConfigLoader) -> PlaywrightSettings:
    """Typed ``playwright`` section of the configuration."""
    return config.get_settings("playwright", PlaywrightSettings)


@pytest.fixture(scope="session")
def ui_available(playwright_settings: PlaywrightSettings) -> str:
    """Skip live UI tests when the storefront UI does not answer."""
    base_url = playwright_settings.base_url
    try:
        httpx.get(base_url, timeout=3)
    except httpx.TransportError as e:
        pytest.skip(f"Storefront UI not reachable at {base_url}: {e}")
    return base_url


@pytest.fixture(scope="session")
def ui_credentials(config: ConfigLoader) -> Tuple[str, str]:
    return (
        config.get("credentials.ui_username", "user"),
        config.get("credentials.ui_password", "user"),
    )


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(
    ui_available: str,
    playwright_settings: PlaywrightSettings,
    test_logger: TestLogger,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager.

    Each test gets its own browser so tests never share cookies or storage.
    """
    browser_logger = test_logger.for_browser(playwright_settings.browser_type.value)
    manager = BrowserManager(playwright_settings, logger=browser_logger)
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser {playwright_settings.browser_type.value} unavailable: {e}")
    yield manager
    await manager.close()


@pytest.fixture
async def page(
    request,
    browser_manager: BrowserManager,
    test_logger: TestLogger,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page; screenshots the page when the test failed.
    """
    page = await browser_manager.new_page(name=request.node.name)
    yield page

    report = getattr(request.node, "rep_call", None)
    failed = report is not None and report.failed
    if failed and not page.is_closed():
        await take_screenshot(page, f"failure_{request.node.name}", logger=test_logger)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, playwright_settings: PlaywrightSettings, test_logger: TestLogger) -> LoginPage:
    return LoginPage(page, playwright_settings, test_logger)


@pytest.fixture
def user_page(page: Page, playwright_settings: PlaywrightSettings, test_logger: TestLogger) -> UserPage:
    return UserPage(page, playwright_settings, test_logger)


@pytest.fixture
def web_elements_page(
    page: Page,
    playwright_settings: PlaywrightSettings,
    test_logger: TestLogger,
) -> WebElementsPage:
    return WebElementsPage(page, playwright_settings, test_logger)
