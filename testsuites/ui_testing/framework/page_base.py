"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Element interactions by selector or Locator
    - Output and URL assertions
    - Wait strategies

Every failing interaction is logged with its target and re-raised unchanged.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

import allure
from loguru import logger as default_logger
from playwright.async_api import Locator, Page

from storefront_tools.settings import PlaywrightSettings


Target = Union[str, Locator]


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/form"

            async def login(self, username: str, password: str):
                await self.go_to(self.URL_PATH)
                await self.fill(self.username_input, username)
                await self.fill(self.password_input, password)
                await self.click(self.login_button)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        settings: Optional[PlaywrightSettings] = None,
        logger: Any = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            settings: Browser settings providing base_url and timeouts
            logger: Per-test logger handle; the global loguru logger if None
        """
        self.page = page
        self.settings = settings or PlaywrightSettings()
        self.log = logger or default_logger

    @property
    def base_url(self) -> str:
        return self.settings.base_url.rstrip("/")

    def url_for(self, relative_url: str) -> str:
        """Join the base URL and a relative path with exactly one slash."""
        return f"{self.base_url}/{relative_url.lstrip('/')}"

    def _locator(self, target: Target) -> Locator:
        if isinstance(target, str):
            return self.page.locator(target)
        return target

    @staticmethod
    def _describe(target: Target) -> str:
        return target if isinstance(target, str) else str(target)

    # =========================================================================
    # Navigation
    # =========================================================================

    async def go_to(self, relative_url: str = "") -> None:
        """
        Navigate to a path relative to the base URL and wait for load.
        """
        url = self.url_for(relative_url or self.URL_PATH)
        with allure.step(f"Navigate to {url}"):
            self.log.info(f"Navigating to {url}")
            try:
                await self.page.goto(url)
                await self.wait_for_page_load()
            except Exception:
                self.log.error(f"Failed to navigate to {url}")
                raise

    async def wait_for_page_load(self, timeout_ms: Optional[int] = None) -> None:
        """Wait for network idle, then DOM content loaded.

        timeout_ms defaults to settings.default_timeout_ms.
        """
        if timeout_ms is None:
            timeout_ms = self.settings.default_timeout_ms
        try:
            await self.page.wait_for_load_state("networkidle", timeout=timeout_ms)
            await self.page.wait_for_load_state("domcontentloaded", timeout=timeout_ms)
        except Exception:
            self.log.error("Error waiting for page load.")
            raise

    # =========================================================================
    # Interactions
    # =========================================================================

    async def fill(self, target: Target, text: str) -> None:
        description = self._describe(target)
        self.log.debug(f"Filling '{description}' with '{text}'")
        try:
            await self._locator(target).fill(text)
        except Exception:
            self.log.error(f"Failed to fill '{description}' with '{text}'")
            raise

    async def click(self, target: Target) -> None:
        description = self._describe(target)
        with allure.step(f"Click: {description}"):
            self.log.debug(f"Clicking '{description}'")
            try:
                await self._locator(target).click()
            except Exception:
                self.log.error(f"Failed to click '{description}'")
                raise

    async def check(self, target: Target) -> None:
        """Check a checkbox or radio button."""
        try:
            await self._locator(target).check()
        except Exception:
            self.log.error(f"Failed to check '{self._describe(target)}'")
            raise

    async def uncheck(self, target: Target) -> None:
        try:
            await self._locator(target).uncheck()
        except Exception:
            self.log.error(f"Failed to uncheck '{self._describe(target)}'")
            raise

    async def select_option(self, target: Target, value: str) -> List[str]:
        """Select one option of a <select> by value."""
        try:
            return await self._locator(target).select_option(value)
        except Exception:
            self.log.error(
                f"Failed to select option '{value}' in '{self._describe(target)}'"
            )
            raise

    async def select_options(self, target: Target, values: Sequence[str]) -> List[str]:
        try:
            return await self._locator(target).select_option(list(values))
        except Exception:
            self.log.error(
                f"Failed to select options '{', '.join(values)}' in "
                f"'{self._describe(target)}'"
            )
            raise

    # =========================================================================
    # Reading
    # =========================================================================

    async def get_text(self, target: Target) -> str:
        """Text content of the target, empty string when it has none."""
        try:
            return await self._locator(target).text_content() or ""
        except Exception:
            self.log.error(f"Failed to get text content from '{self._describe(target)}'")
            raise

    async def inner_text(self, target: Target) -> str:
        try:
            return await self._locator(target).inner_text() or ""
        except Exception:
            self.log.error(f"Failed to get inner text from '{self._describe(target)}'")
            raise

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Evaluate JavaScript in the page and return the result."""
        try:
            return await self.page.evaluate(script, arg)
        except Exception:
            self.log.error(f"JavaScript evaluation failed: {script}")
            raise

    async def wait_for_visible(self, target: Target, timeout_ms: int = 5000) -> None:
        try:
            await self._locator(target).wait_for(state="visible", timeout=timeout_ms)
        except Exception:
            self.log.error(f"Wait for '{self._describe(target)}' to be visible failed.")
            raise

    # =========================================================================
    # Assertions
    # =========================================================================

    async def assert_output_contains(self, target: Target, expected_text: str) -> None:
        """
        Assert that the text content of the target contains expected_text.

        Raises:
            AssertionError: With expected and actual text
        """
        actual_text = await self.get_text(target)
        if expected_text not in actual_text:
            self.log.error(
                f"assert_output_contains failed. Expected: '{expected_text}', "
                f"Actual: '{actual_text}'"
            )
            raise AssertionError(
                f"Expected '{expected_text}' in output of "
                f"'{self._describe(target)}', got '{actual_text}'"
            )

    def assert_url_contains(self, segment: str) -> None:
        """
        Raises:
            AssertionError: When the current URL lacks the segment
        """
        if segment not in self.page.url:
            self.log.error(
                f"assert_url_contains failed. Expected segment: '{segment}', "
                f"Actual URL: '{self.page.url}'"
            )
            raise AssertionError(
                f"Expected URL to contain '{segment}', got '{self.page.url}'"
            )


__all__ = [
    "BasePage",
    "Target",
]
