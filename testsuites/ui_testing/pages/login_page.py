"""
================================================================================
Login Page Object
================================================================================

Login form served at /form.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/form"

    @property
    def username_input(self) -> Locator:
        return self.page.get_by_placeholder("Username")

    @property
    def password_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="password")

    @property
    def login_button(self) -> Locator:
        return self.page.get_by_role("button", name="Login")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        await self.go_to(self.URL_PATH)
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """Open the form, submit the credentials and wait for the next page."""
        await self.open()
        await self.fill(self.username_input, username)
        await self.fill(self.password_input, password)
        await self.click(self.login_button)
        await self.wait_for_page_load()


__all__ = ["LoginPage"]
