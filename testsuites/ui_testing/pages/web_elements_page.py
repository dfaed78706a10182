"""
================================================================================
Web Elements Page Object
================================================================================

Playground page with one widget of each kind:

    - text input echoing its value
    - counter with increment / decrement / reset and an error line
    - dropdown
    - checkbox group
    - radio group
    - enable / disable toggle

Each widget renders its current state into a sibling output element.

================================================================================
"""

from __future__ import annotations

from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import BasePage


class WebElementsPage(BasePage):
    """Page object for /webelements."""

    URL_PATH = "/webelements"

    TEXT_INPUT = "#text-input"
    TEXT_INPUT_OUTPUT = ".web-element:has(#text-input) .web-element-output"

    COUNTER_VALUE = ".web-element-counter-value"
    COUNTER_INCREMENT = '.web-element-counter button:has-text("+")'
    COUNTER_DECREMENT = '.web-element-counter button:has-text("-")'
    COUNTER_RESET = ".web-element-button-reset"
    COUNTER_ERROR = ".web-element-error"

    DROPDOWN = "#dropdown"
    DROPDOWN_OUTPUT = ".web-element:has(#dropdown) .web-element-output"

    CHECKBOX = ".web-element-checkbox"
    CHECKBOX_OUTPUT = ".web-element-checkbox-group ~ .web-element-output"

    RADIO_INPUT = ".web-element-radio-input"
    RADIO_OUTPUT = ".web-element-radio-group ~ .web-element-output"

    TOGGLE_ENABLE = ".web-element-toggle-button.enabled"
    TOGGLE_OUTPUT = ".web-element-toggle-group ~ .web-element-output"

    async def open(self) -> "WebElementsPage":
        await self.go_to(self.URL_PATH)
        return self

    # Text input

    async def enter_text(self, text: str) -> None:
        await self.fill(self.TEXT_INPUT, text)

    async def get_text_output(self) -> str:
        return await self.inner_text(self.TEXT_INPUT_OUTPUT)

    # Counter

    async def increment_counter(self) -> None:
        await self.click(self.COUNTER_INCREMENT)

    async def decrement_counter(self) -> None:
        await self.click(self.COUNTER_DECREMENT)

    async def reset_counter(self) -> None:
        await self.click(self.COUNTER_RESET)

    async def get_counter_value(self) -> str:
        return await self.get_text(self.COUNTER_VALUE)

    async def get_counter_error(self) -> str:
        return await self.get_text(self.COUNTER_ERROR)

    # Dropdown

    async def select_dropdown(self, value: str) -> None:
        await self.select_option(self.DROPDOWN, value)

    async def get_dropdown_output(self) -> str:
        return await self.get_text(self.DROPDOWN_OUTPUT)

    # Checkboxes

    def checkbox(self, index: int) -> Locator:
        return self.page.locator(self.CHECKBOX).nth(index)

    async def check_checkbox(self, index: int) -> None:
        await self.check(self.checkbox(index))

    async def uncheck_checkbox(self, index: int) -> None:
        await self.uncheck(self.checkbox(index))

    async def get_checkbox_output(self) -> str:
        return await self.get_text(self.CHECKBOX_OUTPUT)

    # Radios

    async def select_radio(self, value: str) -> None:
        await self.check(f"{self.RADIO_INPUT}[value='{value}']")

    async def get_radio_output(self) -> str:
        return await self.get_text(self.RADIO_OUTPUT)

    # Toggle

    async def click_toggle_enable(self) -> None:
        await self.click(self.TOGGLE_ENABLE)

    async def get_toggle_output(self) -> str:
        return await self.get_text(self.TOGGLE_OUTPUT)


__all__ = ["WebElementsPage"]
