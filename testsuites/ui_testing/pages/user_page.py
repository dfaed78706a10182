"""
================================================================================
User Page Object
================================================================================

Product catalogue shown to a signed-in user.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Tuple

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import BasePage


PRICE_PREFIX = "Price: $"
CATEGORY_PREFIX = "Category:"


class UserPage(BasePage):
    """Product listing with search and cart."""

    URL_PATH = "/"

    @property
    def search_box(self) -> Locator:
        return self.page.get_by_placeholder("Search by name")

    @property
    def product_cards(self) -> Locator:
        return self.page.locator(".product-card")

    @property
    def open_cart_button(self) -> Locator:
        return self.page.get_by_role("button", name="Open Cart")

    def product_card(self, product_name: str) -> Locator:
        return self.product_cards.filter(has_text=product_name)

    @allure.step("Search products: {text}")
    async def search(self, text: str) -> None:
        await self.fill(self.search_box, text)

    @allure.step("Add to cart: {product_name}")
    async def add_to_cart(self, product_name: str) -> None:
        button = self.product_card(product_name).get_by_role("button", name="Add to Cart")
        await self.click(button)

    async def open_cart(self) -> None:
        await self.click(self.open_cart_button)

    async def return_products(self) -> Dict[str, Tuple[str, Decimal]]:
        """
        Read every product card.

        Returns:
            Mapping of product name to (category, price)
        """
        products: Dict[str, Tuple[str, Decimal]] = {}
        count = await self.product_cards.count()

        for index in range(count):
            card = self.product_cards.nth(index)
            name = (await card.get_by_role("heading").inner_text()).strip()
            price_text = await card.get_by_text("Price:").inner_text()
            category_text = await card.get_by_text("Category:").inner_text()

            price = Decimal(price_text.replace(PRICE_PREFIX, "").strip())
            category = category_text.replace(CATEGORY_PREFIX, "").strip()
            products[name] = (category, price)

        self.log.debug(f"Read {len(products)} product cards")
        return products


__all__ = ["UserPage"]
