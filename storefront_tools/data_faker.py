"""
================================================================================
Test Data Faker
================================================================================

Random but realistic test data built on Faker.

Pass a seed to ``reseed`` for reproducible runs (e.g. when bisecting a
flaky failure).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from faker import Faker


PRODUCT_CATEGORIES = ["Laptops", "Phones", "Accessories", "Tablets", "Gaming", "Software"]

_ADJECTIVES = ["Ergonomic", "Sleek", "Rugged", "Compact", "Premium", "Smart", "Wireless"]
_MATERIALS = ["Steel", "Aluminum", "Carbon", "Plastic", "Wooden", "Leather", "Glass"]
_ITEMS = ["Keyboard", "Mouse", "Monitor", "Headset", "Speaker", "Charger", "Stand", "Webcam"]

_faker = Faker()


def reseed(seed: Optional[int]) -> None:
    """Seed the shared Faker instance."""
    Faker.seed(seed)


def fake_id() -> int:
    """Random ID in the test range 10000-99999."""
    return _faker.random_int(min=10000, max=99999)


def fake_product_name() -> str:
    return " ".join((
        _faker.random_element(_ADJECTIVES),
        _faker.random_element(_MATERIALS),
        _faker.random_element(_ITEMS),
    ))


def fake_category() -> str:
    return _faker.random_element(PRODUCT_CATEGORIES)


def fake_price(min_price: float = 1, max_price: float = 2000) -> Decimal:
    """Random price with two decimal places, inclusive of both bounds."""
    if min_price > max_price:
        raise ValueError(f"min_price {min_price} is greater than max_price {max_price}")
    cents = _faker.random_int(min=int(round(min_price * 100)), max=int(round(max_price * 100)))
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))


def fake_text(sentences: int = 2) -> str:
    return " ".join(_faker.sentences(nb=sentences))


def fake_email() -> str:
    return _faker.email()


def fake_name() -> str:
    return _faker.name()


def fake_product_data() -> Dict[str, Any]:
    """Complete product payload with every field randomized."""
    return {
        "id": fake_id(),
        "name": fake_product_name(),
        "category": fake_category(),
        "price": fake_price(10, 2000),
    }


def fake_user_data() -> Dict[str, Any]:
    return {
        "name": fake_name(),
        "email": fake_email(),
    }


__all__ = [
    "PRODUCT_CATEGORIES",
    "fake_category",
    "fake_email",
    "fake_id",
    "fake_name",
    "fake_price",
    "fake_product_data",
    "fake_product_name",
    "fake_text",
    "fake_user_data",
    "reseed",
]
