"""
================================================================================
Request Builders
================================================================================

Fluent builders for API payloads and ad-hoc HTTP requests.

Usage:
    >>> product = (
    ...     ProductRequestBuilder()
    ...     .with_fake_name()
    ...     .with_category("Laptops")
    ...     .with_fake_price(100, 500)
    ...     .build()
    ... )

    >>> request = (
    ...     HttpRequestBuilder()
    ...     .with_method("POST")
    ...     .with_uri("/api/users")
    ...     .with_json_body({"username": "john.doe"})
    ...     .add_header("X-Request-Id", "42")
    ...     .build()
    ... )
    >>> client.send(request, response_type=User)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from storefront_tools import data_faker

from .models import ProductRequest


class ProductRequestBuilder:
    """Builds ProductRequest payloads with sensible defaults."""

    def __init__(self) -> None:
        self._id: Optional[int] = 1
        self._name = "Sample Product"
        self._category = "Laptops"
        self._price = Decimal("999.99")

    def with_id(self, product_id: Optional[int]) -> "ProductRequestBuilder":
        self._id = product_id
        return self

    def with_name(self, name: str) -> "ProductRequestBuilder":
        self._name = name
        return self

    def with_category(self, category: str) -> "ProductRequestBuilder":
        self._category = category
        return self

    def with_price(self, price: Union[Decimal, float, str]) -> "ProductRequestBuilder":
        self._price = Decimal(str(price))
        return self

    def with_fake_data(self) -> "ProductRequestBuilder":
        """Randomize every field."""
        fake = data_faker.fake_product_data()
        self._id = fake["id"]
        self._name = fake["name"]
        self._category = fake["category"]
        self._price = fake["price"]
        return self

    def with_fake_id(self) -> "ProductRequestBuilder":
        self._id = data_faker.fake_id()
        return self

    def with_fake_name(self) -> "ProductRequestBuilder":
        self._name = data_faker.fake_product_name()
        return self

    def with_fake_category(self) -> "ProductRequestBuilder":
        self._category = data_faker.fake_category()
        return self

    def with_fake_price(self, min_price: float = 1, max_price: float = 2000) -> "ProductRequestBuilder":
        self._price = data_faker.fake_price(min_price, max_price)
        return self

    def build(self) -> ProductRequest:
        return ProductRequest(
            id=self._id,
            name=self._name,
            category=self._category,
            price=self._price,
        )


@dataclass(frozen=True)
class PreparedRequest:
    """Immutable description of an HTTP request ready to be sent."""

    method: str
    uri: str
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


class HttpRequestBuilder:
    """Builds PreparedRequest instances with JSON bodies and optional headers."""

    def __init__(self) -> None:
        self._method = "GET"
        self._uri = ""
        self._body: Any = None
        self._headers: Dict[str, str] = {}

    def with_method(self, method: str) -> "HttpRequestBuilder":
        self._method = method.upper()
        return self

    def with_uri(self, uri: str) -> "HttpRequestBuilder":
        self._uri = uri
        return self

    def with_json_body(self, body: Any) -> "HttpRequestBuilder":
        self._body = body
        return self

    def add_header(self, name: str, value: str) -> "HttpRequestBuilder":
        self._headers[name] = value
        return self

    def build(self) -> PreparedRequest:
        """
        Raises:
            ValueError: When no URI was set
        """
        if not self._uri or not self._uri.strip():
            raise ValueError("Request URI must be set.")

        return PreparedRequest(
            method=self._method,
            uri=self._uri,
            body=self._body,
            headers=dict(self._headers),
        )


__all__ = [
    "HttpRequestBuilder",
    "PreparedRequest",
    "ProductRequestBuilder",
]
