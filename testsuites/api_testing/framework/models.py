"""
================================================================================
API Models
================================================================================

Request and response records exchanged with the storefront API.

Attributes are snake_case in Python and camelCase on the wire. Unknown
response fields are ignored; missing required fields fail validation.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


# Prices stay exact in Python and travel as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ApiModel(BaseModel):
    """Base for wire records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProductRequest(ApiModel):
    id: Optional[int] = None
    name: str
    category: str
    price: Money


class Product(ApiModel):
    id: int
    name: str
    category: str


class TopProduct(Product):
    quantity: int


class MergedProduct(ApiModel):
    id: int
    name: str
    category: str
    price: Money
    status: str


class AnalyticsResponse(ApiModel):
    total_revenue: Money
    top_products: List[TopProduct] = Field(default_factory=list)
    sales_by_category: Dict[str, int] = Field(default_factory=dict)
    merged_products: List[MergedProduct] = Field(default_factory=list)

    def top_product_by_quantity(self) -> Optional[TopProduct]:
        if not self.top_products:
            return None
        return max(self.top_products, key=lambda product: product.quantity)


class LoginRequest(ApiModel):
    username: str
    password: str


class LoginResponse(ApiModel):
    message: str
    role: Optional[str] = None


class User(ApiModel):
    id: int
    name: Optional[str] = None
    email: str
    created_at: Optional[datetime] = None


__all__ = [
    "AnalyticsResponse",
    "LoginRequest",
    "LoginResponse",
    "MergedProduct",
    "Money",
    "Product",
    "ProductRequest",
    "TopProduct",
    "User",
]
