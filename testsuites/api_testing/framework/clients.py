"""
================================================================================
Typed API Clients
================================================================================

Resource-specific clients built on BaseClient:

    - ProductApiClient: CRUD and category filtering under /api/products
    - UserApiClient: login and user listing under /api/users
    - AnalyticsClient: sales analytics from /api/analytics

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List

import httpx

from .http_client import BaseClient
from .models import AnalyticsResponse, LoginRequest, LoginResponse, ProductRequest, User


PRODUCTS_PATH = "/api/products"
USERS_PATH = "/api/users"
ANALYTICS_PATH = "/api/analytics"

TEST_REQUEST_HEADER = "X-Test-Request"


class ProductApiClient(BaseClient):
    """
    Client for product operations.

    The product service echoes the full product record (price included), so
    responses are validated as ProductRequest.
    """

    def create_product(self, product: ProductRequest, is_test_request: bool = False) -> ProductRequest:
        headers = {TEST_REQUEST_HEADER: "true"} if is_test_request else None
        return self.post(PRODUCTS_PATH, product, ProductRequest, headers=headers)

    def get_product(self, product_id: int) -> ProductRequest:
        return self.get(f"{PRODUCTS_PATH}/{product_id}", ProductRequest)

    def get_products(self) -> List[ProductRequest]:
        return self.get(PRODUCTS_PATH, List[ProductRequest])

    def update_product(self, product_id: int, product: ProductRequest) -> ProductRequest:
        return self.put(f"{PRODUCTS_PATH}/{product_id}", product, ProductRequest)

    def delete_product(self, product_id: int) -> None:
        self.delete(f"{PRODUCTS_PATH}/{product_id}")

    def get_products_by_category(self, category: str) -> List[ProductRequest]:
        return self.get(PRODUCTS_PATH, List[ProductRequest], params={"category": category})


class UserApiClient(BaseClient):
    """Client for authentication and user listing."""

    def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate with username and password.

        Raises:
            AccessDeniedError: When the credentials are rejected
        """
        return self.post(f"{USERS_PATH}/login", request, LoginResponse)

    def get_users(self) -> List[User]:
        return self.get(USERS_PATH, List[User])


class AnalyticsClient(BaseClient):
    """Client for the sales analytics endpoint."""

    def get_analytics(self) -> AnalyticsResponse:
        return self.get(ANALYTICS_PATH, AnalyticsResponse)

    def get_analytics_raw(self) -> httpx.Response:
        return self.get_raw(ANALYTICS_PATH)


__all__ = [
    "AnalyticsClient",
    "ProductApiClient",
    "TEST_REQUEST_HEADER",
    "UserApiClient",
]
