"""
================================================================================
API Testing Pytest Configuration
================================================================================

Shared fixtures for live API tests against the storefront backend.

Fixtures:
    - api_available: skips the suite when api.base_url does not answer
    - product_client / user_client / analytics_client: per-test typed clients
    - created_products: ids deleted after the test
    - valid_credentials: login pair from configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Generator, List

import allure
import httpx
import pytest
from loguru import logger

from storefront_tools import ConfigLoader, TestLogger
from testsuites.api_testing.framework import (
    AnalyticsClient,
    ApiClientError,
    ApiClientType,
    ApiTestSession,
    ProductApiClient,
    UserApiClient,
)
from testsuites.api_testing.framework.models import LoginRequest


# =============================================================================
# Session-Scoped Fixtures (Shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def base_url(config: ConfigLoader) -> str:
    """Get API base URL from configuration."""
    return config.get("api.base_url", "http://localhost:5000")


@pytest.fixture(scope="session")
def api_available(base_url: str) -> str:
    """
    Skip live API tests when the backend is not reachable.

    Any HTTP answer counts as reachable.
    """
    try:
        httpx.get(base_url, timeout=3)
    except httpx.TransportError as e:
        pytest.skip(f"Storefront API not reachable at {base_url}: {e}")
    return base_url


@pytest.fixture(scope="session")
def valid_credentials(config: ConfigLoader) -> LoginRequest:
    return LoginRequest(
        username=config.get("credentials.username", "testuser"),
        password=config.get("credentials.password", "password123"),
    )


# =============================================================================
# Function-Scoped Fixtures (Fresh for each test)
# =============================================================================

@pytest.fixture
def product_client(
    api_available: str,
    config: ConfigLoader,
    test_logger: TestLogger,
) -> Generator[ProductApiClient, None, None]:
    """Product client, closed after the test."""
    with ApiTestSession(ApiClientType.PRODUCT, config, test_logger) as client:
        yield client


@pytest.fixture
def user_client(
    api_available: str,
    config: ConfigLoader,
    test_logger: TestLogger,
) -> Generator[UserApiClient, None, None]:
    """User client, closed after the test."""
    with ApiTestSession(ApiClientType.USER, config, test_logger) as client:
        yield client


@pytest.fixture
def analytics_client(
    api_available: str,
    config: ConfigLoader,
    test_logger: TestLogger,
) -> Generator[AnalyticsClient, None, None]:
    """Analytics client, closed after the test."""
    with ApiTestSession(ApiClientType.ANALYTICS, config, test_logger) as client:
        yield client


# =============================================================================
# Cleanup Fixtures
# =============================================================================

@pytest.fixture
def created_products(product_client: ProductApiClient) -> Generator[List[int], None, None]:
    """
    Track and delete created products after the test.

    Usage:
        def test_create(product_client, created_products):
            product = product_client.create_product(payload)
            created_products.append(product.id)
    """
    product_ids: List[int] = []
    yield product_ids

    for product_id in product_ids:
        try:
            product_client.delete_product(product_id)
            logger.debug(f"Cleaned up product: {product_id}")
        except ApiClientError as e:
            logger.warning(f"Failed to cleanup product {product_id}: {e}")


# =============================================================================
# Allure Reporting Hooks
# =============================================================================

def pytest_exception_interact(node, call, report):
    """Attach additional info on test failure."""
    if report.failed:
        error = call.excinfo.value
        allure.attach(
            str(error),
            name="Error Details",
            attachment_type=allure.attachment_type.TEXT
        )
        body = getattr(error, "body", None)
        if body:
            allure.attach(
                body,
                name="Server Response",
                attachment_type=allure.attachment_type.TEXT
            )
