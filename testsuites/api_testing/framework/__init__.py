"""
================================================================================
API Testing Framework
================================================================================

HTTP client hierarchy for the storefront API.

Modules:
    - http_client: BaseClient with response classification and Allure logging
    - clients: Product / User / Analytics typed clients
    - client_factory: registry-based client creation
    - session: per-test client lifecycle
    - models: request and response records
    - builders: fluent payload and request builders
    - errors: API client error taxonomy

Author: Automation Team
License: MIT
================================================================================
"""

from .builders import HttpRequestBuilder, PreparedRequest, ProductRequestBuilder
from .client_factory import ApiClientFactory, ApiClientType
from .clients import AnalyticsClient, ProductApiClient, UserApiClient
from .errors import (
    AccessDeniedError,
    ApiClientError,
    BadRequestError,
    DeserializationError,
    HttpStatusError,
    NotFoundError,
    RequestFailedError,
    ServerError,
    TransportError,
)
from .http_client import BaseClient
from .session import ApiTestSession

__all__ = [
    "AccessDeniedError",
    "AnalyticsClient",
    "ApiClientError",
    "ApiClientFactory",
    "ApiClientType",
    "ApiTestSession",
    "BadRequestError",
    "BaseClient",
    "DeserializationError",
    "HttpRequestBuilder",
    "HttpStatusError",
    "NotFoundError",
    "PreparedRequest",
    "ProductApiClient",
    "ProductRequestBuilder",
    "RequestFailedError",
    "ServerError",
    "TransportError",
    "UserApiClient",
]
