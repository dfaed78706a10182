"""
================================================================================
API Test Session
================================================================================

Per-test client lifecycle: create the client, run setup, hand the client to
the test, run teardown and close the client on every exit path.

Usage:
    >>> with ApiTestSession(ApiClientType.PRODUCT, logger=case_logger) as client:
    ...     client.get_products()

    Subclasses override on_setup / on_teardown for suite-specific work:

    >>> class SeededProducts(ApiTestSession):
    ...     def on_setup(self, client):
    ...         self.seed = client.create_product(ProductRequestBuilder().build())

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Union

from storefront_tools.config import ConfigLoader

from .client_factory import ApiClientFactory, ApiClientType
from .http_client import BaseClient


class ApiTestSession:
    """Context manager owning one API client for the duration of a test."""

    def __init__(
        self,
        client_type: Union[ApiClientType, str],
        config: Optional[ConfigLoader] = None,
        logger: Any = None,
    ) -> None:
        self.client_type = client_type
        self.config = config
        self.logger = logger
        self.client: Optional[BaseClient] = None

    def on_setup(self, client: BaseClient) -> None:
        """Hook run after the client is created."""

    def on_teardown(self, client: BaseClient) -> None:
        """Hook run before the client is closed."""

    def __enter__(self) -> BaseClient:
        self.client = ApiClientFactory.create_client(
            self.client_type, self.config, self.logger
        )
        try:
            self.on_setup(self.client)
        except Exception:
            self.client.close()
            raise
        return self.client

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.client is None:
            return
        try:
            self.on_teardown(self.client)
        finally:
            self.client.close()


__all__ = ["ApiTestSession"]
