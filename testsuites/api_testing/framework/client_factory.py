"""
================================================================================
API Client Factory
================================================================================

Creates typed API clients by resource tag without callers knowing the
concrete class or how the transport is configured.

Usage:
    >>> client = ApiClientFactory.create_client(ApiClientType.PRODUCT)
    >>> with ApiClientFactory.create_user_client(logger=case_logger) as users:
    ...     users.get_users()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Type, Union

import httpx

from storefront_tools.config import ConfigLoader
from storefront_tools.settings import ApiClientSettings

from .clients import AnalyticsClient, ProductApiClient, UserApiClient
from .http_client import BaseClient


class ApiClientType(str, Enum):
    """Resource tags understood by the factory."""

    PRODUCT = "product"
    USER = "user"
    ANALYTICS = "analytics"


def create_transport(config: Optional[ConfigLoader] = None) -> httpx.Client:
    """
    Build the transport handle from the ``api`` configuration section.

    Non-2xx responses never raise at this level; BaseClient classifies them.
    """
    config = config or ConfigLoader()
    settings = config.get_settings("api", ApiClientSettings)
    return httpx.Client(
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
    )


class ApiClientFactory:
    """Registry-based factory for typed API clients."""

    _registry: Dict[ApiClientType, Type[BaseClient]] = {
        ApiClientType.PRODUCT: ProductApiClient,
        ApiClientType.USER: UserApiClient,
        ApiClientType.ANALYTICS: AnalyticsClient,
    }

    @classmethod
    def create_client(
        cls,
        client_type: Union[ApiClientType, str],
        config: Optional[ConfigLoader] = None,
        logger: Any = None,
    ) -> BaseClient:
        """
        Create a client for the given resource tag.

        Raises:
            ValueError: For unsupported client types
        """
        client_class = cls._registry.get(cls._resolve(client_type))
        if client_class is None:
            raise ValueError(f"Unsupported client type: {client_type}")

        return client_class(create_transport(config), logger=logger)

    @classmethod
    def create_product_client(
        cls,
        config: Optional[ConfigLoader] = None,
        logger: Any = None,
    ) -> ProductApiClient:
        return cls.create_client(ApiClientType.PRODUCT, config, logger)

    @classmethod
    def create_user_client(
        cls,
        config: Optional[ConfigLoader] = None,
        logger: Any = None,
    ) -> UserApiClient:
        return cls.create_client(ApiClientType.USER, config, logger)

    @classmethod
    def create_analytics_client(
        cls,
        config: Optional[ConfigLoader] = None,
        logger: Any = None,
    ) -> AnalyticsClient:
        return cls.create_client(ApiClientType.ANALYTICS, config, logger)

    @staticmethod
    def _resolve(client_type: Union[ApiClientType, str]) -> Optional[ApiClientType]:
        if isinstance(client_type, ApiClientType):
            return client_type
        try:
            return ApiClientType(str(client_type).lower())
        except ValueError:
            return None


__all__ = [
    "ApiClientFactory",
    "ApiClientType",
    "create_transport",
]
