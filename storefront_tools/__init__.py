"""
================================================================================
Storefront Tools
================================================================================

Shared infrastructure for the storefront automation suites.

Modules:
    - config: YAML + environment configuration loader
    - settings: typed configuration sections
    - logger: loguru setup and per-test logger handles
    - json_helper: JSON serialization and parsing helpers
    - data_faker: Faker-based test data
    - reporting: Allure attachment helpers

Example:
    from storefront_tools import ConfigLoader, TestLogger

    config = ConfigLoader()
    base_url = config.get("api.base_url", "http://localhost:5000")

    with TestLogger("SmokeChecks") as log:
        log.info("Target API: {}", base_url)

================================================================================
"""

from .config import ConfigLoader, ConfigurationError
from .logger import TestLogger, init_logger
from .settings import ApiClientSettings, BrowserType, PlaywrightSettings

__version__ = "1.0.0"

__all__ = [
    "ApiClientSettings",
    "BrowserType",
    "ConfigLoader",
    "ConfigurationError",
    "PlaywrightSettings",
    "TestLogger",
    "init_logger",
]
