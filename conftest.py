"""
Repository-level pytest configuration.

  - Expose the repository root to fixtures
  - Configure loguru once per session from config/config.yaml
  - Keep storefront credentials out of the code: values come from
    config/config.yaml or the environment (CREDENTIALS_USERNAME, ...)
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from storefront_tools import ConfigLoader, init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> Generator[None, None, None]:
    """Install the console sink before any test logs."""
    init_logger()
    yield


@pytest.fixture(scope="session")
def config() -> ConfigLoader:
    """
    Provide configuration loader instance.

    Session-scoped to ensure configuration is loaded only once.
    """
    return ConfigLoader()
