"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Hierarchical YAML configuration loading
    - Environment variable override (API_BASE_URL overrides api.base_url)
    - Dot notation path access
    - Typed section binding (PlaywrightSettings, ApiClientSettings)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from loguru import logger
from pydantic import BaseModel, ValidationError


# Default configuration file path, overridable with STOREFRONT_CONFIG
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"
CONFIG_PATH_ENV = "STOREFRONT_CONFIG"
TRUTHY = ("true", "1", "yes", "on")

SettingsT = TypeVar("SettingsT", bound=BaseModel)


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Process-wide view of config.yaml with per-key environment overrides.

    A key resolves from the environment (api.base_url -> API_BASE_URL), then
    from the file, then from the caller's default.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("api.base_url", "http://localhost:5000")
        'http://localhost:5000'

        >>> settings = config.get_settings("playwright", PlaywrightSettings)
        >>> settings.viewport_width
        1280
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """One loader per process; later constructions return it unchanged."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Args:
            config_path: YAML file to read. $STOREFRONT_CONFIG, then
                DEFAULT_CONFIG_PATH, when omitted.
        """
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get(CONFIG_PATH_ENV)
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._config: Dict[str, Any] = {}
        self._load_config()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load_config(self) -> None:
        """Read the YAML file; a missing file leaves the mapping empty."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dotted key such as "api.timeout_ms".

        API_TIMEOUT_MS in the environment wins over the file, and the type of
        default decides how that string is converted.
        """
        env_key = self._env_key(key)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        node: Any = self._config
        for part in key.split("."):
            node = node.get(part) if isinstance(node, dict) else None
            if node is None:
                return default
        return node

    def get_section(self, section: str) -> Dict[str, Any]:
        """Shallow copy of a top-level mapping, {} when absent."""
        value = self._config.get(section, {})
        return dict(value) if isinstance(value, dict) else {}

    def get_settings(self, section: str, model: Type[SettingsT]) -> SettingsT:
        """
        Bind a configuration section to a settings model.

        Each model field can be overridden by SECTION_FIELD in the
        environment (e.g. PLAYWRIGHT_HEADLESS=false).

        Raises:
            ConfigurationError: When the section does not satisfy the model
        """
        raw = self.get_section(section)
        for field_name in model.model_fields:
            env_value = os.environ.get(self._env_key(f"{section}.{field_name}"))
            if env_value is not None:
                raw[field_name] = env_value

        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid '{section}' configuration for {model.__name__}: {e}"
            ) from e

    def reload(self) -> None:
        """Re-read the file this loader was created with."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @staticmethod
    def _env_key(key: str) -> str:
        return key.upper().replace(".", "_")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """Coerce an environment string to the type of reference, if it parses."""
        # bool first: it is a subclass of int
        if isinstance(reference, bool):
            return value.strip().lower() in TRUTHY
        for numeric in (int, float):
            if isinstance(reference, numeric):
                try:
                    return numeric(value)
                except ValueError:
                    return value
        return value

    @classmethod
    def reset(cls) -> None:
        """Forget the process-wide loader so the next one reads afresh."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
]
