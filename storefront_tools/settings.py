"""
================================================================================
Typed Settings
================================================================================

Strongly-typed views over configuration sections.

Sections:
    - api: ApiClientSettings (base URL, timeout)
    - playwright: PlaywrightSettings (browser engine, viewport, timeouts)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BrowserType(str, Enum):
    """Supported Playwright browser engines."""

    CHROMIUM = "chromium"
    CHROME = "chrome"
    EDGE = "edge"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


class ApiClientSettings(BaseModel):
    """Maps to the ``api`` section of config.yaml."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:5000"
    timeout_ms: int = 30000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


class PlaywrightSettings(BaseModel):
    """Maps to the ``playwright`` section of config.yaml."""

    model_config = ConfigDict(frozen=True)

    browser_type: BrowserType = BrowserType.CHROMIUM
    headless: bool = True
    base_url: str = ""
    base_api_host: str = ""
    default_timeout_ms: int = 30000
    viewport_width: int = 1280
    viewport_height: int = 800
    slow_mo_ms: int = 0
    enable_tracing: bool = False
    record_video: bool = False

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}


__all__ = [
    "ApiClientSettings",
    "BrowserType",
    "PlaywrightSettings",
]
