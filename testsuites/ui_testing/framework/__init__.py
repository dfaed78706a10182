"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - browser_manager: Browser lifecycle management
    - page_base: Base page object for common operations
    - helpers: Screenshot, popup and dialog helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .helpers import capture_on_failure, handle_dialog, handle_popup, take_screenshot
from .page_base import BasePage

__all__ = [
    "BasePage",
    "BrowserManager",
    "capture_on_failure",
    "handle_dialog",
    "handle_popup",
    "take_screenshot",
]
