"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Readers for rendered state

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .user_page import UserPage
from .web_elements_page import WebElementsPage

__all__ = [
    "LoginPage",
    "UserPage",
    "WebElementsPage",
]
