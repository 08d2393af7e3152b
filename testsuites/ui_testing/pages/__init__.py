"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for The Internet demo pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Transitions returning the next page object

Author: Automation Team
License: MIT
================================================================================
"""

from .dropdown_page import DropDownPage
from .home_page import HomePage
from .iframe_page import IframeEditorPage, IframePage
from .javascript_alert_page import JavaScriptAlertPage

__all__ = [
    "DropDownPage",
    "HomePage",
    "IframeEditorPage",
    "IframePage",
    "JavaScriptAlertPage",
]
