"""
Browser module for session handles, launch variants and element actions.

This package contains the locator and session types, the launch variant
table, WebDriver startup, and the readiness-gated element actions.
"""

from .actions import (click, enter_text, get_selected_option_text,
                      get_table_rows, get_text, get_text_when_shown,
                      javascript_click, select_checkbox, select_dropdown,
                      set_checkbox, unselect_checkbox)
from .driver import is_transient_launch_failure, start_webdriver
from .locator import Locator
from .page import BasePage
from .session import SessionHandle, TimeoutPolicy
from .variants import (BrowserFamily, LaunchConfiguration, LaunchVariant,
                       resolve_variant)

__all__ = [
    "Locator",
    "SessionHandle",
    "TimeoutPolicy",
    "BasePage",
    "BrowserFamily",
    "LaunchVariant",
    "LaunchConfiguration",
    "resolve_variant",
    "start_webdriver",
    "is_transient_launch_failure",
    "click",
    "javascript_click",
    "enter_text",
    "select_dropdown",
    "set_checkbox",
    "select_checkbox",
    "unselect_checkbox",
    "get_text",
    "get_text_when_shown",
    "get_selected_option_text",
    "get_table_rows",
]
