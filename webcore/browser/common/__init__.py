"""
Common browser interfaces module.

This package contains the protocols shared by the session, wait and
action layers.
"""

from .interface import BrowserDriver, BrowserElement

__all__ = ["BrowserDriver", "BrowserElement"]
