"""
Utility functions module.

This package contains helpers that are not specific to waiting or
session bootstrap.
"""

from .logger_config import configure_logger

__all__ = ["configure_logger"]
