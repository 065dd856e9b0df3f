"""
Web test core package.

This package provides readiness-gated waits and actions for Selenium
driven UI tests, and a retrying bootstrapper that hands out configured
browser sessions.
"""

__version__ = "1.0.0"

from .config import Configuration, TimeoutsInSeconds, load_config, save_config
from .exceptions import (BootstrapConfigurationError, BootstrapError,
                         ElementNotFoundError, InteractionTimeout,
                         LaunchExhaustedError, ProgrammingError,
                         StaleElementError, TargetError, WaitTimeoutError,
                         WebTestError)
from .core.poller import Clock, wait_for
from .browser import BasePage, LaunchVariant, Locator, SessionHandle
from .core.bootstrap import BootstrapState, SessionBootstrapper, acquire_session

__all__ = [
    "Configuration",
    "TimeoutsInSeconds",
    "load_config",
    "save_config",
    "Clock",
    "wait_for",
    "Locator",
    "SessionHandle",
    "LaunchVariant",
    "BasePage",
    "SessionBootstrapper",
    "BootstrapState",
    "acquire_session",
    "WebTestError",
    "WaitTimeoutError",
    "InteractionTimeout",
    "TargetError",
    "ElementNotFoundError",
    "StaleElementError",
    "BootstrapError",
    "LaunchExhaustedError",
    "BootstrapConfigurationError",
    "ProgrammingError",
]
