#!/usr/bin/env python3
"""
Browser session handle.

A SessionHandle owns exactly one live WebDriver. It is created by the
session bootstrapper and passed explicitly to every wait and action; nothing
in this package keeps a process-wide driver reference.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from selenium.common.exceptions import WebDriverException

from ..config import Configuration
from ..core.poller import SYSTEM_CLOCK, Clock
from .common.interface import BrowserDriver

logger = logging.getLogger(__name__)

READY_STATE_SCRIPT = "return document.readyState"


@dataclass(frozen=True)
class TimeoutPolicy:
    """Timeouts applied to a session at configuration time."""

    page_load: float
    script: float
    implicit: float = 0


class SessionHandle:
    """
    One live browser session.

    Attributes:
        driver: The underlying WebDriver
        variant: LaunchVariant the session was started with
        attempts: Launch attempt that produced this session (1-based)
        config: Configuration supplying default wait timeouts
        clock: Clock used by waits issued against this session
    """

    def __init__(self, driver: BrowserDriver, variant=None, config: Optional[Configuration] = None,
                 clock: Optional[Clock] = None, attempts: int = 1):
        self.driver = driver
        self.variant = variant
        self.config = config or Configuration()
        self.clock = clock or SYSTEM_CLOCK
        self.attempts = attempts
        self._timeouts: Optional[TimeoutPolicy] = None
        self._closed = False

    @property
    def timeouts(self) -> Optional[TimeoutPolicy]:
        """Timeout policy applied during configuration, or None before then."""
        return self._timeouts

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def control_timeout(self) -> float:
        return self.config.control_timeout

    @property
    def extended_timeout(self) -> float:
        return self.config.extended_timeout

    @property
    def poll_interval(self) -> float:
        return self.config.poll_interval

    def apply_timeouts(self, policy: TimeoutPolicy) -> None:
        """
        Apply the session-wide timeout policy.

        Called once by the bootstrapper; a second call raises so the policy
        stays fixed for the life of the session.
        """
        if self._timeouts is not None:
            raise RuntimeError("Timeout policy has already been applied to this session")
        self.driver.set_page_load_timeout(policy.page_load)
        self.driver.set_script_timeout(policy.script)
        self.driver.implicitly_wait(policy.implicit)
        self._timeouts = policy

    def find_element(self, locator):
        """Resolve ``locator`` to one element; raises NoSuchElementException if absent."""
        return self.driver.find_element(*locator.as_tuple())

    def find_elements(self, locator):
        return self.driver.find_elements(*locator.as_tuple())

    def execute_script(self, script, *args):
        return self.driver.execute_script(script, *args)

    def ready_state(self) -> str:
        """Return the document's readyState."""
        return self.execute_script(READY_STATE_SCRIPT)

    def delete_all_cookies(self) -> None:
        self.driver.delete_all_cookies()

    def navigate(self, url: str) -> None:
        logger.debug("Navigating to %s", url)
        self.driver.get(url)

    def quit(self) -> None:
        """Close the browser. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.driver.quit()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self.quit()
        except WebDriverException as e:
            if exc_type is None:
                raise
            logger.warning("Error quitting browser session after failure: %s", e)
        return False

    def __repr__(self):
        return f"SessionHandle(variant={self.variant}, attempts={self.attempts}, closed={self._closed})"
