#!/usr/bin/env python3
"""
Exception types raised by the waiting and session bootstrap layers.

Selenium exceptions are translated into these types at the point where a
wait gives up or a launch is abandoned, so callers only need to handle one
hierarchy.
"""

from typing import List, Optional


class WebTestError(Exception):
    """Base exception for all web test failures."""

    pass


class WaitTimeoutError(WebTestError):
    """A wait predicate was never satisfied within its budget."""

    def __init__(self, description, timeout, elapsed, last_state=None):
        self.description = description
        self.timeout = timeout
        self.elapsed = elapsed
        self.last_state = last_state
        message = f"Timed out after {elapsed:.2f}s (limit {timeout}s) waiting for {description}"
        if last_state:
            message += f"; last observed: {last_state}"
        super().__init__(message)


class InteractionTimeout(WaitTimeoutError):
    """An element never became clickable, so the action was not attempted."""

    pass


class TargetError(WebTestError):
    """The element a locator or handle refers to is not usable."""

    def __init__(self, message, target=None):
        self.target = target
        super().__init__(message)


class ElementNotFoundError(TargetError):
    """Element was not found on the page."""

    def __init__(self, target, elapsed=None):
        self.elapsed = elapsed
        message = f"Could not find element {target} on page"
        if elapsed is not None:
            message += f" after {elapsed:.2f}s"
        super().__init__(message, target)


class StaleElementError(TargetError):
    """Element handle was invalidated by a document change."""

    def __init__(self, target, detail=None):
        message = f"Element {target} is no longer attached to the document"
        if detail:
            message += f" ({detail})"
        super().__init__(message, target)


class BootstrapError(WebTestError):
    """Browser session could not be acquired."""

    def __init__(self, message, variant=None, url=None, attempts=0,
                 messages: Optional[List[str]] = None):
        self.variant = variant
        self.url = url
        self.attempts = attempts
        self.messages = list(messages or [])
        super().__init__(message)


class LaunchExhaustedError(BootstrapError):
    """Every launch attempt failed transiently."""

    pass


class BootstrapConfigurationError(BootstrapError):
    """Launch or setup failed for a reason retrying will not fix."""

    pass


class ProgrammingError(Exception):
    """A launch variant has no configuration builder. Not a WebTestError."""

    pass
