#!/usr/bin/env python3
"""
Session bootstrap with bounded retry.

SessionBootstrapper.acquire() resolves a launch variant, starts the browser,
applies the session timeout policy, clears cookies, navigates to the start
URL and waits for the document to load. Transient failures in any of those
steps are retried up to ``max_attempts`` times; anything else aborts at
once. A browser that started but failed setup is quit before the next
attempt, so a caller only ever receives a fully configured session.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from urllib.parse import urlparse

from ..browser.driver import is_transient_launch_failure, start_webdriver
from ..browser.session import SessionHandle, TimeoutPolicy
from ..browser.variants import resolve_variant
from ..config import Configuration
from ..exceptions import (BootstrapConfigurationError, LaunchExhaustedError,
                          ProgrammingError)
from .conditions import wait_for_document_ready
from .poller import SYSTEM_CLOCK

logger = logging.getLogger(__name__)


class BootstrapState(Enum):
    IDLE = "idle"
    LAUNCHING = "launching"
    CONFIGURING = "configuring"
    READY = "ready"
    FAILED = "failed"


@dataclass
class RetryState:
    """Attempt bookkeeping for one acquisition."""

    max_attempts: int
    attempt: int = 0
    messages: List[str] = field(default_factory=list)

    def next_attempt(self) -> int:
        self.attempt += 1
        return self.attempt

    def record(self, error: BaseException) -> str:
        message = f"Exception {self.attempt}: {error}".rstrip()
        self.messages.append(message)
        return message

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_attempts

    def summary(self) -> str:
        return " | ".join(self.messages)


def validate_url(url):
    """Raise ValueError unless ``url`` has a scheme and a host."""
    parsed = urlparse(str(url))
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid URL: {url!r}")


class SessionBootstrapper:
    """
    Acquires configured browser sessions.

    Args:
        config: Configuration with timeout and retry policy
        launcher: Callable starting a WebDriver from a LaunchConfiguration
        clock: Clock for retry delays and readiness waits
    """

    def __init__(self, config: Optional[Configuration] = None, launcher=start_webdriver, clock=None):
        self.config = config or Configuration()
        self.launcher = launcher
        self.clock = clock or SYSTEM_CLOCK
        self.state = BootstrapState.IDLE

    def acquire(self, variant, url, clear_cookies=True) -> SessionHandle:
        """
        Start a browser for ``variant`` and navigate it to ``url``.

        Args:
            variant: LaunchVariant to start
            url: Start page
            clear_cookies: Delete all cookies before navigating

        Returns:
            SessionHandle: Configured session; ``attempts`` is the attempt
            that succeeded

        Raises:
            ProgrammingError: If the variant has no configuration builder
            BootstrapConfigurationError: On a non-transient failure
            LaunchExhaustedError: If every attempt failed transiently
        """
        self.state = BootstrapState.IDLE
        launch = resolve_variant(variant, self.config)
        variant = launch.variant

        try:
            validate_url(url)
        except ValueError as e:
            self.state = BootstrapState.FAILED
            raise BootstrapConfigurationError(
                f"Cannot start {variant.value} browser: {e}", variant=variant, url=url,
            ) from e

        retry = RetryState(max_attempts=self.config.max_attempts)

        while True:
            attempt = retry.next_attempt()
            session = None
            try:
                self.state = BootstrapState.LAUNCHING
                logger.info("Launching %s browser for %s (attempt %d/%d)",
                            variant.value, url, attempt, retry.max_attempts)
                driver = self.launcher(launch)
                session = SessionHandle(driver, variant=variant, config=self.config,
                                        clock=self.clock, attempts=attempt)

                self.state = BootstrapState.CONFIGURING
                self._configure(session, url, clear_cookies)

                self.state = BootstrapState.READY
                logger.info("Browser session ready: %s at %s (attempt %d)", variant.value, url, attempt)
                return session

            except ProgrammingError:
                self._teardown(session)
                self.state = BootstrapState.FAILED
                raise

            except Exception as e:
                message = retry.record(e)
                self._teardown(session)

                if not is_transient_launch_failure(e):
                    self.state = BootstrapState.FAILED
                    raise BootstrapConfigurationError(
                        f"Failed to start {variant.value} browser for {url} "
                        f"on attempt {attempt}: {e}",
                        variant=variant, url=url, attempts=attempt, messages=retry.messages,
                    ) from e

                logger.warning("Browser start failed (attempt %d/%d): %s",
                               attempt, retry.max_attempts, message)

                if retry.exhausted:
                    self.state = BootstrapState.FAILED
                    raise LaunchExhaustedError(
                        f"Failed to start {variant.value} browser for {url} in a timely manner "
                        f"after {attempt} attempts - {retry.summary()}",
                        variant=variant, url=url, attempts=attempt, messages=retry.messages,
                    ) from e

                if self.config.retry_delay > 0:
                    logger.debug("Retrying browser start in %ss", self.config.retry_delay)
                    self.clock.sleep(self.config.retry_delay)

    def _configure(self, session, url, clear_cookies):
        """Apply timeouts, clear cookies, navigate and wait for the page."""
        timeout = self.config.default_timeout
        session.apply_timeouts(TimeoutPolicy(page_load=timeout, script=timeout))
        if clear_cookies:
            session.delete_all_cookies()
        session.navigate(url)
        if self.config.wait_for_ready:
            wait_for_document_ready(session)

    def _teardown(self, session):
        if session is None:
            return
        try:
            session.quit()
        except Exception as e:
            logger.warning("Error quitting partially started browser: %s", e)


def acquire_session(variant, url, clear_cookies=True, config=None, launcher=start_webdriver, clock=None):
    """
    Acquire a configured browser session.

    Convenience wrapper around SessionBootstrapper.acquire().
    """
    bootstrapper = SessionBootstrapper(config=config, launcher=launcher, clock=clock)
    return bootstrapper.acquire(variant, url, clear_cookies=clear_cookies)
