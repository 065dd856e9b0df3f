#!/usr/bin/env python3
"""
Readiness predicates and the waits built on them.

Locator predicates take a SessionHandle and resolve the locator on every
poll, so an absent element is simply "not yet". Handle predicates take a
live element and never re-resolve it: if the node is detached from the
document the wait fails with StaleElementError instead of reading a
different node.
"""

import logging

from selenium.common.exceptions import (JavascriptException,
                                        NoSuchElementException,
                                        StaleElementReferenceException)

from ..exceptions import ElementNotFoundError, StaleElementError, WaitTimeoutError
from .poller import found, pending, wait_for

logger = logging.getLogger(__name__)

READY_STATE_COMPLETE = "complete"


def is_locator(target):
    """True if ``target`` is a locator rather than a live element."""
    return hasattr(target, "as_tuple")


def _handle_state(element, target):
    """Run a state query on a handle, translating staleness."""
    try:
        return element.is_displayed(), element.is_enabled()
    except StaleElementReferenceException as e:
        raise StaleElementError(target, e.msg) from e


# Locator predicates

def element_exists(locator):
    """Element matching ``locator`` is present in the document."""
    def predicate(session):
        try:
            return found(session.find_element(locator))
        except NoSuchElementException:
            return pending("absent")
    predicate.__name__ = f"presence of {locator}"
    return predicate


def element_displayed(locator):
    """Element matching ``locator`` is present and visible."""
    def predicate(session):
        try:
            element = session.find_element(locator)
            if element.is_displayed():
                return found(element)
            return pending("hidden")
        except NoSuchElementException:
            return pending("absent")
        except StaleElementReferenceException:
            return pending("replaced")
    predicate.__name__ = f"visibility of {locator}"
    return predicate


def element_invisible(locator):
    """Element matching ``locator`` is absent or hidden."""
    def predicate(session):
        try:
            if session.find_element(locator).is_displayed():
                return pending("visible")
        except (NoSuchElementException, StaleElementReferenceException):
            pass
        return found(True)
    predicate.__name__ = f"invisibility of {locator}"
    return predicate


def element_clickable(locator):
    """Element matching ``locator`` is present, visible and enabled."""
    def predicate(session):
        try:
            element = session.find_element(locator)
            if not element.is_displayed():
                return pending("hidden")
            if not element.is_enabled():
                return pending("disabled")
            return found(element)
        except NoSuchElementException:
            return pending("absent")
        except StaleElementReferenceException:
            return pending("replaced")
    predicate.__name__ = f"clickability of {locator}"
    return predicate


# Handle predicates

def handle_displayed(label=None):
    """The element passed as the wait target is visible."""
    def predicate(element):
        displayed, _ = _handle_state(element, label or element)
        return found(element) if displayed else pending("hidden")
    predicate.__name__ = f"visibility of {label or 'element'}"
    return predicate


def handle_clickable(label=None):
    """The element passed as the wait target is visible and enabled."""
    def predicate(element):
        displayed, enabled = _handle_state(element, label or element)
        if not displayed:
            return pending("hidden")
        if not enabled:
            return pending("disabled")
        return found(element)
    predicate.__name__ = f"clickability of {label or 'element'}"
    return predicate


# Session predicates

def document_ready(session):
    """The document's readyState is "complete"."""
    state = session.ready_state()
    if state == READY_STATE_COMPLETE:
        return found(True)
    return pending(f"readyState={state}")


document_ready.__name__ = "document ready"


# Waits

def _timeout(session, timeout):
    return session.control_timeout if timeout is None else timeout


def wait_for_element(session, locator, timeout=None):
    """
    Wait for an element to be present.

    Raises:
        ElementNotFoundError: If the element is still absent at timeout
    """
    try:
        return wait_for(session, element_exists(locator), _timeout(session, timeout),
                        poll_interval=session.poll_interval, clock=session.clock)
    except WaitTimeoutError as e:
        raise ElementNotFoundError(locator, e.elapsed) from e


def wait_for_displayed(session, target, timeout=None):
    """
    Wait for a locator or element to be visible and return the element.

    Raises:
        WaitTimeoutError: If the element is absent or hidden at timeout
        StaleElementError: If an element handle goes stale
    """
    timeout = _timeout(session, timeout)
    if is_locator(target):
        return wait_for(session, element_displayed(target), timeout,
                        poll_interval=session.poll_interval, clock=session.clock)
    return wait_for(target, handle_displayed(), timeout,
                    poll_interval=session.poll_interval, clock=session.clock)


def wait_until_clickable(session, target, timeout=None):
    """
    Wait for a locator or element to be visible and enabled.

    Raises:
        WaitTimeoutError: If the element is not clickable at timeout
        StaleElementError: If an element handle goes stale
    """
    timeout = _timeout(session, timeout)
    if is_locator(target):
        return wait_for(session, element_clickable(target), timeout,
                        poll_interval=session.poll_interval, clock=session.clock)
    return wait_for(target, handle_clickable(), timeout,
                    poll_interval=session.poll_interval, clock=session.clock)


def wait_for_invisibility(session, locator, timeout=None):
    """Wait for a locator to match nothing visible, e.g. a loading overlay."""
    return wait_for(session, element_invisible(locator), _timeout(session, timeout),
                    poll_interval=session.poll_interval, clock=session.clock)


def wait_for_document_ready(session, timeout=None):
    """
    Wait for the page to finish loading.

    Defaults to the session's extended timeout, since full navigations take
    much longer than widget state changes.
    Script errors raised while the old document unloads count as "not yet".
    """
    timeout = session.extended_timeout if timeout is None else timeout
    return wait_for(session, document_ready, timeout,
                    poll_interval=session.poll_interval,
                    ignored_exceptions=(JavascriptException,), clock=session.clock)
