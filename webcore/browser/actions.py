#!/usr/bin/env python3
"""
Element actions gated on readiness.

Each action waits for the element to reach the state it needs before
touching it. Write actions wait for clickability and are never attempted if
that wait times out; reads wait for visibility (and for any navigation a
previous click started) before reading.

``target`` is either a Locator, resolved against the session on every poll,
or an element handle already obtained from the session. ``timeout`` defaults
to the session's control timeout.
"""

import logging
from typing import List

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.by import By
from selenium.webdriver.support.select import Select

from ..core.conditions import (wait_for_displayed, wait_for_document_ready,
                               wait_until_clickable)
from ..exceptions import InteractionTimeout, StaleElementError, WaitTimeoutError

logger = logging.getLogger(__name__)

TABLE_ROWS_SELECTOR = "tbody tr"


def _clickable(session, target, timeout):
    try:
        return wait_until_clickable(session, target, timeout)
    except WaitTimeoutError as e:
        raise InteractionTimeout(e.description, e.timeout, e.elapsed, e.last_state) from e


def _act(target, action, *args):
    try:
        return action(*args)
    except StaleElementReferenceException as e:
        raise StaleElementError(target, e.msg) from e


def click(session, target, timeout=None, navigation_timeout=None):
    """
    Click an element once it is clickable, then wait for the page to settle.

    Args:
        session: SessionHandle
        target: Locator or element handle
        timeout: Clickability timeout in seconds
        navigation_timeout: Document-ready timeout after the click;
            defaults to the session's extended timeout

    Raises:
        InteractionTimeout: If the element never became clickable
    """
    element = _clickable(session, target, timeout)
    _act(target, element.click)
    wait_for_document_ready(session, navigation_timeout)


def javascript_click(session, target, timeout=None):
    """Click through the DOM, for elements covered by overlays."""
    element = wait_for_displayed(session, target, timeout)
    _act(target, session.execute_script, "arguments[0].click()", element)


def enter_text(session, target, value, timeout=None, clear=False):
    """Type ``value`` into an input once it is clickable."""
    element = _clickable(session, target, timeout)
    if clear:
        _act(target, element.clear)
    _act(target, element.send_keys, value)


def select_dropdown(session, target, text, timeout=None):
    """Select the option whose visible text is ``text``."""
    element = _clickable(session, target, timeout)
    _act(target, Select(element).select_by_visible_text, text)


def set_checkbox(session, target, checked, timeout=None):
    """
    Bring a checkbox to the requested state, clicking only if needed.

    Returns:
        bool: True if the checkbox was clicked
    """
    element = _clickable(session, target, timeout)
    if _act(target, element.is_selected) == checked:
        return False
    _act(target, element.click)
    return True


def select_checkbox(session, target, timeout=None):
    return set_checkbox(session, target, True, timeout)


def unselect_checkbox(session, target, timeout=None):
    return set_checkbox(session, target, False, timeout)


def get_text(session, target, timeout=None):
    """
    Read an element's text once it is visible and the page has loaded.

    Returns:
        str: The element's text; an empty string means the element has none
    """
    element = wait_for_displayed(session, target, timeout)
    wait_for_document_ready(session)
    return _act(target, lambda: element.text) or ""


def get_text_when_shown(session, target, timeout=None):
    """Read an element's text as soon as it is visible."""
    element = wait_for_displayed(session, target, timeout)
    return _act(target, lambda: element.text) or ""


def get_selected_option_text(session, target, timeout=None):
    """Read the visible text of a dropdown's selected option."""
    element = wait_for_displayed(session, target, timeout)
    option = _act(target, lambda: Select(element).first_selected_option)
    return _act(target, lambda: option.text) or ""


def get_table_rows(session, target, timeout=None) -> List:
    """Return the body rows of a table once it is visible and loaded."""
    element = wait_for_displayed(session, target, timeout)
    wait_for_document_ready(session)
    rows = _act(target, element.find_elements, By.CSS_SELECTOR, TABLE_ROWS_SELECTOR)
    logger.debug("Read %d table rows from %s", len(rows), target)
    return rows
