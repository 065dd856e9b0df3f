#!/usr/bin/env python3
"""
Base page object.

Page objects subclass BasePage so that constructing one waits for the
document to finish loading and, optionally, for a landmark element that
proves the browser is on the expected page.
"""

from ..core.conditions import wait_for_document_ready, wait_for_element
from .locator import Locator


class BasePage:
    """
    Base class for page objects.

    Args:
        session: SessionHandle the page lives in
        landmark: Optional Locator (or element id) that must be present
        timeout: Landmark timeout; defaults to the session's default timeout
    """

    def __init__(self, session, landmark=None, timeout=None):
        self.session = session
        wait_for_document_ready(session)
        if landmark is not None:
            if isinstance(landmark, str):
                landmark = Locator.by_id(landmark)
            if timeout is None:
                timeout = session.config.default_timeout
            wait_for_element(session, landmark, timeout)
        self.landmark = landmark
