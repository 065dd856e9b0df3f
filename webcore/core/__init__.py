"""
Core waiting and bootstrap module.

This package contains the bounded polling loop, the readiness predicates
built on it, and the retrying session bootstrapper (imported from
``webcore.core.bootstrap``).
"""

from .conditions import (document_ready, element_clickable, element_displayed,
                         element_exists, element_invisible, handle_clickable,
                         handle_displayed, wait_for_displayed,
                         wait_for_document_ready, wait_for_element,
                         wait_for_invisibility, wait_until_clickable)
from .poller import SYSTEM_CLOCK, Clock, Outcome, WaitSpec, found, pending, wait_for

__all__ = [
    "Clock",
    "SYSTEM_CLOCK",
    "Outcome",
    "WaitSpec",
    "found",
    "pending",
    "wait_for",
    "document_ready",
    "element_exists",
    "element_displayed",
    "element_invisible",
    "element_clickable",
    "handle_displayed",
    "handle_clickable",
    "wait_for_element",
    "wait_for_displayed",
    "wait_until_clickable",
    "wait_for_invisibility",
    "wait_for_document_ready",
]
