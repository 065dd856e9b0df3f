"""Shared fakes: a manual clock and an in-memory browser driven by it."""

import pytest
from selenium.common.exceptions import (NoSuchElementException,
                                        StaleElementReferenceException)

from webcore.browser.session import READY_STATE_SCRIPT, SessionHandle
from webcore.config import Configuration
from webcore.core.poller import Clock


class FakeClock(Clock):
    """Clock that only moves when slept on."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeElement:
    """
    Element whose state is a function of the clock.

    The element is in the document from ``present_at``, displayed between
    ``visible_at`` and ``hidden_at``, enabled from ``enabled_at`` and stale
    from ``stale_at``.
    """

    def __init__(self, clock, text="", present_at=0.0, visible_at=0.0, hidden_at=None,
                 enabled_at=0.0, stale_at=None, selected=False, rows=None, tag_name="input"):
        self.clock = clock
        self._text = text
        self.present_at = present_at
        self.visible_at = visible_at
        self.hidden_at = hidden_at
        self.enabled_at = enabled_at
        self.stale_at = stale_at
        self.selected = selected
        self.rows = rows or []
        self.tag_name = tag_name
        self.clicks = []
        self.typed = []
        self.cleared = 0
        self.row_queries = []

    def _check(self):
        if self.stale_at is not None and self.clock.now >= self.stale_at:
            raise StaleElementReferenceException("element is not attached to the page document")

    @property
    def text(self):
        self._check()
        return self._text

    def get_attribute(self, name):
        self._check()
        return None

    def is_displayed(self):
        self._check()
        if self.hidden_at is not None and self.clock.now >= self.hidden_at:
            return False
        return self.clock.now >= self.visible_at

    def is_enabled(self):
        self._check()
        return self.clock.now >= self.enabled_at

    def is_selected(self):
        self._check()
        return self.selected

    def click(self):
        self._check()
        self.clicks.append(self.clock.now)
        self.selected = not self.selected

    def clear(self):
        self._check()
        self.cleared += 1

    def send_keys(self, *value):
        self._check()
        self.typed.append("".join(value))

    def find_elements(self, by, value):
        self._check()
        self.row_queries.append((by, value))
        return list(self.rows)


class FakeDriver:
    """In-memory WebDriver recording every call in order."""

    def __init__(self, clock, elements=None, ready_states=None, fail_on=None):
        self.clock = clock
        self.elements = dict(elements or {})
        self.ready_states = list(ready_states or ["complete"])
        self.fail_on = dict(fail_on or {})
        self.calls = []
        self.quit_count = 0

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on:
            raise self.fail_on[name]

    def find_element(self, by, value):
        self._record("find_element", by, value)
        element = self.elements.get((by, value))
        if element is None or self.clock.now < element.present_at:
            raise NoSuchElementException(f"no such element: {value}")
        return element

    def find_elements(self, by, value):
        self._record("find_elements", by, value)
        element = self.elements.get((by, value))
        if element is None or self.clock.now < element.present_at:
            return []
        return [element]

    def execute_script(self, script, *args):
        self._record("execute_script", script)
        if script == READY_STATE_SCRIPT:
            state = self.ready_states.pop(0) if len(self.ready_states) > 1 else self.ready_states[0]
            if isinstance(state, Exception):
                raise state
            return state
        if script == "arguments[0].click()":
            return args[0].click()
        return None

    def set_page_load_timeout(self, time_to_wait):
        self._record("set_page_load_timeout", time_to_wait)

    def set_script_timeout(self, time_to_wait):
        self._record("set_script_timeout", time_to_wait)

    def implicitly_wait(self, time_to_wait):
        self._record("implicitly_wait", time_to_wait)

    def delete_all_cookies(self):
        self._record("delete_all_cookies")

    def get(self, url):
        self._record("get", url)

    def quit(self):
        self.quit_count += 1
        self._record("quit")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config(tmp_path):
    return Configuration(download_dir=str(tmp_path))


@pytest.fixture
def driver(clock):
    return FakeDriver(clock)


@pytest.fixture
def session(driver, config, clock):
    return SessionHandle(driver, config=config, clock=clock)
