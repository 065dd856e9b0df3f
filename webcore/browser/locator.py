#!/usr/bin/env python3
"""
Element locators.

A Locator names a Selenium selector strategy and a value. It is immutable
and compares equal to any other locator with the same strategy and value.
"""

from dataclasses import dataclass

from selenium.webdriver.common.by import By


@dataclass(frozen=True)
class Locator:
    """How to find an element: a selector strategy plus its value."""

    by: str
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError(f"Locator value must not be empty (strategy {self.by!r})")

    @classmethod
    def by_id(cls, value):
        return cls(By.ID, value)

    @classmethod
    def css(cls, value):
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def xpath(cls, value):
        return cls(By.XPATH, value)

    @classmethod
    def name(cls, value):
        return cls(By.NAME, value)

    @classmethod
    def link_text(cls, value):
        return cls(By.LINK_TEXT, value)

    @classmethod
    def tag(cls, value):
        return cls(By.TAG_NAME, value)

    @classmethod
    def class_name(cls, value):
        return cls(By.CLASS_NAME, value)

    def as_tuple(self):
        """Return the ``(by, value)`` pair Selenium's finders accept."""
        return (self.by, self.value)

    def __str__(self):
        return f"{self.by}={self.value!r}"
