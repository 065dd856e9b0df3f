#!/usr/bin/env python3
"""
Browser interface definition module.

This module defines the protocols the waiting and bootstrap layers rely on.
Selenium's WebDriver and WebElement satisfy them; tests substitute fakes.
"""

from typing import Any, List, Optional, Protocol


class BrowserElement(Protocol):
    """Protocol defining the interface for browser elements."""

    @property
    def text(self) -> str:
        """Get the text content of the element."""
        ...

    @property
    def tag_name(self) -> str:
        """Get the tag name of the element."""
        ...

    def get_attribute(self, name: str) -> Optional[str]:
        """Get the value of the specified attribute."""
        ...

    def is_displayed(self) -> bool:
        """Check if the element is visible."""
        ...

    def is_enabled(self) -> bool:
        """Check if the element is enabled."""
        ...

    def is_selected(self) -> bool:
        """Check if the element (checkbox, radio, option) is selected."""
        ...

    def click(self) -> None:
        """Click the element."""
        ...

    def clear(self) -> None:
        """Clear the element's value."""
        ...

    def send_keys(self, *value: str) -> None:
        """Type into the element."""
        ...

    def find_elements(self, by: str, value: str) -> List["BrowserElement"]:
        """Find all descendants matching the selector strategy."""
        ...


class BrowserDriver(Protocol):
    """Protocol defining the subset of a WebDriver a session relies on."""

    def get(self, url: str) -> None:
        """Navigate to the specified URL."""
        ...

    def find_element(self, by: str, value: str) -> BrowserElement:
        """Find a single element using the specified selector strategy."""
        ...

    def find_elements(self, by: str, value: str) -> List[BrowserElement]:
        """Find all elements matching the specified selector strategy."""
        ...

    def execute_script(self, script: str, *args: Any) -> Any:
        """Execute JavaScript in the browser context."""
        ...

    def set_page_load_timeout(self, time_to_wait: float) -> None:
        """Set the navigation timeout."""
        ...

    def set_script_timeout(self, time_to_wait: float) -> None:
        """Set the asynchronous script timeout."""
        ...

    def implicitly_wait(self, time_to_wait: float) -> None:
        """Set the implicit element lookup wait."""
        ...

    def delete_all_cookies(self) -> None:
        """Delete every cookie visible to the session."""
        ...

    def quit(self) -> None:
        """Close the browser and release resources."""
        ...
