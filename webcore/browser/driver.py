#!/usr/bin/env python3
"""
WebDriver startup module.

This module starts a Selenium WebDriver from a resolved LaunchConfiguration
and classifies startup errors as transient (worth another attempt) or not.
"""

import logging

from requests.exceptions import ConnectionError as DownloadConnectionError
from selenium import webdriver
from selenium.common.exceptions import (InvalidArgumentException,
                                        NoSuchDriverException,
                                        WebDriverException)
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from urllib3.exceptions import HTTPError as TransportError
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from ..exceptions import WaitTimeoutError
from .variants import BrowserFamily, LaunchConfiguration

logger = logging.getLogger(__name__)

# Failures that come from the driver service or browser process not being
# ready yet: the port is not bound (urllib3 MaxRetryError from the remote
# end), the browser crashed on start, the driver download dropped, a page
# load timed out.
TRANSIENT_LAUNCH_ERRORS = (
    WebDriverException,
    ConnectionError,
    TransportError,
    DownloadConnectionError,
    WaitTimeoutError,
)

# WebDriverException subclasses that will fail the same way every time.
PERSISTENT_LAUNCH_ERRORS = (InvalidArgumentException, NoSuchDriverException)

_SERVICES = {
    BrowserFamily.CHROME: (ChromeService, ChromeDriverManager, webdriver.Chrome),
    BrowserFamily.FIREFOX: (FirefoxService, GeckoDriverManager, webdriver.Firefox),
    BrowserFamily.EDGE: (EdgeService, EdgeChromiumDriverManager, webdriver.Edge),
}


def is_transient_launch_failure(error: BaseException) -> bool:
    """
    Decide whether a failed launch or setup step is worth retrying.

    Args:
        error: The exception raised by the attempt

    Returns:
        bool: True for transient failures
    """
    if isinstance(error, PERSISTENT_LAUNCH_ERRORS):
        return False
    return isinstance(error, TRANSIENT_LAUNCH_ERRORS)


def start_webdriver(launch: LaunchConfiguration):
    """
    Start a WebDriver session for a resolved launch configuration.

    Farm variants with a remote URL connect to that Selenium server.
    Otherwise a local driver service is started from the configured driver
    path, or from the binary webdriver-manager downloads when no path is set.

    Args:
        launch: Resolved launch configuration

    Returns:
        WebDriver: Started Selenium WebDriver instance
    """
    if launch.remote_url:
        logger.info("Starting remote %s session at %s (headless=%s)",
                    launch.family.value, launch.remote_url, launch.headless)
        return webdriver.Remote(command_executor=launch.remote_url, options=launch.options)

    service_cls, manager_cls, driver_cls = _SERVICES[launch.family]

    driver_path = launch.driver_path
    if not driver_path:
        driver_path = manager_cls().install()

    logger.info("Starting %s session with driver %s (headless=%s)",
                launch.family.value, driver_path, launch.headless)
    service = service_cls(executable_path=driver_path)
    return driver_cls(service=service, options=launch.options)
