#!/usr/bin/env python3
"""
Launch variants and their configuration builders.

Every LaunchVariant maps to exactly one builder in VARIANT_BUILDERS. A
builder turns a Configuration into a LaunchConfiguration: the browser
family, Selenium options, and where to find the driver. Builders only
construct objects; starting the browser happens in driver.py.
"""

import os
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, Optional

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from ..config import Configuration
from ..exceptions import ProgrammingError


class BrowserFamily(Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"


class LaunchVariant(Enum):
    """Closed set of supported browser launch variants."""

    CHROME = "chrome"
    CHROME_HEADLESS = "chrome-headless"
    CHROME_FARM = "chrome-farm"
    CHROME_FARM_HEADLESS = "chrome-farm-headless"
    FIREFOX = "firefox"
    FIREFOX_HEADLESS = "firefox-headless"
    FIREFOX_FARM = "firefox-farm"
    FIREFOX_FARM_HEADLESS = "firefox-farm-headless"
    EDGE = "edge"
    EDGE_HEADLESS = "edge-headless"
    EDGE_FARM = "edge-farm"
    EDGE_FARM_HEADLESS = "edge-farm-headless"


@dataclass
class LaunchConfiguration:
    """Everything needed to start one browser session."""

    variant: LaunchVariant
    family: BrowserFamily
    headless: bool
    farm: bool
    options: Any
    driver_path: Optional[str] = None
    remote_url: Optional[str] = None


DRIVER_EXECUTABLES = {
    BrowserFamily.CHROME: "chromedriver",
    BrowserFamily.FIREFOX: "geckodriver",
    BrowserFamily.EDGE: "msedgedriver",
}

# Chromium switches shared by Chrome and Edge
CHROMIUM_ARGUMENTS = [
    "--disable-popup-blocking",
    "--disable-extensions",
    "--disable-extensions-http-throttling",
    "--disable-extensions-file-access-check",
    "--disable-infobars",
    "--enable-automation",
    "--safebrowsing-disable-download-protection",
    "--safebrowsing-disable-extension-blacklist",
    "--start-maximized",
]

FARM_CHROMIUM_ARGUMENTS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


def _chromium_prefs(config):
    return {
        "download.default_directory": config.download_dir,
        "download.prompt_for_download": False,
        "download.directory_upgrade": True,
        "safebrowsing.enabled": True,
        "credentials_enable_service": False,
        "profile.password_manager_enabled": False,
    }


def _chromium_options(options, config, headless, farm, binary):
    if headless:
        options.add_argument("--headless=new")
        options.add_argument("--disable-gpu")
    for argument in CHROMIUM_ARGUMENTS:
        options.add_argument(argument)
    if farm:
        for argument in FARM_CHROMIUM_ARGUMENTS:
            options.add_argument(argument)
    options.add_experimental_option("prefs", _chromium_prefs(config))
    if binary:
        options.binary_location = binary
    return options


def _firefox_options(config, headless):
    options = FirefoxOptions()
    options.set_preference("browser.download.folderList", 2)
    options.set_preference("browser.download.dir", config.download_dir)
    options.set_preference("browser.helperApps.neverAsk.saveToDisk", "application/zip")
    options.set_preference("dom.disable_open_during_load", False)
    options.add_argument("--disable-gpu")
    if headless:
        options.add_argument("-headless")
    if config.firefox_binary:
        options.binary_location = config.firefox_binary
    return options


def _farm_driver_path(config, family):
    directory = config.farm_driver_dirs.get(family.value)
    if not directory:
        return None
    return os.path.join(directory, DRIVER_EXECUTABLES[family])


def build_chrome(config: Configuration, variant, headless, farm) -> LaunchConfiguration:
    options = _chromium_options(ChromeOptions(), config, headless, farm, config.chrome_binary)
    return _launch(variant, BrowserFamily.CHROME, config, headless, farm, options)


def build_edge(config: Configuration, variant, headless, farm) -> LaunchConfiguration:
    options = _chromium_options(EdgeOptions(), config, headless, farm, config.edge_binary)
    return _launch(variant, BrowserFamily.EDGE, config, headless, farm, options)


def build_firefox(config: Configuration, variant, headless, farm) -> LaunchConfiguration:
    options = _firefox_options(config, headless)
    return _launch(variant, BrowserFamily.FIREFOX, config, headless, farm, options)


def _launch(variant, family, config, headless, farm, options):
    if farm:
        driver_path = _farm_driver_path(config, family)
        remote_url = config.remote_url
    else:
        driver_path = config.local_driver_paths.get(family.value)
        remote_url = None
    return LaunchConfiguration(
        variant=variant,
        family=family,
        headless=headless,
        farm=farm,
        options=options,
        driver_path=driver_path,
        remote_url=remote_url,
    )


def _builder(build, variant, headless, farm):
    return partial(build, variant=variant, headless=headless, farm=farm)


_V = LaunchVariant

VARIANT_BUILDERS: Dict[LaunchVariant, Callable[[Configuration], LaunchConfiguration]] = {
    _V.CHROME: _builder(build_chrome, _V.CHROME, headless=False, farm=False),
    _V.CHROME_HEADLESS: _builder(build_chrome, _V.CHROME_HEADLESS, headless=True, farm=False),
    _V.CHROME_FARM: _builder(build_chrome, _V.CHROME_FARM, headless=False, farm=True),
    _V.CHROME_FARM_HEADLESS: _builder(build_chrome, _V.CHROME_FARM_HEADLESS, headless=True, farm=True),
    _V.FIREFOX: _builder(build_firefox, _V.FIREFOX, headless=False, farm=False),
    _V.FIREFOX_HEADLESS: _builder(build_firefox, _V.FIREFOX_HEADLESS, headless=True, farm=False),
    _V.FIREFOX_FARM: _builder(build_firefox, _V.FIREFOX_FARM, headless=False, farm=True),
    _V.FIREFOX_FARM_HEADLESS: _builder(build_firefox, _V.FIREFOX_FARM_HEADLESS, headless=True, farm=True),
    _V.EDGE: _builder(build_edge, _V.EDGE, headless=False, farm=False),
    _V.EDGE_HEADLESS: _builder(build_edge, _V.EDGE_HEADLESS, headless=True, farm=False),
    _V.EDGE_FARM: _builder(build_edge, _V.EDGE_FARM, headless=False, farm=True),
    _V.EDGE_FARM_HEADLESS: _builder(build_edge, _V.EDGE_FARM_HEADLESS, headless=True, farm=True),
}

_unmapped = set(LaunchVariant) - set(VARIANT_BUILDERS)
if _unmapped:
    raise ProgrammingError(f"Launch variants without a builder: {sorted(v.name for v in _unmapped)}")


def resolve_variant(variant, config: Optional[Configuration] = None,
                    builders=VARIANT_BUILDERS) -> LaunchConfiguration:
    """
    Build the launch configuration for ``variant``.

    Args:
        variant: LaunchVariant member (or its string value)
        config: Configuration supplying paths and preferences
        builders: Variant table, overridable for tests

    Returns:
        LaunchConfiguration: The resolved configuration

    Raises:
        ProgrammingError: If the variant has no builder
    """
    if isinstance(variant, str):
        try:
            variant = LaunchVariant(variant)
        except ValueError:
            raise ProgrammingError(f"Unknown launch variant: {variant!r}")
    try:
        build = builders[variant]
    except KeyError:
        raise ProgrammingError(f"No configuration builder for launch variant {variant!r}")
    return build(config or Configuration())
