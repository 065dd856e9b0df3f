import os
from unittest import mock

import pytest
import requests
from selenium.common.exceptions import (InvalidArgumentException,
                                        NoSuchDriverException,
                                        SessionNotCreatedException,
                                        WebDriverException)
from urllib3.exceptions import MaxRetryError, NewConnectionError, ProtocolError

from webcore.browser import driver as driver_module
from webcore.browser import variants as variants_module
from webcore.browser.driver import is_transient_launch_failure, start_webdriver
from webcore.browser.variants import (VARIANT_BUILDERS, BrowserFamily,
                                      LaunchVariant, resolve_variant)
from webcore.config import Configuration
from webcore.exceptions import ProgrammingError, WaitTimeoutError


@pytest.mark.parametrize("variant", list(LaunchVariant))
def test_every_variant_resolves(variant, config):
    launch = resolve_variant(variant, config)

    assert launch.variant is variant
    assert launch.headless == variant.value.endswith("headless")
    assert launch.farm == ("-farm" in variant.value)
    assert launch.family.value == variant.value.split("-")[0]


def test_variant_table_is_exhaustive():
    assert set(VARIANT_BUILDERS) == set(LaunchVariant)
    assert not hasattr(variants_module, "V")


def test_variant_by_name(config):
    assert resolve_variant("firefox-headless", config).variant is LaunchVariant.FIREFOX_HEADLESS


def test_unknown_variant_name():
    with pytest.raises(ProgrammingError):
        resolve_variant("lynx")


def test_unmapped_variant():
    with pytest.raises(ProgrammingError):
        resolve_variant(LaunchVariant.CHROME, builders={})


def test_chrome_headless_arguments_and_prefs(config):
    options = resolve_variant(LaunchVariant.CHROME_HEADLESS, config).options

    assert "--headless=new" in options.arguments
    assert "--disable-popup-blocking" in options.arguments
    prefs = options.experimental_options["prefs"]
    assert prefs["download.prompt_for_download"] is False
    assert prefs["profile.password_manager_enabled"] is False
    assert prefs["download.default_directory"] == config.download_dir


def test_chrome_headed_has_no_headless_flag(config):
    options = resolve_variant(LaunchVariant.CHROME, config).options

    assert "--headless=new" not in options.arguments
    assert "--no-sandbox" not in options.arguments


def test_farm_chromium_runs_without_sandbox(config):
    options = resolve_variant(LaunchVariant.EDGE_FARM_HEADLESS, config).options

    assert "--no-sandbox" in options.arguments
    assert "--headless=new" in options.arguments


def test_firefox_download_preferences(config):
    options = resolve_variant(LaunchVariant.FIREFOX_HEADLESS, config).options

    assert "-headless" in options.arguments
    assert options.preferences["browser.download.folderList"] == 2
    assert options.preferences["browser.download.dir"] == config.download_dir
    assert options.preferences["browser.helperApps.neverAsk.saveToDisk"] == "application/zip"


def test_local_variant_uses_configured_driver(tmp_path):
    config = Configuration(download_dir=str(tmp_path), local_driver_paths={"chrome": "/usr/local/bin/chromedriver"},
                           remote_url="http://grid:4444")

    launch = resolve_variant(LaunchVariant.CHROME, config)

    assert launch.driver_path == "/usr/local/bin/chromedriver"
    assert launch.remote_url is None


@pytest.mark.parametrize("variant", [LaunchVariant.FIREFOX, LaunchVariant.EDGE_HEADLESS])
def test_local_driver_path_is_per_browser_family(variant, tmp_path):
    config = Configuration(download_dir=str(tmp_path), local_driver_paths={"chrome": "/opt/drivers/chromedriver"})

    assert resolve_variant(variant, config).driver_path is None
    assert resolve_variant(LaunchVariant.CHROME_HEADLESS, config).driver_path == "/opt/drivers/chromedriver"


def test_farm_variant_uses_agent_driver_directory(tmp_path):
    config = Configuration(download_dir=str(tmp_path), farm_driver_dirs={"firefox": "/opt/drivers"})

    launch = resolve_variant(LaunchVariant.FIREFOX_FARM, config)

    assert launch.driver_path == os.path.join("/opt/drivers", "geckodriver")
    assert launch.remote_url is None


def test_farm_variant_uses_remote_url(tmp_path):
    config = Configuration(download_dir=str(tmp_path), remote_url="http://grid:4444/wd/hub")

    launch = resolve_variant(LaunchVariant.EDGE_FARM, config)

    assert launch.remote_url == "http://grid:4444/wd/hub"


def test_resolution_builds_fresh_options(config):
    first = resolve_variant(LaunchVariant.CHROME, config)
    second = resolve_variant(LaunchVariant.CHROME, config)

    assert first.options is not second.options
    assert first.options.arguments == second.options.arguments


@pytest.mark.parametrize("error, transient", [
    (WebDriverException("service not reachable"), True),
    (SessionNotCreatedException("chrome failed to start"), True),
    (ConnectionRefusedError(), True),
    (MaxRetryError(None, "http://127.0.0.1:9/session", reason="connection refused"), True),
    (NewConnectionError(None, "Failed to establish a new connection"), True),
    (ProtocolError("Connection aborted."), True),
    (requests.exceptions.ConnectionError("driver download interrupted"), True),
    (WaitTimeoutError("document ready", 240, 240.0), True),
    (InvalidArgumentException("invalid url"), False),
    (NoSuchDriverException("no driver"), False),
    (ValueError("bad value"), False),
])
def test_transient_classification(error, transient):
    assert is_transient_launch_failure(error) is transient


def test_start_local_driver_installs_when_no_path(config):
    launch = resolve_variant(LaunchVariant.CHROME_HEADLESS, config)
    service_cls, manager_cls, driver_cls = mock.Mock(), mock.Mock(), mock.Mock()
    manager_cls.return_value.install.return_value = "/cache/chromedriver"

    with mock.patch.dict(driver_module._SERVICES, {BrowserFamily.CHROME: (service_cls, manager_cls, driver_cls)}):
        result = start_webdriver(launch)

    service_cls.assert_called_once_with(executable_path="/cache/chromedriver")
    driver_cls.assert_called_once_with(service=service_cls.return_value, options=launch.options)
    assert result is driver_cls.return_value


def test_start_local_driver_skips_install_with_path(tmp_path):
    config = Configuration(download_dir=str(tmp_path), local_driver_paths={"firefox": "/bin/geckodriver"})
    launch = resolve_variant(LaunchVariant.FIREFOX, config)
    service_cls, manager_cls, driver_cls = mock.Mock(), mock.Mock(), mock.Mock()

    with mock.patch.dict(driver_module._SERVICES, {BrowserFamily.FIREFOX: (service_cls, manager_cls, driver_cls)}):
        start_webdriver(launch)

    manager_cls.assert_not_called()
    service_cls.assert_called_once_with(executable_path="/bin/geckodriver")


def test_start_remote_driver(tmp_path):
    config = Configuration(download_dir=str(tmp_path), remote_url="http://grid:4444")
    launch = resolve_variant(LaunchVariant.CHROME_FARM_HEADLESS, config)

    with mock.patch.object(driver_module.webdriver, "Remote") as remote:
        result = start_webdriver(launch)

    remote.assert_called_once_with(command_executor="http://grid:4444", options=launch.options)
    assert result is remote.return_value
