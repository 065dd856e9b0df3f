#!/usr/bin/env python3
"""
Configuration management module.

This module provides the timeout constants shared by every wait, the
Configuration dataclass consumed by the session bootstrapper, and helpers for
loading it from JSON files or from the environment.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class TimeoutsInSeconds:
    """Standard timeouts, in seconds."""

    CONTROL = 10
    DEFAULT = 60
    EXTENDED = 240
    ONE_SECOND = 1


# Environment variables set by hosted build agents, pointing at the
# directory holding each driver binary.
FARM_DRIVER_ENV = {
    "chrome": "CHROMEWEBDRIVER",
    "firefox": "GECKOWEBDRIVER",
    "edge": "EDGEWEBDRIVER",
}

# Per-family local driver executables, e.g. WEBCORE_CHROMEDRIVER.
LOCAL_DRIVER_ENV = {
    "chrome": "WEBCORE_CHROMEDRIVER",
    "firefox": "WEBCORE_GECKODRIVER",
    "edge": "WEBCORE_EDGEDRIVER",
}

ENV_PREFIX = "WEBCORE_"


@dataclass
class Configuration:
    """
    Configuration for acquiring and driving browser sessions.

    Holds timeout policy, retry policy and the machine-specific locations the
    launch variants need. Instances are plain data and may be shared between
    bootstrap calls.
    """
    # Wait policy
    control_timeout: float = TimeoutsInSeconds.CONTROL
    default_timeout: float = TimeoutsInSeconds.DEFAULT
    extended_timeout: float = TimeoutsInSeconds.EXTENDED
    poll_interval: float = TimeoutsInSeconds.ONE_SECOND

    # Retry policy
    max_attempts: int = 3
    retry_delay: float = 2.0

    # Browser locations
    download_dir: str = field(default_factory=lambda: os.path.join(os.path.expanduser("~"), "Downloads"))
    local_driver_paths: Dict[str, str] = field(default_factory=dict)
    chrome_binary: Optional[str] = None
    firefox_binary: Optional[str] = None
    edge_binary: Optional[str] = None

    # Build farm
    farm_driver_dirs: Dict[str, str] = field(default_factory=dict)
    remote_url: Optional[str] = None

    # Session setup
    wait_for_ready: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_attempts < 1:
            logger.warning("max_attempts (%s) is less than 1. Setting max_attempts to 1.", self.max_attempts)
            self.max_attempts = 1

        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")

        if self.retry_delay < 0:
            logger.warning("retry_delay (%s) is negative. Setting retry_delay to 0.", self.retry_delay)
            self.retry_delay = 0.0

        if self.extended_timeout < self.control_timeout:
            logger.warning(
                "extended_timeout (%s) is less than control_timeout (%s). Setting extended_timeout to %s.",
                self.extended_timeout, self.control_timeout, self.control_timeout,
            )
            self.extended_timeout = self.control_timeout

        for name in ("local_driver_paths", "farm_driver_dirs"):
            unknown = set(getattr(self, name)) - set(FARM_DRIVER_ENV)
            if unknown:
                raise ValueError(f"Unknown browser families in {name}: {sorted(unknown)}")

    def to_dict(self):
        """
        Convert configuration to a dictionary.

        Returns:
            dict: Dictionary representation of the configuration
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a Configuration instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            Configuration: Configuration instance
        """
        config = config_dict.copy()
        for name in ("local_driver_paths", "farm_driver_dirs"):
            config[name] = dict(config.get(name) or {})
        return cls(**config)

    @classmethod
    def from_env(cls, env_file=None, environ=None):
        """
        Create a Configuration from environment variables.

        A ``.env`` file is loaded first (without overriding variables already
        set). ``WEBCORE_<FIELD>`` variables override defaults, and the build
        agent variables in FARM_DRIVER_ENV supply farm driver directories.
        LOCAL_DRIVER_ENV variables supply per-family local driver paths.

        Args:
            env_file: Optional path to a .env file
            environ: Mapping to read instead of os.environ

        Returns:
            Configuration: Configuration instance
        """
        if environ is None:
            load_dotenv(env_file)
            environ = os.environ

        values = {}
        for name, kind in _ENV_FIELDS.items():
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            values[name] = _coerce(name, raw, kind)

        values["local_driver_paths"] = _family_values(environ, LOCAL_DRIVER_ENV)
        values["farm_driver_dirs"] = _family_values(environ, FARM_DRIVER_ENV)

        return cls(**values)

    def log_summary(self):
        """Log a summary of the configuration."""
        logger.info("Web test configuration:")
        logger.info("- Timeouts: control %ss, default %ss, extended %ss (poll every %ss)",
                    self.control_timeout, self.default_timeout, self.extended_timeout, self.poll_interval)
        logger.info("- Launch attempts: %s (retry delay %ss)", self.max_attempts, self.retry_delay)
        logger.info("- Download directory: %s", self.download_dir)
        if self.remote_url:
            logger.info("- Remote WebDriver: %s", self.remote_url)
        for family, path in sorted(self.local_driver_paths.items()):
            logger.info("- Local %s driver: %s", family, path)
        for family, directory in sorted(self.farm_driver_dirs.items()):
            logger.info("- Farm %s driver directory: %s", family, directory)


_ENV_FIELDS = {
    'control_timeout': float,
    'default_timeout': float,
    'extended_timeout': float,
    'poll_interval': float,
    'max_attempts': int,
    'retry_delay': float,
    'download_dir': str,
    'chrome_binary': str,
    'firefox_binary': str,
    'edge_binary': str,
    'remote_url': str,
    'wait_for_ready': bool,
}


def _family_values(environ, variables):
    return {family: environ[variable] for family, variable in variables.items() if environ.get(variable)}


def _coerce(name, raw, kind):
    if kind is bool:
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"Invalid boolean for {ENV_PREFIX}{name.upper()}: {raw!r}")
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}")


def load_config(config_file: str) -> Configuration:
    """
    Load configuration from a JSON file.

    Args:
        config_file: Path to the configuration file

    Returns:
        Configuration: Configuration instance

    Raises:
        FileNotFoundError: If the configuration file does not exist
        json.JSONDecodeError: If the configuration file is not valid JSON
    """
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, 'r') as f:
        config_dict = json.load(f)

    return Configuration.from_dict(config_dict)


def save_config(config: Configuration, config_file: str) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration instance
        config_file: Path to the configuration file
    """
    directory = os.path.dirname(os.path.abspath(config_file))
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    with open(config_file, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    logger.info("Configuration saved to %s", config_file)
