"""
Logging setup for test runs.

The library itself only creates module loggers; call configure_logger from a
test runner or conftest to get console (and optionally file) output.
"""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s {%(filename)s:%(lineno)d} - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ["selenium", "urllib3", "WDM"]


def configure_logger(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            the LOG_LEVEL environment variable takes precedence
        log_file: Optional file path to write logs to
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    logger = logging.getLogger()

    # Remove existing handlers to avoid duplicate lines
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
