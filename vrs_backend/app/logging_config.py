"""
Logging configuration for the VRS backend.

All modules log through ``logging.getLogger(__name__)``; this installs a single
stream handler on the package logger so they share one format.
"""

import logging
from typing import Union

ROOT_LOGGER = "vrs_backend"

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the package logger once per process.

    Later calls only adjust the level, so creating several apps (as the test
    suite does) never stacks handlers.

    Args:
        level: A logging level number or name such as ``"DEBUG"``.

    Returns:
        The ``vrs_backend`` logger.
    """
    global _LOGGING_CONFIGURED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        _LOGGING_CONFIGURED = True

    return logger
