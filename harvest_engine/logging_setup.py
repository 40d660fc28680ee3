"""Console logging setup for the harvest engine.

Modules log through `logging.getLogger(__name__)`; nothing is printed until an
entry point calls `configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Union

LOGGER_NAME = "harvest_engine"

formatter = logging.Formatter(
    fmt="%(asctime)s - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a single console handler to the package logger and set its level."""
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.setLevel(level)

    # Prevent duplicate handlers when called more than once
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_harvest_console", False):
            pkg_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler._harvest_console = True  # type: ignore[attr-defined]
    pkg_logger.addHandler(console_handler)
    return pkg_logger
