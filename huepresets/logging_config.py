"""Logging configuration for hue-presets.

Provides structured logging with appropriate levels for application
code vs third-party libraries.
"""

import logging
import sys
from typing import Literal

from huepresets.settings import get_settings

# List of noisy third-party loggers to suppress
NOISY_LOGGERS = [
    "httpcore",
    "httpx",
    "asyncio",
]

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def suppress_noisy_loggers() -> None:
    """Suppress noisy third-party loggers.

    Call this after importing libraries that configure their own logging.
    """
    for logger_name in NOISY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        # Clear any handlers added by the library
        logger.handlers.clear()


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
    log_file: str | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Configure application logging.

    Sets up logging with:
    - Application logs at configured level
    - Third-party library logs suppressed to WARNING+
    - A single root handler: the given one, a file, or stderr

    Args:
        level: Override log level (defaults to settings.log_level or INFO)
        log_file: Write to this file instead of stderr
        handler: Use this handler as-is (e.g. textual's TextualHandler)
    """
    settings = get_settings()
    log_level = level or getattr(settings, "log_level", "INFO")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handler level

    # Remove existing handlers
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
        existing.close()

    if handler is None:
        if log_file:
            handler = logging.FileHandler(log_file, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(getattr(logging, log_level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(handler)

    logging.getLogger("huepresets").setLevel(getattr(logging, log_level))

    suppress_noisy_loggers()


# Configure logging on module import
configure_logging()
