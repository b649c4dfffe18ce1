"""Centralized logging configuration for the Analyze Image client."""

import logging
import sys

from az_analyze_image.config import LOG_LEVEL

# Package-wide logger name
PACKAGE_LOGGER_NAME = "az_analyze_image"

# Track if we've already configured
_configured = False


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for the specified module.

    Automatically configures basic logging on first use if no handlers exist.
    The level is taken from `AZ_ANALYZE_IMAGE_LOG_LEVEL`; unknown level names
    fall back to WARNING.

    Args:
        module_name: Name of the module requesting the logger.

    Returns:
        logging.Logger: Configured logger for the module.
    """
    global _configured

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if not _configured and not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
        package_logger.addHandler(handler)
        package_logger.setLevel(
            getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
        )
        package_logger.propagate = False
        _configured = True

    if module_name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{module_name}")
