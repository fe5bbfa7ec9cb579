"""Logging configuration for the actor headshot provider."""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config import Config

LOGGER_NAME = "headshot_provider"


def setup_logging(
    verbosity: int = 0,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return the logger for the headshot provider.

    Args:
        verbosity: -1 for quiet (WARNING+), 0 for normal (INFO), 1 for detailed (DEBUG)
        log_file: Optional path to write logs to file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if verbosity < 0:
        console_handler.setLevel(logging.WARNING)
    elif verbosity > 0:
        console_handler.setLevel(logging.DEBUG)
    else:
        console_handler.setLevel(logging.INFO)

    if verbosity > 0:
        console_fmt = logging.Formatter("%(levelname)s [%(name)s]: %(message)s")
    else:
        console_fmt = logging.Formatter("%(message)s")
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    # File handler (always DEBUG level, with timestamps)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_fmt = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    return logger


def get_logger(suffix: str | None = None) -> logging.Logger:
    """Get the headshot_provider logger, or one of its children."""
    if suffix:
        return logging.getLogger(f"{LOGGER_NAME}.{suffix}")
    return logging.getLogger(LOGGER_NAME)


def configure_from(config: "Config") -> logging.Logger:
    """Apply the provider's ``enable_detailed_logging`` setting.

    Detailed logging lowers the provider logger to DEBUG so cache hits,
    misses and match attempts reach whatever handlers the host installed.
    The level is never raised here; a host that set DEBUG itself keeps it.
    """
    logger = get_logger()
    if config.enable_detailed_logging:
        logger.setLevel(logging.DEBUG)
        logger.debug(
            "Detailed logging enabled for manifest %s", config.manifest_url
        )
    return logger
