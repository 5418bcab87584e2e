"""Verbose logging configuration for assertion traces."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from actioncheck.config import AssertionConfig

DEFAULT_LOGGER_NAME = "actioncheck"


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """
    Configure and return a logger for assertion traces.

    Always writes to debug_file. Optionally also writes to stderr if verbose=True.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: If True, also log to stderr. If False, only log to file.
        logger_name: Name of the logger instance (allows one log per test session)

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: If a logger with the same name already has handlers.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger_name per debug file"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode='a')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger


def configure_logging(
    config: AssertionConfig, logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """Build the assertion logger described by ``config``.

    Without a ``debug_log`` the plain named logger is returned untouched, so
    records flow to whatever the test runner has configured.
    """
    if config.debug_log is None:
        return logging.getLogger(logger_name)
    return setup_logger(config.debug_log, verbose=config.verbose, logger_name=logger_name)
