"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from actioncheck.context import AssertionContext


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up actioncheck loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("actioncheck")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture()
def context():
    return AssertionContext.for_action("Download", "FilesController")


@pytest.fixture()
def stream_of():
    """Helper that wraps bytes in a fresh binary stream."""

    def _make(data: bytes) -> io.BytesIO:
        return io.BytesIO(data)

    return _make
