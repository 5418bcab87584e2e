"""Fluent assertions for the results of request handler actions."""

from actioncheck.assertions import (
    ActionResultAssertions,
    ByteContentResultAssertions,
    NamedFileResultAssertions,
    StreamResultAssertions,
    TextContentResultAssertions,
    assert_that,
    narrow,
    report_mismatch,
)
from actioncheck.config import AssertionConfig, load_config
from actioncheck.context import AssertionContext
from actioncheck.errors import (
    ActionResultAssertionError,
    CapabilityMismatchError,
    PredicateFailureError,
    ValueMismatchError,
)
from actioncheck.results import (
    ByteContentResult,
    FileProvider,
    NamedFileResult,
    PhysicalFileProvider,
    StreamResult,
    TextContentResult,
)
from actioncheck.verbose import configure_logging, setup_logger

__all__ = [
    "ActionResultAssertionError",
    "ActionResultAssertions",
    "AssertionConfig",
    "AssertionContext",
    "ByteContentResult",
    "ByteContentResultAssertions",
    "CapabilityMismatchError",
    "FileProvider",
    "NamedFileResult",
    "NamedFileResultAssertions",
    "PhysicalFileProvider",
    "PredicateFailureError",
    "StreamResult",
    "StreamResultAssertions",
    "TextContentResult",
    "TextContentResultAssertions",
    "ValueMismatchError",
    "assert_that",
    "configure_logging",
    "load_config",
    "narrow",
    "report_mismatch",
    "setup_logger",
]
