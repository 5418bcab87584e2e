"""Assertion system for checking action results."""

from actioncheck.assertions.base import (
    ActionResultAssertions,
    assert_that,
    narrow,
    report_mismatch,
)
from actioncheck.assertions.content import TextContentResultAssertions
from actioncheck.assertions.files import (
    ByteContentResultAssertions,
    NamedFileResultAssertions,
    StreamResultAssertions,
)

__all__ = [
    "ActionResultAssertions",
    "ByteContentResultAssertions",
    "NamedFileResultAssertions",
    "StreamResultAssertions",
    "TextContentResultAssertions",
    "assert_that",
    "narrow",
    "report_mismatch",
]
