"""Assertions for text content results."""

from __future__ import annotations

from typing import Callable

from actioncheck.assertions import comparators
from actioncheck.assertions.base import (
    ActionResultAssertions,
    register_handle,
    report_mismatch,
)
from actioncheck.errors import PredicateFailureError
from actioncheck.results import TextContentResult


@register_handle(TextContentResult, "content")
class TextContentResultAssertions(ActionResultAssertions):
    result: TextContentResult

    def with_text(self, expected: str) -> TextContentResultAssertions:
        actual = self.result.text
        self.logger.info(f"Checking content result text: expected '{expected}', actual '{actual}'")

        if not comparators.strings_equal(actual, expected):
            report_mismatch(
                self.context,
                "content result content",
                f"to be '{expected}'",
                f"but instead received '{actual}'",
            )
        return self

    def with_text_satisfying(self, predicate: Callable[[str], bool]) -> TextContentResultAssertions:
        """Check ``predicate`` accepts the text.

        Exceptions raised by the predicate itself propagate unchanged.
        """
        actual = self.result.text
        passed = comparators.satisfies(actual, predicate)
        self.logger.info(f"Content result text passed predicate={passed}")

        if not passed:
            report_mismatch(
                self.context,
                f"content result content ('{actual}')",
                "to pass the given condition",
                "but it failed",
                error=PredicateFailureError,
            )
        return self

    def with_text_checked_by(self, callback: Callable[[str], object]) -> TextContentResultAssertions:
        """Hand the text to ``callback``, which does its own asserting.

        Whatever the callback raises reaches the caller unmodified; its
        return value is ignored.
        """
        self.logger.info("Passing content result text to callback")
        callback(self.result.text)
        return self
