"""Assertions for file results (streams, named files and raw bytes)."""

from __future__ import annotations

from typing import BinaryIO

from actioncheck.assertions import comparators
from actioncheck.assertions.base import (
    ActionResultAssertions,
    register_handle,
    report_mismatch,
)
from actioncheck.results import ByteContentResult, NamedFileResult, StreamResult

_DIFFERENT_RESULT = "but instead received different result"


@register_handle(StreamResult, "stream")
class StreamResultAssertions(ActionResultAssertions):
    result: StreamResult

    def with_stream(self, expected: BinaryIO) -> StreamResultAssertions:
        """Check the result stream holds the same bytes as ``expected``.

        Both streams are drained from their current position to the end and
        cannot be read again afterwards.
        """
        chunk_size = self.config.stream_chunk_size
        self.logger.info("Checking file result stream against the provided stream")

        passed = comparators.streams_equal(self.result.stream, expected, chunk_size)
        self.logger.info(f"File result stream matched={passed}")

        if not passed:
            report_mismatch(
                self.context,
                "file result stream",
                "to have value as the provided one",
                _DIFFERENT_RESULT,
            )
        return self


@register_handle(NamedFileResult, "file name")
class NamedFileResultAssertions(ActionResultAssertions):
    result: NamedFileResult

    def with_file_name(self, expected: str) -> NamedFileResultAssertions:
        actual = self.result.name
        self.logger.info(f"Checking file result name: expected '{expected}', actual '{actual}'")

        if not comparators.strings_equal(actual, expected):
            report_mismatch(
                self.context,
                "file result name",
                f"to be '{expected}'",
                f"but instead received '{actual}'",
            )
        return self

    def with_file_provider(self, expected: object) -> NamedFileResultAssertions:
        """Check the result uses the very same provider instance."""
        self.logger.info("Checking file result provider identity")

        if not comparators.same_instance(self.result.provider, expected):
            report_mismatch(
                self.context,
                "file result provider",
                "to be the same as the provided one",
                _DIFFERENT_RESULT,
            )
        return self

    def with_file_provider_of_type(self, expected_type: type) -> NamedFileResultAssertions:
        """Check the provider's runtime type is exactly ``expected_type``.

        A missing provider fails, and so does an instance of a subclass of
        ``expected_type``.
        """
        provider = self.result.provider
        actual_name = "None" if provider is None else type(provider).__name__
        self.logger.info(
            f"Checking file result provider type: expected {expected_type.__name__}, actual {actual_name}"
        )

        if not comparators.exact_type(provider, expected_type):
            report_mismatch(
                self.context,
                "file result provider",
                f"to be of {expected_type.__name__} type",
                f"but instead received {actual_name}",
            )
        return self


@register_handle(ByteContentResult, "file contents")
class ByteContentResultAssertions(ActionResultAssertions):
    result: ByteContentResult

    def with_content(self, expected: bytes) -> ByteContentResultAssertions:
        self.logger.info("Checking file result content against the provided bytes")

        passed = comparators.bytes_equal(self.result.content, expected)
        self.logger.info(f"File result content matched={passed}")

        if not passed:
            report_mismatch(
                self.context,
                "file result content",
                "to have value as the provided one",
                _DIFFERENT_RESULT,
            )
        return self
