"""Assertion handles, variant narrowing and the single failure formatting point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, BinaryIO, Callable, NoReturn, TypeVar, overload

from actioncheck.config import AssertionConfig
from actioncheck.context import AssertionContext
from actioncheck.errors import (
    ActionResultAssertionError,
    CapabilityMismatchError,
    ValueMismatchError,
)
from actioncheck.results import (
    ByteContentResult,
    NamedFileResult,
    StreamResult,
    TextContentResult,
)

if TYPE_CHECKING:
    from actioncheck.assertions.content import TextContentResultAssertions
    from actioncheck.assertions.files import (
        ByteContentResultAssertions,
        NamedFileResultAssertions,
        StreamResultAssertions,
    )

H = TypeVar("H", bound="ActionResultAssertions")

_HANDLES: dict[type, type[ActionResultAssertions]] = {}


def register_handle(variant: type, field_name: str) -> Callable[[type[H]], type[H]]:
    """Class decorator binding a narrowed handle class to its result variant.

    ``field_name`` names the variant's primary field in the failure raised
    when the handle is built around a result of another variant.
    """

    def _register(cls: type[H]) -> type[H]:
        _HANDLES[variant] = cls
        cls.variant = variant
        cls.field_name = field_name
        return cls

    return _register


def report_mismatch(
    context: AssertionContext,
    field: str,
    expectation: str,
    actual: str,
    error: type[ActionResultAssertionError] = ValueMismatchError,
) -> NoReturn:
    """Raise ``error`` with the uniform "<prefix> <field> <expectation>, <actual>." message."""
    raise error(f"{context.prefix} {field} {expectation}, {actual}.")


def _require_variant(
    result: Any,
    variant: type,
    field_name: str,
    context: AssertionContext,
    logger: logging.Logger,
) -> None:
    if type(result) is not variant:
        logger.info(
            f"Narrowing to {variant.__name__} for '{field_name}' failed: "
            f"result is {type(result).__name__}"
        )
        report_mismatch(
            context,
            "file result",
            f"to contain {field_name}",
            "but such could not be found",
            error=CapabilityMismatchError,
        )


@overload
def narrow(
    handle: ActionResultAssertions, variant: type[StreamResult], field_name: str
) -> StreamResultAssertions: ...
@overload
def narrow(
    handle: ActionResultAssertions, variant: type[NamedFileResult], field_name: str
) -> NamedFileResultAssertions: ...
@overload
def narrow(
    handle: ActionResultAssertions, variant: type[ByteContentResult], field_name: str
) -> ByteContentResultAssertions: ...
@overload
def narrow(
    handle: ActionResultAssertions, variant: type[TextContentResult], field_name: str
) -> TextContentResultAssertions: ...
def narrow(handle: ActionResultAssertions, variant: type, field_name: str) -> ActionResultAssertions:
    """Return the handle specialised to ``variant`` or raise CapabilityMismatchError.

    The wrapped result must be exactly of ``variant``; subclasses and
    look-alike objects are rejected. The check runs on every call. When
    ``handle`` already is the specialised handle it is returned as is,
    otherwise a new one sharing the same result, context and settings is
    built.
    """
    _require_variant(handle.result, variant, field_name, handle.context, handle.logger)

    handle_cls = _HANDLES[variant]
    if type(handle) is handle_cls:
        return handle
    return handle_cls(handle.result, handle.context, config=handle.config, logger=handle.logger)


class ActionResultAssertions:
    """Fluent assertions over a result whose variant is not yet known.

    Every assertion narrows to the variant owning the field, compares, and
    returns the narrowed handle so further checks on the same variant can be
    chained without re-resolving it. Narrowed subclasses reject results of
    any other variant as soon as they are built.
    """

    variant: type | None = None
    field_name: str = ""

    def __init__(
        self,
        result: Any,
        context: AssertionContext,
        *,
        config: AssertionConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.result = result
        self.context = context
        self.config = config if config is not None else AssertionConfig()
        self.logger = logger or logging.getLogger("actioncheck")

        if self.variant is not None:
            _require_variant(result, self.variant, self.field_name, context, self.logger)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.result!r})"

    # --- file results ---

    def with_stream(self, expected: BinaryIO) -> StreamResultAssertions:
        return narrow(self, StreamResult, "stream").with_stream(expected)

    def with_file_name(self, expected: str) -> NamedFileResultAssertions:
        return narrow(self, NamedFileResult, "file name").with_file_name(expected)

    def with_file_provider(self, expected: object) -> NamedFileResultAssertions:
        return narrow(self, NamedFileResult, "file provider").with_file_provider(expected)

    def with_file_provider_of_type(self, expected_type: type) -> NamedFileResultAssertions:
        handle = narrow(self, NamedFileResult, "file provider")
        return handle.with_file_provider_of_type(expected_type)

    def with_content(self, expected: bytes) -> ByteContentResultAssertions:
        return narrow(self, ByteContentResult, "file contents").with_content(expected)

    # --- content results ---

    def with_text(self, expected: str) -> TextContentResultAssertions:
        return narrow(self, TextContentResult, "content").with_text(expected)

    def with_text_satisfying(self, predicate: Callable[[str], bool]) -> TextContentResultAssertions:
        return narrow(self, TextContentResult, "content").with_text_satisfying(predicate)

    def with_text_checked_by(self, callback: Callable[[str], object]) -> TextContentResultAssertions:
        return narrow(self, TextContentResult, "content").with_text_checked_by(callback)

    # --- any result ---

    def with_content_type(self: H, expected: str) -> H:
        """Check the content type every result variant carries."""
        actual = getattr(self.result, "content_type", None)
        self.logger.info(f"Checking content type: expected '{expected}', actual '{actual}'")
        if actual != expected:
            report_mismatch(
                self.context,
                "action result content type",
                f"to be '{expected}'",
                f"but instead received '{actual}'",
            )
        return self


def assert_that(
    result: Any,
    context: AssertionContext,
    *,
    config: AssertionConfig | None = None,
    logger: logging.Logger | None = None,
) -> ActionResultAssertions:
    """Start a fluent assertion chain over ``result``."""
    return ActionResultAssertions(result, context, config=config, logger=logger)
