"""Equality rules used by the field assertions.

Every function here is a pure check returning a bool; formatting and raising
is left to the caller.
"""

from __future__ import annotations

from typing import BinaryIO, Callable


def drain(stream: BinaryIO, chunk_size: int) -> bytes:
    """Read ``stream`` from its current position to the end.

    The stream is not rewound before or after reading, so it is exhausted
    once this returns.
    """
    buffer = bytearray()
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        buffer.extend(chunk)
    return bytes(buffer)


def bytes_equal(actual: bytes, expected: bytes) -> bool:
    if len(actual) != len(expected):
        return False
    return all(a == b for a, b in zip(actual, expected))


def streams_equal(actual: BinaryIO, expected: BinaryIO, chunk_size: int) -> bool:
    return bytes_equal(drain(actual, chunk_size), drain(expected, chunk_size))


def strings_equal(actual: str | None, expected: str | None) -> bool:
    return actual == expected


def same_instance(actual: object, expected: object) -> bool:
    return actual is expected


def exact_type(actual: object, expected_type: type) -> bool:
    # Subclasses of expected_type do not match.
    return actual is not None and type(actual) is expected_type


def satisfies(actual: str, predicate: Callable[[str], bool]) -> bool:
    return bool(predicate(actual))
