"""Action result variants produced by a request handler under test."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO


class FileProvider:
    """Source a named file result is served from."""


class PhysicalFileProvider(FileProvider):
    """File provider rooted at a directory on disk."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"PhysicalFileProvider({str(self.root)!r})"


@dataclass(frozen=True)
class StreamResult:
    stream: BinaryIO
    content_type: str | None = None


@dataclass(frozen=True)
class NamedFileResult:
    """A file identified by name and served through a provider.

    Attributes:
        name: File name, e.g. "report.pdf".
        provider: The provider instance the file is resolved through, or None
            when the handler did not set one.
        content_type: MIME type sent with the file.
    """

    name: str
    provider: Any = None
    content_type: str | None = None


@dataclass(frozen=True)
class ByteContentResult:
    content: bytes
    content_type: str | None = None


@dataclass(frozen=True)
class TextContentResult:
    text: str
    content_type: str | None = None
