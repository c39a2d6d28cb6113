"""Editor document abstraction.

The scanner never owns a document. It reads lines from, and writes
settings to, an object provided by the host editor. EditorDocument
describes the operations the host must support; TextDocument is an
in-memory implementation for hosts that only have a plain text buffer.

Example:
    >>> doc = TextDocument.from_text("# vim: et ts=2\\nprint('hi')\\n")
    >>> doc.line_count
    2
    >>> doc.get_line(0)
    '# vim: et ts=2'

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

from modeline.utils.logger import get_logger

logger = get_logger(__name__)


class IndentType(Enum):
    """Indentation style of a document."""

    SPACES = auto()
    TABS = auto()
    BOTH = auto()  # tabs for full stops, spaces for the remainder


@dataclass(frozen=True, slots=True)
class DocumentSettings:
    """Snapshot of the settings a modeline can change."""

    indent_type: IndentType
    indent_width: int
    line_wrapping: bool
    encoding: str


@runtime_checkable
class EditorDocument(Protocol):
    """Protocol for host editor documents.

    Line access is read-only. The setters are side-effecting calls into
    the host; the scanner assumes nothing about how they are stored.

    Thread Safety:
        One document is touched by one call at a time. All mutable state
        lives on the document, so different documents are independent.

    """

    @property
    def is_valid(self) -> bool:
        """Whether the document is open and may be scanned."""
        ...

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        ...

    @property
    def indent_type(self) -> IndentType:
        """Current indentation style."""
        ...

    @property
    def encoding(self) -> str:
        """Name of the current text encoding."""
        ...

    def get_line(self, index: int) -> str:
        """Return the text of line ``index`` (0-indexed)."""
        ...

    def set_indent_type(self, indent_type: IndentType) -> None:
        """Switch between tab and space indentation."""
        ...

    def set_indent_width(self, width: int) -> None:
        """Set the indent/tab width."""
        ...

    def set_line_wrapping(self, enabled: bool) -> None:
        """Turn word wrapping on or off."""
        ...

    def set_encoding(self, encoding: str) -> None:
        """Set the document encoding by name."""
        ...

    def reload(self, encoding: str) -> bool:
        """Re-read the document from its source using ``encoding``."""
        ...


class TextDocument:
    """In-memory EditorDocument backed by a list of lines.

    When created from bytes, the raw data is kept so reload() can decode it
    again with a different encoding. Every setter call is appended to
    ``changes`` as an ``(operation, value)`` pair.
    """

    __slots__ = (
        "_lines",
        "_raw",
        "_indent_type",
        "_indent_width",
        "_line_wrapping",
        "_encoding",
        "_is_valid",
        "changes",
    )

    def __init__(
        self,
        lines: list[str] | None = None,
        *,
        indent_type: IndentType = IndentType.TABS,
        indent_width: int = 4,
        line_wrapping: bool = False,
        encoding: str = "UTF-8",
        is_valid: bool = True,
    ) -> None:
        self._lines: list[str] = list(lines) if lines else []
        self._raw: bytes | None = None
        self._indent_type = indent_type
        self._indent_width = indent_width
        self._line_wrapping = line_wrapping
        self._encoding = encoding
        self._is_valid = is_valid
        self.changes: list[tuple[str, object]] = []

    @classmethod
    def from_text(cls, text: str, **kwargs: Any) -> TextDocument:
        """Create a document from a string, splitting on line boundaries."""
        return cls(text.splitlines(), **kwargs)

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = "UTF-8", **kwargs: Any) -> TextDocument:
        """Create a document from raw bytes decoded with ``encoding``.

        Undecodable bytes are replaced rather than rejected.
        """
        lines = data.decode(encoding, errors="replace").splitlines()
        doc = cls(lines, encoding=encoding, **kwargs)
        doc._raw = data
        return doc

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        """All lines of the document."""
        return tuple(self._lines)

    @property
    def indent_type(self) -> IndentType:
        return self._indent_type

    @property
    def indent_width(self) -> int:
        return self._indent_width

    @property
    def line_wrapping(self) -> bool:
        return self._line_wrapping

    @property
    def encoding(self) -> str:
        return self._encoding

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def set_indent_type(self, indent_type: IndentType) -> None:
        self.changes.append(("indent_type", indent_type))
        self._indent_type = indent_type

    def set_indent_width(self, width: int) -> None:
        self.changes.append(("indent_width", width))
        self._indent_width = width

    def set_line_wrapping(self, enabled: bool) -> None:
        self.changes.append(("line_wrapping", enabled))
        self._line_wrapping = enabled

    def set_encoding(self, encoding: str) -> None:
        self.changes.append(("encoding", encoding))
        self._encoding = encoding

    def reload(self, encoding: str) -> bool:
        """Decode the original bytes again with ``encoding``.

        Documents created from text have nothing to re-decode; the call
        only records the encoding. Returns False when the encoding name
        is unknown, leaving the lines untouched.
        """
        self.changes.append(("reload", encoding))
        if self._raw is None:
            return True
        try:
            text = self._raw.decode(encoding, errors="replace")
        except LookupError:
            logger.warning("Cannot reload document: unknown encoding %r", encoding)
            return False
        self._lines = text.splitlines()
        return True

    def settings(self) -> DocumentSettings:
        """Snapshot the current settings."""
        return DocumentSettings(
            indent_type=self._indent_type,
            indent_width=self._indent_width,
            line_wrapping=self._line_wrapping,
            encoding=self._encoding,
        )

    def __repr__(self) -> str:
        return f"TextDocument(lines={len(self._lines)}, {self.settings()!r})"
