"""Line scanner: find the modeline in a document.

Only the first lines of a document are examined (50 by default), so the
cost stays bounded on huge files. Each line is stripped and searched for
the marker substrings; the first line containing any marker is the
modeline.

Example:
    >>> scan_lines(["#!/bin/sh", "# vim: et sw=2"])
    '# vim: et sw=2'
    >>> scan_lines(["vim: et"]) is None  # marker needs a leading space
    True

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import TYPE_CHECKING

from modeline.config import DEFAULT_MAX_LINES, MODELINE_PREFIXES, get_scan_config
from modeline.utils.logger import get_logger

if TYPE_CHECKING:
    from modeline.document import EditorDocument

logger = get_logger(__name__)


def find_prefix(line: str, prefixes: Sequence[str] = MODELINE_PREFIXES) -> str | None:
    """Return the first marker (in ``prefixes`` order) that ``line`` contains."""
    for prefix in prefixes:
        if prefix in line:
            return prefix
    return None


def scan_lines(
    lines: Iterable[str],
    *,
    prefixes: Sequence[str] = MODELINE_PREFIXES,
    max_lines: int = DEFAULT_MAX_LINES,
) -> str | None:
    """Find the first modeline among the leading ``max_lines`` lines.

    Args:
        lines: Document lines, in order
        prefixes: Marker substrings
        max_lines: Scan limit

    Returns:
        The stripped modeline text, or None if no line matched
    """
    for lineno, raw in enumerate(islice(lines, max_lines), start=1):
        line = raw.strip()
        if find_prefix(line, prefixes) is not None:
            logger.debug("modeline on line %d: [%s]", lineno, line)
            return line
    return None


def _document_lines(document: EditorDocument, limit: int) -> Iterator[str]:
    for index in range(min(document.line_count, limit)):
        yield document.get_line(index)


def scan(document: EditorDocument) -> str | None:
    """Find the modeline of a host document.

    Uses the active ScanConfig for the markers and the line limit.
    Invalid (closed) documents are not scanned.

    Args:
        document: Host document

    Returns:
        The stripped modeline text, or None if there is none
    """
    if not document.is_valid:
        logger.debug("skipping invalid document")
        return None

    config = get_scan_config()
    return scan_lines(
        _document_lines(document, config.max_lines),
        prefixes=config.prefixes,
        max_lines=config.max_lines,
    )
