"""Option tokenizer: split a modeline into key[=value] tokens.

Tokens are separated by any run of colons, spaces and commas. Everything
up to and including the modeline marker is the comment leader and is
dropped, as are the empty fields produced by consecutive delimiters.
No validation happens here; the interpreter ignores malformed tokens.

Example:
    >>> tokenize("# vim:noexpandtab sw=4 ts=4")
    ['noexpandtab', 'sw=4', 'ts=4']
    >>> tokenize("/* vim: set et,,ts=8: */")
    ['set', 'et', 'ts=8', '*/']

"""

from __future__ import annotations

import re
from collections.abc import Sequence

from modeline.config import get_scan_config

DELIMITERS = ": ,"

_DELIMITER_RE = re.compile(f"[{re.escape(DELIMITERS)}]")


def split_fields(text: str) -> list[str]:
    """Split on every delimiter, keeping empty fields."""
    return _DELIMITER_RE.split(text)


def tokenize(line: str, prefixes: Sequence[str] | None = None) -> list[str]:
    """Split a modeline into option tokens.

    The line is cut after the marker that occurs earliest in it, so only
    the comment leader is dropped, and the remainder is split. A line
    without any marker is split whole and its first field is treated as
    the comment leader.

    Args:
        line: Stripped modeline text
        prefixes: Marker substrings (defaults to the active ScanConfig's)

    Returns:
        Non-empty tokens, in line order
    """
    if prefixes is None:
        prefixes = get_scan_config().prefixes

    found = [(line.find(prefix), prefix) for prefix in prefixes if prefix in line]
    if found:
        index, prefix = min(found, key=lambda item: item[0])
        fields = split_fields(line[index + len(prefix) :])
        return [field for field in fields if field]

    fields = split_fields(line)
    return [field for field in fields[1:] if field]
