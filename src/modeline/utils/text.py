"""Text helpers shared by the scanner and the interpreter.

Example:
    >>> from modeline.utils.text import ascii_equal_ignore_case, parse_unsigned
    >>> ascii_equal_ignore_case("ExpandTab", "expandtab")
    True
    >>> parse_unsigned(" 4 ")
    4
"""

from __future__ import annotations

import string

# Only ASCII letters fold; "K" (KELVIN SIGN) must not match "k".
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_ASCII_DIGITS: frozenset[str] = frozenset(string.digits)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return text.translate(_ASCII_LOWER)


def ascii_equal_ignore_case(a: str, b: str) -> bool:
    """Compare two strings, ignoring case of ASCII letters only."""
    return ascii_lower(a) == ascii_lower(b)


def parse_unsigned(value: str) -> int:
    """Parse an unsigned base-10 integer the lenient way.

    Surrounding whitespace is stripped and the longest leading run of
    ASCII digits is converted. Text with no leading digits yields 0
    rather than an error.

    Args:
        value: Raw option value

    Returns:
        Decoded integer (0 when nothing could be parsed)

    Examples:
        >>> parse_unsigned("8")
        8
        >>> parse_unsigned("4x")
        4
        >>> parse_unsigned("abc")
        0
    """
    text = value.strip()
    end = 0
    while end < len(text) and text[end] in _ASCII_DIGITS:
        end += 1
    if end == 0:
        return 0
    return int(text[:end])
