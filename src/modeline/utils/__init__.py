"""Utility modules for modeline.

Provides:
- text: ASCII case folding and lenient integer parsing
- logger: get_logger for logging
"""

from modeline.utils.logger import get_logger
from modeline.utils.text import ascii_equal_ignore_case, ascii_lower, parse_unsigned

__all__ = [
    "ascii_equal_ignore_case",
    "ascii_lower",
    "get_logger",
    "parse_unsigned",
]
