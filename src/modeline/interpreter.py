"""Option interpreter: apply one modeline token to a document.

A token is either a bare key (``expandtab``) or ``key=value`` (``ts=4``).
The key is looked up in the option table and the value decoded according
to the option's ArgKind before the handler runs. Anything that does not
fit (unknown keys, ``=4``, ``ts=``, an integer option without a value) is
dropped without raising, so one bad token never stops the rest of the
modeline from being applied.

Integer values are decoded leniently: the leading digits are used and a
value without any (``ts=abc``) decodes to 0.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modeline.config import get_scan_config
from modeline.options import ArgKind, OptionSpec, apply_handler
from modeline.utils.logger import get_logger
from modeline.utils.text import parse_unsigned

if TYPE_CHECKING:
    from modeline.document import EditorDocument
    from modeline.options import OptionTable

logger = get_logger(__name__)


def split_token(token: str) -> tuple[str, str | None] | None:
    """Split a token into key and optional value.

    Returns:
        ``(key, value)`` for ``key=value``, ``(token, None)`` for a bare key,
        or None when either side of ``=`` is empty

    Example:
        >>> split_token("ts=4")
        ('ts', '4')
        >>> split_token("et")
        ('et', None)
        >>> split_token("=4") is None
        True
    """
    if "=" not in token:
        return token, None
    key, _, value = token.partition("=")
    if not key or not value:
        return None
    return key, value


def decode_argument(spec: OptionSpec, value: str | None) -> bool | int | str | None:
    """Decode a raw value for ``spec``; None means the option is skipped."""
    match spec.kind:
        case ArgKind.TRUE:
            return True
        case ArgKind.FALSE:
            return False
        case ArgKind.INT:
            return None if value is None else parse_unsigned(value)
        case ArgKind.STR:
            return value
    return None


def interpret(
    document: EditorDocument,
    token: str,
    table: OptionTable | None = None,
) -> OptionSpec | None:
    """Apply a single option token to a document.

    Args:
        document: Target document
        token: Raw token from the tokenizer
        table: Option table (defaults to the active ScanConfig's)

    Returns:
        The option that was applied, or None if the token was ignored
    """
    logger.debug("interpret [%s]", token)

    parts = split_token(token)
    if parts is None:
        logger.debug("malformed option %r ignored", token)
        return None
    key, value = parts

    if table is None:
        table = get_scan_config().option_table()

    spec = table.lookup(key)
    if spec is None:
        logger.debug("unknown option %r ignored", key)
        return None

    arg = decode_argument(spec, value)
    if arg is None:
        logger.debug("option %r needs a value", spec.name)
        return None

    apply_handler(document, spec.handler, arg)
    return spec
