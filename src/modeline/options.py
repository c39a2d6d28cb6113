"""Option table and handlers for modeline settings.

Each supported option is an OptionSpec: a canonical name, an optional
short alias, the kind of argument it takes, and the handler that applies
it to a document. Handlers are identified by enum members and dispatched
with a single match statement, so the table holds plain data only.

Thread Safety:
    OptionSpec is frozen and OptionTable is immutable after creation.
    Safe to share across threads. Use OptionTableBuilder for construction.

Example:
    >>> table = create_default_table()
    >>> table.lookup("ET").name
    'expandtab'
    >>> table.lookup("sw").handler
    <Handler.TAB_STOP: 2>

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from modeline.document import IndentType
from modeline.errors import OptionTableError
from modeline.utils.logger import get_logger
from modeline.utils.text import ascii_equal_ignore_case, ascii_lower

if TYPE_CHECKING:
    from modeline.document import EditorDocument

logger = get_logger(__name__)


class ArgKind(Enum):
    """How an option's argument is decoded."""

    TRUE = auto()  # bare flag, always True
    FALSE = auto()  # bare flag, always False
    INT = auto()  # key=<digits>
    STR = auto()  # key=<text>


class Handler(Enum):
    """Document setting an option changes."""

    EXPAND_TAB = auto()
    TAB_STOP = auto()
    WRAP = auto()
    ENCODING = auto()


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One supported modeline option.

    Attributes:
        name: Canonical option name (e.g., "tabstop")
        alias: Short alias (e.g., "ts"), or None
        kind: Argument kind
        handler: Setting the option applies to

    """

    name: str
    alias: str | None
    kind: ArgKind
    handler: Handler

    def matches(self, key: str) -> bool:
        """Check whether ``key`` names this option, ignoring ASCII case."""
        if ascii_equal_ignore_case(self.name, key):
            return True
        return self.alias is not None and ascii_equal_ignore_case(self.alias, key)

    @property
    def keys(self) -> tuple[str, ...]:
        """Name followed by alias, when present."""
        if self.alias is None:
            return (self.name,)
        return (self.name, self.alias)


def apply_handler(document: EditorDocument, handler: Handler, arg: bool | int | str) -> None:
    """Apply a decoded option argument to a document.

    Args:
        document: Target document
        handler: Setting to change
        arg: Decoded argument (bool for flags, int for widths, str for names)
    """
    logger.debug("%s: %r", handler.name.lower(), arg)

    match handler:
        case Handler.EXPAND_TAB:
            document.set_indent_type(IndentType.SPACES if arg else IndentType.TABS)
        case Handler.TAB_STOP:
            # Setting the width alone must not lose the indent style.
            indent_type = document.indent_type
            document.set_indent_width(int(arg))
            document.set_indent_type(indent_type)
        case Handler.WRAP:
            document.set_line_wrapping(bool(arg))
        case Handler.ENCODING:
            document.set_encoding(str(arg))
            logger.debug("encoding is now %r", document.encoding)


class OptionTable:
    """Immutable, ordered table of option specs.

    Lookup is a linear scan in table order; the first matching spec wins.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: tuple[OptionSpec, ...]) -> None:
        """Initialize table from ordered specs.

        Use OptionTableBuilder to create validated instances.
        """
        self._specs = specs

    def lookup(self, key: str) -> OptionSpec | None:
        """Find the first spec whose name or alias matches ``key``.

        Args:
            key: Option key as written in the modeline (any case)

        Returns:
            Matching spec, or None for unknown keys
        """
        for spec in self._specs:
            if spec.matches(key):
                return spec
        return None

    @property
    def specs(self) -> tuple[OptionSpec, ...]:
        """All specs in table order."""
        return self._specs

    @property
    def names(self) -> frozenset[str]:
        """Every canonical name and alias in the table."""
        return frozenset(key for spec in self._specs for key in spec.keys)

    def __contains__(self, key: str) -> bool:
        """Support 'key in table' syntax."""
        return self.lookup(key) is not None

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        """Number of specs."""
        return len(self._specs)


class OptionTableBuilder:
    """Mutable builder for OptionTable.

    Rejects specs whose name or alias is already taken (ignoring ASCII
    case), so a built table never depends on first-match ordering to
    resolve a collision.

    Example:
        >>> builder = OptionTableBuilder()
        >>> spec = OptionSpec("wrap", None, ArgKind.TRUE, Handler.WRAP)
        >>> table = builder.register(spec).build()
    """

    __slots__ = ("_specs", "_taken")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._specs: list[OptionSpec] = []
        self._taken: dict[str, OptionSpec] = {}

    def register(self, spec: OptionSpec) -> OptionTableBuilder:
        """Append an option spec.

        Args:
            spec: Option to add

        Returns:
            Self for chaining

        Raises:
            OptionTableError: If the name is empty or a key is already registered
        """
        if not spec.name:
            raise OptionTableError(spec.name, "option name must not be empty")
        if spec.alias == "":
            raise OptionTableError(spec.name, "alias must be None or non-empty")

        for key in spec.keys:
            folded = ascii_lower(key)
            if folded in self._taken:
                existing = self._taken[folded]
                msg = f"'{key}' already registered by '{existing.name}'"
                raise OptionTableError(spec.name, msg)

        for key in spec.keys:
            self._taken[ascii_lower(key)] = spec
        self._specs.append(spec)
        return self

    def register_all(self, specs: list[OptionSpec]) -> OptionTableBuilder:
        """Register multiple specs in order.

        Args:
            specs: Specs to register

        Returns:
            Self for chaining
        """
        for spec in specs:
            self.register(spec)
        return self

    def build(self) -> OptionTable:
        """Build immutable table from registered specs."""
        return OptionTable(tuple(self._specs))

    def __len__(self) -> int:
        """Number of registered specs."""
        return len(self._specs)


BUILTIN_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("expandtab", "et", ArgKind.TRUE, Handler.EXPAND_TAB),
    OptionSpec("noexpandtab", None, ArgKind.FALSE, Handler.EXPAND_TAB),
    OptionSpec("tabstop", "ts", ArgKind.INT, Handler.TAB_STOP),
    OptionSpec("softtabstop", "sts", ArgKind.INT, Handler.TAB_STOP),
    OptionSpec("shiftwidth", "sw", ArgKind.INT, Handler.TAB_STOP),
    OptionSpec("wrap", None, ArgKind.TRUE, Handler.WRAP),
    OptionSpec("nowrap", None, ArgKind.FALSE, Handler.WRAP),
    OptionSpec("fileencoding", "encoding", ArgKind.STR, Handler.ENCODING),
)


def create_table_with_defaults() -> OptionTableBuilder:
    """Create a builder pre-populated with the built-in options.

    Use this to extend the defaults:

        >>> builder = create_table_with_defaults()
        >>> spec = OptionSpec("nowrapscan", None, ArgKind.FALSE, Handler.WRAP)
        >>> table = builder.register(spec).build()

    Returns:
        OptionTableBuilder with built-in options registered
    """
    return OptionTableBuilder().register_all(list(BUILTIN_OPTIONS))


# Cached singleton, shared safely since OptionTable is immutable
_DEFAULT_TABLE: OptionTable | None = None


def create_default_table() -> OptionTable:
    """Get the built-in option table (cached singleton).

    Returns:
        Table with expandtab/et, noexpandtab, tabstop/ts, softtabstop/sts,
        shiftwidth/sw, wrap, nowrap and fileencoding/encoding
    """
    global _DEFAULT_TABLE
    if _DEFAULT_TABLE is None:
        _DEFAULT_TABLE = create_table_with_defaults().build()
    return _DEFAULT_TABLE
