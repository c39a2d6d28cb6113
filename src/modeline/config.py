"""ContextVar-based scan configuration for modeline.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The defaults match the behavior hosts expect: the first 50 lines are
scanned for the geany/vi/vim/ex markers and the built-in option table
is used.

Usage:
    from modeline.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(max_lines=5)):
        apply_modelines(doc)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modeline.options import OptionTable

# Markers searched for in each stripped line, in priority order.
# The leading space is part of each marker.
MODELINE_PREFIXES: tuple[str, ...] = (" geany:", " vi:", " vim:", " ex:")

# Never look past this many lines, however large the document.
DEFAULT_MAX_LINES = 50


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        max_lines: Number of leading lines searched for a modeline
        prefixes: Marker substrings, checked in order
        options: Option table (None selects the built-in table)

    """

    max_lines: int = DEFAULT_MAX_LINES
    prefixes: tuple[str, ...] = MODELINE_PREFIXES
    options: OptionTable | None = None

    def __post_init__(self) -> None:
        if self.max_lines < 0:
            msg = f"max_lines must be >= 0, got {self.max_lines}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. A list given for ``prefixes`` is converted
        to a tuple; a single string is treated as one marker.

        Example:
            >>> config = ScanConfig.from_dict({"max_lines": 10, "theme": "dark"})
            >>> config.max_lines
            10

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "prefixes" in filtered:
            prefixes = filtered["prefixes"]
            if isinstance(prefixes, str):
                prefixes = (prefixes,)
            filtered["prefixes"] = tuple(prefixes)
        return cls(**filtered)

    def option_table(self) -> OptionTable:
        """Return the configured option table, or the built-in one."""
        if self.options is not None:
            return self.options
        from modeline.options import create_default_table

        return create_default_table()


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    Example:
        >>> with scan_config_context(ScanConfig(max_lines=1)):
        ...     get_scan_config().max_lines
        1

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_MAX_LINES",
    "MODELINE_PREFIXES",
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
