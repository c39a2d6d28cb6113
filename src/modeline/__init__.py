"""
modeline: editor modeline detection for Python hosts

Finds vim/geany style modelines (``# vim: et ts=4``) near the top of a
document and applies the indentation, wrapping and encoding settings they
name. Zero runtime dependencies.

Quick Start:
    >>> from modeline import TextDocument, apply_modelines
    >>> doc = TextDocument.from_text("# vim: et sw=2\\nprint('hi')")
    >>> apply_modelines(doc)
    '# vim: et sw=2'
    >>> doc.indent_width
    2

Host Integration:
    >>> from modeline import on_document_open, on_document_save
    >>>
    >>> # Any object implementing EditorDocument works
    >>> editor.connect("document-open", on_document_open)
    >>> editor.connect("document-save", on_document_save)

Supported options:
    expandtab/et, noexpandtab, tabstop/ts, softtabstop/sts, shiftwidth/sw,
    wrap, nowrap, fileencoding/encoding
"""

from modeline.config import (
    DEFAULT_MAX_LINES,
    MODELINE_PREFIXES,
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from modeline.document import DocumentSettings, EditorDocument, IndentType, TextDocument
from modeline.errors import ModelineError, OptionTableError
from modeline.interpreter import interpret, split_token
from modeline.lifecycle import CALLBACKS, PLUGIN_INFO, on_document_open, on_document_save
from modeline.options import (
    BUILTIN_OPTIONS,
    ArgKind,
    Handler,
    OptionSpec,
    OptionTable,
    OptionTableBuilder,
    create_default_table,
    create_table_with_defaults,
)
from modeline.pipeline import apply_modelines
from modeline.scanner import scan, scan_lines
from modeline.tokenizer import tokenize

__version__ = "1.0.0"


__all__ = [
    "__version__",
    # Pipeline
    "apply_modelines",
    "scan",
    "scan_lines",
    "tokenize",
    "interpret",
    "split_token",
    # Host lifecycle
    "on_document_open",
    "on_document_save",
    "CALLBACKS",
    "PLUGIN_INFO",
    # Documents
    "DocumentSettings",
    "EditorDocument",
    "IndentType",
    "TextDocument",
    # Option table
    "ArgKind",
    "BUILTIN_OPTIONS",
    "Handler",
    "OptionSpec",
    "OptionTable",
    "OptionTableBuilder",
    "create_default_table",
    "create_table_with_defaults",
    # Configuration (ContextVar-based)
    "DEFAULT_MAX_LINES",
    "MODELINE_PREFIXES",
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "ModelineError",
    "OptionTableError",
]
