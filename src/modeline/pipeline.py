"""Scan, tokenize and interpret: the full modeline pass over a document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modeline.config import get_scan_config
from modeline.interpreter import interpret
from modeline.scanner import scan
from modeline.tokenizer import tokenize
from modeline.utils.logger import get_logger

if TYPE_CHECKING:
    from modeline.document import EditorDocument

logger = get_logger(__name__)


def apply_modelines(document: EditorDocument, reload_needed: bool = False) -> str | None:
    """Find the document's modeline and apply every option it sets.

    Options are applied in line order, so when several tokens map to the
    same setting the last one wins. Running the pass twice on an unchanged
    document leaves the same settings as running it once.

    Args:
        document: Host document
        reload_needed: Ask the host to reload the document with its
            (possibly just changed) encoding once options are applied.
            Hosts set this when a document is opened, since the content
            was decoded before the modeline could name its encoding.

    Returns:
        The modeline text that was applied, or None if none was found

    Example:
        >>> doc = TextDocument.from_text("// vim: et ts=2 sw=2")
        >>> apply_modelines(doc)
        '// vim: et ts=2 sw=2'
        >>> doc.indent_type, doc.indent_width
        (<IndentType.SPACES: 1>, 2)
    """
    config = get_scan_config()
    line = scan(document)

    if line is not None:
        logger.debug("modeline [%s]", line)
        table = config.option_table()
        for token in tokenize(line, config.prefixes):
            interpret(document, token, table)

    if reload_needed:
        document.reload(document.encoding)

    return line
