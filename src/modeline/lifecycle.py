"""Entry points for host editor lifecycle events.

A host registers ``on_document_open`` and ``on_document_save`` for its
document events (``CALLBACKS`` maps Geany's signal names to them). Opening
re-reads the file afterwards because the modeline may have changed the
encoding the content should be decoded with.

Example:
    >>> for signal, callback in CALLBACKS.items():
    ...     host.connect(signal, callback)

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from modeline.pipeline import apply_modelines

if TYPE_CHECKING:
    from modeline.document import EditorDocument


@dataclass(frozen=True, slots=True)
class PluginInfo:
    """Metadata a host shows in its plugin manager."""

    name: str
    description: str
    version: str
    author: str


PLUGIN_INFO = PluginInfo(
    name="Modeline",
    description="Detect modelines for code formatting",
    version="1.0",
    author="Matt Hayes",
)


def on_document_open(document: EditorDocument) -> str | None:
    """Apply the modeline of a freshly opened document, then reload it."""
    return apply_modelines(document, reload_needed=True)


def on_document_save(document: EditorDocument) -> str | None:
    """Re-apply the modeline after the document was saved."""
    return apply_modelines(document, reload_needed=False)


CALLBACKS: dict[str, Callable[[EditorDocument], str | None]] = {
    "document-open": on_document_open,
    "document-save": on_document_save,
}
