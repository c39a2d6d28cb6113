"""Bridge a host editor's documents to the modeline entry points.

A real host implements EditorDocument on top of its own buffer and
settings API, then connects CALLBACKS to its document signals. Here a
tiny fake editor stands in for the host.
"""

import sys
from collections.abc import Callable
from pathlib import Path

from modeline import CALLBACKS, PLUGIN_INFO, TextDocument


class FakeEditor:
    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[[TextDocument], object]]] = {}

    def connect(self, signal: str, handler: Callable[[TextDocument], object]) -> None:
        self._handlers.setdefault(signal, []).append(handler)

    def emit(self, signal: str, doc: TextDocument) -> None:
        for handler in self._handlers.get(signal, []):
            handler(doc)

    def open(self, path: Path) -> TextDocument:
        doc = TextDocument.from_bytes(path.read_bytes())
        self.emit("document-open", doc)
        return doc


editor = FakeEditor()
for signal, callback in CALLBACKS.items():
    editor.connect(signal, callback)

print(f"{PLUGIN_INFO.name} {PLUGIN_INFO.version}: {PLUGIN_INFO.description}")
for arg in sys.argv[1:]:
    opened = editor.open(Path(arg))
    print(arg, opened.settings())
