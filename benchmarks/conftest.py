"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from modeline import TextDocument


@pytest.fixture
def large_document() -> TextDocument:
    """A 100k-line source file with its modeline on the last line."""
    lines = [f"def function_{i}():\n    return {i}" for i in range(50_000)]
    text = "\n".join(lines) + "\n# vim: et ts=4 sw=4\n"
    return TextDocument.from_text(text)


@pytest.fixture
def headed_document() -> TextDocument:
    """A 100k-line source file with its modeline on the first line."""
    lines = [f"def function_{i}():\n    return {i}" for i in range(50_000)]
    text = "# vim: et ts=4 sw=4 wrap encoding=UTF-8\n" + "\n".join(lines)
    return TextDocument.from_text(text)
