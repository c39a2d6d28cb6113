"""End-to-end tests for apply_modelines and the lifecycle entry points."""

from modeline import (
    CALLBACKS,
    PLUGIN_INFO,
    IndentType,
    ScanConfig,
    TextDocument,
    apply_modelines,
    on_document_open,
    on_document_save,
    scan_config_context,
)


class TestApplyModelines:
    """Full scan → tokenize → interpret pass."""

    def test_vim_modeline(self) -> None:
        doc = TextDocument.from_text("// vim: et ts=2 sw=2\nint main() {}\n")
        assert apply_modelines(doc) == "// vim: et ts=2 sw=2"
        assert doc.indent_type is IndentType.SPACES
        assert doc.indent_width == 2

    def test_last_token_wins(self) -> None:
        doc = TextDocument.from_text("# vim: ts=8 sw=4")
        apply_modelines(doc)
        assert doc.indent_width == 4

    def test_all_settings(self) -> None:
        doc = TextDocument.from_text("// vim: expandtab:ts=8:wrap:encoding=ISO-8859-1")
        apply_modelines(doc)
        assert doc.indent_type is IndentType.SPACES
        assert doc.indent_width == 8
        assert doc.line_wrapping is True
        assert doc.encoding == "ISO-8859-1"

    def test_bad_tokens_do_not_stop_the_rest(self) -> None:
        doc = TextDocument.from_text("# geany: =4 bogus ts= et sw=3")
        apply_modelines(doc)
        assert doc.indent_type is IndentType.SPACES
        assert doc.indent_width == 3

    def test_options_before_second_marker_applied(self) -> None:
        doc = TextDocument.from_text("/* vim: et ts=2 # vi: sw=8 */")
        apply_modelines(doc)
        assert doc.indent_type is IndentType.SPACES
        assert doc.indent_width == 8
        assert ("indent_width", 2) in doc.changes

    def test_only_first_modeline_used(self) -> None:
        doc = TextDocument.from_text("# vim: ts=2\n# vim: ts=8 et\n")
        apply_modelines(doc)
        assert doc.indent_width == 2
        assert doc.indent_type is IndentType.TABS

    def test_modeline_at_end_of_short_file(self) -> None:
        doc = TextDocument.from_text("x = 1\ny = 2\n# vi: sw=4 et\n")
        apply_modelines(doc)
        assert doc.indent_width == 4

    def test_no_modeline_no_changes(self) -> None:
        doc = TextDocument.from_text("print('hello')\n")
        assert apply_modelines(doc) is None
        assert doc.changes == []

    def test_modeline_past_limit_ignored(self) -> None:
        doc = TextDocument([""] * 60 + ["# vim: et"])
        assert apply_modelines(doc) is None
        assert doc.changes == []

    def test_idempotent(self) -> None:
        doc = TextDocument.from_text("# vim: noexpandtab ts=3 nowrap encoding=cp1252")
        apply_modelines(doc)
        once = doc.settings()
        apply_modelines(doc)
        assert doc.settings() == once

    def test_reload_requested(self) -> None:
        doc = TextDocument.from_text("# vim: encoding=latin-1")
        apply_modelines(doc, reload_needed=True)
        assert doc.changes[-1] == ("reload", "latin-1")

    def test_reload_without_modeline(self) -> None:
        doc = TextDocument.from_text("plain", encoding="UTF-8")
        apply_modelines(doc, reload_needed=True)
        assert doc.changes == [("reload", "UTF-8")]

    def test_custom_prefixes_from_config(self) -> None:
        doc = TextDocument.from_text("# kate: et ts=2")
        with scan_config_context(ScanConfig(prefixes=(" kate:",))):
            assert apply_modelines(doc) == "# kate: et ts=2"
        assert doc.indent_width == 2


class TestLifecycle:
    """Host entry points."""

    def test_open_reloads_with_new_encoding(self) -> None:
        data = "# vim: encoding=latin-1\ncafé\n".encode("latin-1")
        doc = TextDocument.from_bytes(data, encoding="UTF-8")
        assert doc.get_line(1) == "caf\ufffd"

        on_document_open(doc)

        assert doc.encoding == "latin-1"
        assert doc.get_line(1) == "café"
        assert ("reload", "latin-1") in doc.changes

    def test_save_does_not_reload(self) -> None:
        doc = TextDocument.from_text("# vim: et")
        on_document_save(doc)
        assert doc.indent_type is IndentType.SPACES
        assert all(op != "reload" for op, _ in doc.changes)

    def test_callbacks_mapping(self) -> None:
        assert CALLBACKS == {
            "document-open": on_document_open,
            "document-save": on_document_save,
        }

    def test_plugin_info(self) -> None:
        assert PLUGIN_INFO.name == "Modeline"
        assert PLUGIN_INFO.description == "Detect modelines for code formatting"
