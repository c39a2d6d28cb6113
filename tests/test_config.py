"""Tests for ContextVar-based scan configuration."""

import pytest

from modeline import (
    DEFAULT_MAX_LINES,
    MODELINE_PREFIXES,
    ScanConfig,
    create_default_table,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from modeline.options import OptionTableBuilder


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.max_lines == DEFAULT_MAX_LINES == 50
        assert config.prefixes == MODELINE_PREFIXES == (" geany:", " vi:", " vim:", " ex:")
        assert config.options is None

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.max_lines = 10  # type: ignore[misc]

    def test_negative_max_lines_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_lines"):
            ScanConfig(max_lines=-1)

    def test_option_table_defaults_to_builtin(self) -> None:
        assert ScanConfig().option_table() is create_default_table()

    def test_option_table_override(self) -> None:
        table = OptionTableBuilder().build()
        assert ScanConfig(options=table).option_table() is table


class TestScanConfigFromDict:
    """Test ScanConfig.from_dict."""

    def test_known_keys(self) -> None:
        config = ScanConfig.from_dict({"max_lines": 5, "prefixes": [" kate:"]})
        assert config.max_lines == 5
        assert config.prefixes == (" kate:",)

    def test_unknown_keys_ignored(self) -> None:
        config = ScanConfig.from_dict({"max_lines": 7, "theme": "dark"})
        assert config.max_lines == 7

    def test_empty_dict_gives_defaults(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_string_prefixes_is_one_marker(self) -> None:
        config = ScanConfig.from_dict({"prefixes": " kate:"})
        assert config.prefixes == (" kate:",)


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config().max_lines == 50

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(max_lines=3))
        assert get_scan_config().max_lines == 3

    def test_reset_restores_default(self) -> None:
        set_scan_config(ScanConfig(max_lines=3))
        reset_scan_config()
        assert get_scan_config().max_lines == 50


class TestScanConfigContext:
    """Test scan_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with scan_config_context(ScanConfig(max_lines=1)):
            assert get_scan_config().max_lines == 1
        assert get_scan_config().max_lines == 50

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(max_lines=1)):
            with scan_config_context(ScanConfig(max_lines=2)):
                assert get_scan_config().max_lines == 2
            assert get_scan_config().max_lines == 1
        assert get_scan_config().max_lines == 50

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(max_lines=1)):
                raise RuntimeError("boom")
        assert get_scan_config().max_lines == 50
