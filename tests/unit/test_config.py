"""Tests for config.load_config()."""

from __future__ import annotations

from pathlib import Path

from shortpath.config import load_config


class TestDefaults:
    def test_default_config_no_file(self) -> None:
        config = load_config(None)
        assert config.input.delimiter == ","
        assert config.input.strict is True
        assert config.search.stop_at_target is True
        assert config.output.graph_name is None
        assert config.output.indent == "\t"

    def test_default_config_missing_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yml")
        assert config.input.strict is True

    def test_empty_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "empty.yml"
        cfg.write_text("")
        assert load_config(cfg).input.delimiter == ","


class TestCustomConfig:
    def test_custom_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.yml"
        cfg.write_text(
            "input:\n"
            "  delimiter: ';'\n"
            "  strict: false\n"
            "search:\n"
            "  stop_at_target: false\n"
            "output:\n"
            "  graph_name: route\n"
        )
        config = load_config(cfg)
        assert config.input.delimiter == ";"
        assert config.input.strict is False
        assert config.search.stop_at_target is False
        assert config.output.graph_name == "route"
        assert config.output.indent == "\t"


class TestMalformedYAML:
    def test_malformed_yaml_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("{{{{not yaml!!!!")
        config = load_config(bad)
        assert config.input.strict is True

    def test_non_mapping_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "list.yml"
        bad.write_text("- item1\n- item2\n")
        config = load_config(bad)
        assert config.input.delimiter == ","

    def test_invalid_values_return_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "invalid.yml"
        bad.write_text("input:\n  delimiter: ''\n")
        config = load_config(bad)
        assert config.input.delimiter == ","


class TestOverrides:
    def test_strict_override_beats_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "strict.yml"
        cfg.write_text("input:\n  strict: true\n  delimiter: ';'\n")
        config = load_config(cfg, strict=False)
        assert config.input.strict is False
        assert config.input.delimiter == ";"

    def test_no_override_keeps_file_value(self, tmp_path: Path) -> None:
        cfg = tmp_path / "lenient.yml"
        cfg.write_text("input:\n  strict: false\n")
        assert load_config(cfg).input.strict is False

    def test_override_without_file(self) -> None:
        assert load_config(None, strict=False).input.strict is False


class TestDelimiterCheck:
    def test_numeric_delimiter_replaced(self, tmp_path: Path) -> None:
        cfg = tmp_path / "digit.yml"
        cfg.write_text("input:\n  delimiter: '1'\n  strict: false\n")
        config = load_config(cfg)
        assert config.input.delimiter == ","
        assert config.input.strict is False

    def test_sign_delimiter_replaced(self, tmp_path: Path) -> None:
        cfg = tmp_path / "sign.yml"
        cfg.write_text("input:\n  delimiter: '-'\n")
        assert load_config(cfg).input.delimiter == ","

    def test_tab_delimiter_kept(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tab.yml"
        cfg.write_text('input:\n  delimiter: "\\t"\n')
        assert load_config(cfg).input.delimiter == "\t"
