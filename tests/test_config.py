"""Tests for YAML style configuration."""

import logging

import pytest

from cli_menu import MenuStyle, StaticTerminal, apply_style_config, load_style_config, style_from_config
from cli_menu.config import get_config_dir, get_style_config_path
from cli_menu.exceptions import InvalidColourCodeError


@pytest.fixture
def write_config(tmp_path):
    def _write(content: str):
        path = tmp_path / "style.yaml"
        path.write_text(content)
        return path

    return _write


def test_config_dir_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_config_dir() == tmp_path / "cli-menu"
    assert get_style_config_path() == tmp_path / "cli-menu" / "style.yaml"


class TestLoadStyleConfig:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_style_config(tmp_path / "nope.yaml") == {}

    def test_empty_file_is_empty(self, write_config):
        assert load_style_config(write_config("")) == {}

    def test_reads_mapping(self, write_config):
        path = write_config("bg: 16\nbg_fallback: white\nselected_marker: '>'\n")
        assert load_style_config(path) == {"bg": 16, "bg_fallback": "white", "selected_marker": ">"}

    def test_invalid_yaml_logs_warning(self, write_config, caplog):
        path = write_config("bg: [unclosed\n")
        with caplog.at_level(logging.WARNING, logger="cli_menu.config"):
            assert load_style_config(path) == {}
        assert "Could not read style config" in caplog.text

    def test_non_mapping_is_ignored(self, write_config, caplog):
        with caplog.at_level(logging.WARNING, logger="cli_menu.config"):
            assert load_style_config(write_config("- red\n- blue\n")) == {}
        assert "expected a mapping" in caplog.text


class TestApplyStyleConfig:
    def test_applies_all_settings(self, make_style):
        style = apply_style_config(
            make_style(256),
            {
                "bg": 16,
                "bg_fallback": "white",
                "fg": "red",
                "selected_marker": ">",
                "unselected_marker": "-",
                "item_extra": "*",
                "displays_extra": True,
                "title_separator": "~",
                "width": 60,
                "margin": 1,
                "padding": 3,
            },
        )
        assert style.get_bg() == 16
        assert style.get_fg() == "red"
        assert style.get_marker(True) == ">"
        assert style.get_marker(False) == "-"
        assert style.get_item_extra() == "*"
        assert style.get_displays_extra() is True
        assert style.get_title_separator() == "~"
        assert style.get_content_width() == 60 - 2 - 6

    def test_fallback_used_on_basic_terminal(self, make_style):
        style = apply_style_config(make_style(8), {"fg": 206, "fg_fallback": "red"})
        assert style.get_fg() == "red"

    def test_margin_auto_uses_configured_width(self, make_style):
        style = apply_style_config(make_style(), {"width": 300, "margin_auto": True})
        assert style.get_margin() == 100

    def test_strict_raises(self, make_style):
        with pytest.raises(InvalidColourCodeError):
            apply_style_config(make_style(256), {"fg": 999})

    def test_lenient_skips_invalid_values(self, make_style, caplog):
        style = make_style(256)
        with caplog.at_level(logging.WARNING, logger="cli_menu.config"):
            apply_style_config(style, {"fg": 999, "bg": "purple", "padding": 4}, strict=False)
        assert style.get_fg() == "white"
        assert style.get_bg() == "blue"
        assert style.get_padding() == 4
        assert "Ignoring style setting fg" in caplog.text
        assert "Ignoring style setting bg" in caplog.text

    @pytest.mark.parametrize("key", ["displays_extra", "margin_auto"])
    def test_flags_must_be_booleans(self, make_style, key):
        with pytest.raises(TypeError):
            apply_style_config(make_style(), {key: "no"})

    def test_lenient_skips_non_boolean_flags(self, make_style, caplog):
        style = make_style()
        with caplog.at_level(logging.WARNING, logger="cli_menu.config"):
            apply_style_config(style, {"displays_extra": "no", "margin_auto": "no"}, strict=False)
        assert style.get_displays_extra() is False
        assert not style.is_margin_auto()
        assert "Ignoring style setting displays_extra" in caplog.text
        assert "Ignoring style setting margin_auto" in caplog.text

    def test_margin_auto_false_keeps_margin(self, make_style):
        style = apply_style_config(make_style(), {"margin_auto": False})
        assert not style.is_margin_auto()
        assert style.get_margin() == 2

    def test_unknown_keys_are_logged(self, caplog):
        style = MenuStyle(StaticTerminal(width=90))
        with caplog.at_level(logging.WARNING, logger="cli_menu.config"):
            apply_style_config(style, {"colour": "red"})
        assert "Unknown style setting: colour" in caplog.text
        assert not style.has_changed_from_defaults()


def test_style_from_config(write_config):
    path = write_config("fg: 206\nfg_fallback: red\nwidth: 40\n")
    style = style_from_config(StaticTerminal(width=100, colour_support=8), path=path)
    assert style.get_fg() == "red"
    assert style.get_width() == 40
