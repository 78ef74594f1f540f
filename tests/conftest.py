"""Pytest fixtures for cli-menu tests."""

import pytest

from cli_menu import MenuStyle, StaticTerminal


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host's colour override out of tests."""
    monkeypatch.delenv("CLI_MENU_COLOURS", raising=False)


@pytest.fixture
def make_terminal():
    """Factory for fixed-capability terminals (500 columns by default)."""
    def _make(colours: int = 8, width: int = 500) -> StaticTerminal:
        return StaticTerminal(width=width, colour_support=colours)

    return _make


@pytest.fixture
def make_style(make_terminal):
    """Factory for styles bound to a 500 column terminal, forced to 100 wide."""
    def _make(colours: int = 8, width: int = 100) -> MenuStyle:
        style = MenuStyle(make_terminal(colours))
        style.set_width(width)
        return style

    return _make


@pytest.fixture
def style(make_style):
    """Default 8-colour style, 100 columns wide."""
    return make_style()
