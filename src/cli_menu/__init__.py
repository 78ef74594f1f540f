"""Terminal-aware styling for text menus.

Resolves menu colours against what the terminal can display, computes
layout geometry and produces the ANSI escape codes used to paint items.

Example:
    from cli_menu import MenuStyle, SelectableItem, paint_menu

    style = MenuStyle()
    style.set_bg(24, "blue")
    style.set_selected_marker(">")
    frame = paint_menu(
        style,
        [SelectableItem("Install"), SelectableItem("Quit")],
        title="Setup",
        selected_index=0,
    )
"""

from .colours import (
    AVAILABLE_COLOURS,
    IndexedColour,
    NamedColour,
    map_256_to_8,
    resolve_colour,
)
from .components import LineBreakItem, MenuItem, SelectableItem, StaticItem
from .config import apply_style_config, load_style_config, style_from_config
from .exceptions import (
    CliMenuError,
    InvalidColourCodeError,
    InvalidColourError,
    InvalidInstantiationError,
)
from .painter import paint_item, paint_menu, paint_row, paint_title
from .style import MenuStyle
from .terminal import (
    COLOURS_8,
    COLOURS_256,
    COLOURS_TRUE,
    RichTerminal,
    StaticTerminal,
    TerminalCapabilityProvider,
)
from .themes import DEFAULT_THEME, Theme

__all__ = [
    # Main classes
    "MenuStyle",
    "Theme",
    "DEFAULT_THEME",
    # Colours
    "AVAILABLE_COLOURS",
    "NamedColour",
    "IndexedColour",
    "resolve_colour",
    "map_256_to_8",
    # Terminals
    "TerminalCapabilityProvider",
    "RichTerminal",
    "StaticTerminal",
    "COLOURS_8",
    "COLOURS_256",
    "COLOURS_TRUE",
    # Components
    "MenuItem",
    "SelectableItem",
    "StaticItem",
    "LineBreakItem",
    # Painting
    "paint_row",
    "paint_item",
    "paint_title",
    "paint_menu",
    # Config
    "load_style_config",
    "apply_style_config",
    "style_from_config",
    # Errors
    "CliMenuError",
    "InvalidColourError",
    "InvalidColourCodeError",
    "InvalidInstantiationError",
]
