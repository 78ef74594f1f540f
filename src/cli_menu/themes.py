"""Default visual settings for menu styles.

The Theme dataclass holds the initial values a MenuStyle starts from.
A style compares itself against its theme to tell whether it has been
customised.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Starting values for a MenuStyle.

    Colours are palette names (see ``cli_menu.colours.AVAILABLE_COLOURS``).

    Attributes:
        bg: Background colour of menu items.
        fg: Foreground colour of menu items.

        unselected_marker: Glyph shown before an unselected item.
        selected_marker: Glyph shown before the selected item.
        item_extra: Text shown at the right edge of items flagged with an extra.
        displays_extra: Whether item extras are rendered at all.
        title_separator: Character repeated under the menu title.

        margin: Columns left blank outside the coloured area, on each side.
        padding: Columns of coloured space inside the margin, on each side.
    """

    # Colours
    bg: str = "blue"
    fg: str = "white"

    # Markers
    unselected_marker: str = "○"
    selected_marker: str = "●"
    item_extra: str = "✔"
    displays_extra: bool = False
    title_separator: str = "="

    # Layout
    margin: int = 2
    padding: int = 2


# Default theme used when none is specified
DEFAULT_THEME = Theme()
