"""Menu style: colours, markers and layout geometry for one menu.

MenuStyle is bound to a terminal capability provider. The terminal's
colour support is read once at bind time and decides whether indexed
colours are kept or replaced by their named fallback. Geometry derived
from width, margin and padding is recalculated on every change so getters
always reflect the latest values.

Example:
    from cli_menu import MenuStyle, StaticTerminal

    style = MenuStyle(StaticTerminal(width=120, colour_support=256))
    style.set_bg(16, "white")
    style.set_fg(206, "red")
    style.get_colours_set_code()  # "\\033[38;5;206;48;5;16m"
"""

from __future__ import annotations

import logging

from .colours import (
    AVAILABLE_COLOURS,
    Colour,
    ColourValue,
    IndexedColour,
    NamedColour,
    resolve_colour,
)
from .exceptions import InvalidInstantiationError
from .terminal import RichTerminal, TerminalCapabilityProvider
from .themes import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

ESC = "\033"


def _require_int(name: str, value: object, minimum: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _require_bool(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be true or false, got {value!r}")
    return value


class MenuStyle:
    """Style attributes and rendering primitives for a menu.

    Args:
        terminal: Provider of terminal width and colour support. A
            RichTerminal is created when omitted.
        theme: Starting values for every attribute.
        width: Total menu width in columns. Defaults to the terminal width.

    Raises:
        InvalidInstantiationError: If ``terminal`` does not provide
            ``get_width()``/``get_colour_support()``, reports a non-integer
            width or colour support, ``width`` is not a positive integer, or
            ``theme`` holds an invalid value.
    """

    def __init__(
        self,
        terminal: TerminalCapabilityProvider | None = None,
        theme: Theme | None = None,
        width: int | None = None,
    ):
        self.theme = theme or DEFAULT_THEME

        try:
            self._bg: Colour = NamedColour(self.theme.bg)
            self._fg: Colour = NamedColour(self.theme.fg)
            self.displays_extra = _require_bool("displays_extra", self.theme.displays_extra)
            self._margin = _require_int("margin", self.theme.margin, 0)
            self._padding = _require_int("padding", self.theme.padding, 0)
        except (TypeError, ValueError) as e:
            raise InvalidInstantiationError(f"Invalid theme: {e}") from e

        # Requested (value, fallback) pairs, re-resolved when rebinding
        self._bg_request: tuple[ColourValue, str | None] = (self.theme.bg, None)
        self._fg_request: tuple[ColourValue, str | None] = (self.theme.fg, None)

        self.unselected_marker = self.theme.unselected_marker
        self.selected_marker = self.theme.selected_marker
        self.item_extra = self.theme.item_extra
        self.title_separator = self.theme.title_separator

        self._margin_auto = False
        self._width = 0
        self._explicit_width = False
        self._content_width = 0

        try:
            self.set_terminal(terminal or RichTerminal(), width=width)
        except (TypeError, ValueError) as e:
            raise InvalidInstantiationError(f"Cannot create MenuStyle: {e}") from e

        self._initial_width = self._width

    # Terminal binding

    def set_terminal(
        self, terminal: TerminalCapabilityProvider, width: int | None = None
    ) -> None:
        """Bind to a terminal, re-reading its colour support.

        Colours requested by index are resolved again against the new
        terminal. Width follows the terminal unless it was set explicitly
        or ``width`` is given.
        """
        if not isinstance(terminal, TerminalCapabilityProvider):
            raise TypeError(
                f"terminal must provide get_width() and get_colour_support(), "
                f"got {type(terminal).__name__}"
            )
        if width is not None:
            new_width = _require_int("width", width, 1)
        elif self._explicit_width:
            new_width = self._width
        else:
            new_width = _require_int("terminal width", terminal.get_width(), 1)

        colour_support = _require_int("colour support", terminal.get_colour_support(), 1)
        bg_value, bg_fallback = self._bg_request
        fg_value, fg_fallback = self._fg_request
        bg = resolve_colour(bg_value, colour_support, bg_fallback)
        fg = resolve_colour(fg_value, colour_support, fg_fallback)

        self.terminal = terminal
        self.colour_support = colour_support
        self._bg, self._fg = bg, fg
        self._width = new_width
        if width is not None:
            self._explicit_width = True
        self._calculate_geometry()
        logger.debug("Bound style to %r (colour support %d)", terminal, colour_support)

    def _calculate_geometry(self) -> None:
        if self._margin_auto:
            self._margin = max(0, (self.terminal.get_width() - self._width) // 2)
        self._content_width = self._width - self._margin * 2 - self._padding * 2

    # Colours

    @staticmethod
    def get_available_colours() -> list[str]:
        """Return the named palette in canonical order."""
        return list(AVAILABLE_COLOURS)

    def get_bg(self) -> ColourValue:
        """Return the background as a palette name or a 0-255 index."""
        return self._bg.value

    def set_bg(self, bg: ColourValue, fallback: str | None = None) -> None:
        """Set the background colour.

        Args:
            bg: Palette name or 0-255 index.
            fallback: Palette name used instead of an index when the
                terminal supports fewer than 256 colours.

        Raises:
            InvalidColourCodeError: If ``bg`` is an index outside 0-255.
            InvalidColourError: If ``bg`` or ``fallback`` is not a palette name.
        """
        self._bg = resolve_colour(bg, self.colour_support, fallback)
        self._bg_request = (bg, fallback)
        logger.debug("Background set to %r", self._bg.value)

    def get_fg(self) -> ColourValue:
        """Return the foreground as a palette name or a 0-255 index."""
        return self._fg.value

    def set_fg(self, fg: ColourValue, fallback: str | None = None) -> None:
        """Set the foreground colour. See ``set_bg`` for the arguments."""
        self._fg = resolve_colour(fg, self.colour_support, fallback)
        self._fg_request = (fg, fallback)
        logger.debug("Foreground set to %r", self._fg.value)

    get_background = get_bg
    set_background = set_bg
    get_foreground = get_fg
    set_foreground = set_fg

    # Escape codes

    def get_selected_set_code(self) -> str:
        """Colours for the selected item: foreground and background swapped."""
        return f"{ESC}[{self._fg.bg_code};{self._bg.fg_code}m"

    def get_selected_unset_code(self) -> str:
        return f"{ESC}[49;39m"

    def get_unselected_set_code(self) -> str:
        return f"{ESC}[{self._bg.bg_code};{self._fg.fg_code}m"

    def get_unselected_unset_code(self) -> str:
        return f"{ESC}[49;39m"

    def get_colours_set_code(self) -> str:
        """Foreground then background, in whichever form is stored.

        Both indexed gives ``\\033[38;5;FG;48;5;BGm``; both named gives the
        classic ``\\033[3X;4Ym`` pair.
        """
        return f"{ESC}[{self._fg.fg_code};{self._bg.bg_code}m"

    def get_inverted_colours_set_code(self) -> str:
        return f"{ESC}[7m"

    def get_inverted_colours_unset_code(self) -> str:
        return f"{ESC}[27m"

    def get_colours_reset_code(self) -> str:
        return f"{ESC}[0m"

    def uses_extended_colours(self) -> bool:
        """Whether either colour is stored as an extended palette index."""
        return isinstance(self._fg, IndexedColour) or isinstance(self._bg, IndexedColour)

    # Markers and decorations

    def get_unselected_marker(self) -> str:
        return self.unselected_marker

    def set_unselected_marker(self, marker: str) -> None:
        self.unselected_marker = marker

    def get_selected_marker(self) -> str:
        return self.selected_marker

    def set_selected_marker(self, marker: str) -> None:
        self.selected_marker = marker

    def get_marker(self, selected: bool) -> str:
        """Return the marker for an item in the given selection state."""
        return self.selected_marker if selected else self.unselected_marker

    def get_item_extra(self) -> str:
        return self.item_extra

    def set_item_extra(self, item_extra: str) -> None:
        self.item_extra = item_extra

    def get_displays_extra(self) -> bool:
        return self.displays_extra

    def set_displays_extra(self, displays_extra: bool) -> None:
        self.displays_extra = _require_bool("displays_extra", displays_extra)

    def get_title_separator(self) -> str:
        return self.title_separator

    def set_title_separator(self, separator: str) -> None:
        self.title_separator = separator

    # Geometry

    def get_width(self) -> int:
        return self._width

    def set_width(self, width: int) -> None:
        """Set the total menu width and recalculate derived geometry."""
        self._width = _require_int("width", width, 1)
        self._explicit_width = True
        self._calculate_geometry()
        logger.debug("Width set to %d (content width %d)", self._width, self._content_width)

    def get_margin(self) -> int:
        return self._margin

    def set_margin(self, margin: int) -> None:
        """Set the margin on each side. Turns off automatic centring."""
        self._margin = _require_int("margin", margin, 0)
        self._margin_auto = False
        self._calculate_geometry()

    def set_margin_auto(self) -> None:
        """Centre the menu by deriving the margin from the terminal width."""
        self._margin_auto = True
        self._calculate_geometry()

    def is_margin_auto(self) -> bool:
        return self._margin_auto

    def get_padding(self) -> int:
        return self._padding

    def set_padding(self, padding: int) -> None:
        self._padding = _require_int("padding", padding, 0)
        self._calculate_geometry()

    def get_content_width(self) -> int:
        """Columns available for item text: ``width - 2*margin - 2*padding``."""
        return self._content_width

    def get_right_hand_padding(self, content_length: int) -> int:
        """Blank columns after an item's text, up to the right margin.

        This is ``width - 2*margin - padding - content_length``: the left
        padding is written separately by the painter, so only one padding
        unit is included here.
        """
        return self._content_width - content_length + self._padding

    def has_changed_from_defaults(self) -> bool:
        """Whether any attribute differs from the theme and initial width."""
        current = (
            self._bg,
            self._fg,
            self.unselected_marker,
            self.selected_marker,
            self.item_extra,
            self.displays_extra,
            self.title_separator,
            self._margin,
            self._padding,
            self._margin_auto,
            self._width,
        )
        defaults = (
            NamedColour(self.theme.bg),
            NamedColour(self.theme.fg),
            self.theme.unselected_marker,
            self.theme.selected_marker,
            self.theme.item_extra,
            self.theme.displays_extra,
            self.theme.title_separator,
            self.theme.margin,
            self.theme.padding,
            False,
            self._initial_width,
        )
        return current != defaults

    def __repr__(self) -> str:
        return (
            f"MenuStyle(bg={self.get_bg()!r}, fg={self.get_fg()!r}, width={self._width}, "
            f"margin={self._margin}, padding={self._padding})"
        )
