"""Terminal capability providers.

A style only needs two facts about the terminal it renders to: how many
columns it has and how many colours it can display. Anything exposing
``get_width()`` and ``get_colour_support()`` can act as a provider.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol, runtime_checkable

from rich.console import Console

logger = logging.getLogger(__name__)

COLOURS_8 = 8
COLOURS_256 = 256
COLOURS_TRUE = 16_777_216

DEFAULT_WIDTH = 80

# Forces the reported colour support, e.g. CLI_MENU_COLOURS=256
COLOURS_ENV_VAR = "CLI_MENU_COLOURS"

_COLOUR_SYSTEM_SUPPORT: dict[str | None, int] = {
    None: COLOURS_8,
    "standard": COLOURS_8,
    "windows": COLOURS_8,
    "256": COLOURS_256,
    "truecolor": COLOURS_TRUE,
}

_ENV_SUPPORT: dict[str, int] = {
    "8": COLOURS_8,
    "16": COLOURS_8,
    "256": COLOURS_256,
    "truecolor": COLOURS_TRUE,
    "24bit": COLOURS_TRUE,
}


@runtime_checkable
class TerminalCapabilityProvider(Protocol):
    """What a MenuStyle needs to know about its terminal."""

    def get_width(self) -> int: ...

    def get_colour_support(self) -> int: ...


def colour_support_from_env() -> int | None:
    """Return the colour support forced via the environment, if any."""
    raw = os.environ.get(COLOURS_ENV_VAR)
    if not raw:
        return None
    support = _ENV_SUPPORT.get(raw.strip().lower())
    if support is None:
        logger.warning("Ignoring unrecognised %s=%r", COLOURS_ENV_VAR, raw)
    return support


class RichTerminal:
    """Terminal provider backed by a Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def get_width(self) -> int:
        """Get current terminal width in columns."""
        try:
            return self.console.size.width
        except (AttributeError, OSError):
            try:
                return int(os.environ.get("COLUMNS", DEFAULT_WIDTH))
            except (ValueError, TypeError):
                return DEFAULT_WIDTH

    def get_colour_support(self) -> int:
        """Get the number of colours the terminal can display."""
        forced = colour_support_from_env()
        if forced is not None:
            return forced
        return _COLOUR_SYSTEM_SUPPORT.get(self.console.color_system, COLOURS_8)


class StaticTerminal:
    """Terminal provider with fixed capabilities.

    Useful for tests and for rendering to something that is not a tty.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, colour_support: int = COLOURS_8):
        self.width = width
        self.colour_support = colour_support

    def get_width(self) -> int:
        return self.width

    def get_colour_support(self) -> int:
        return self.colour_support

    def __repr__(self) -> str:
        return f"StaticTerminal(width={self.width}, colour_support={self.colour_support})"
