"""Colour palette and colour resolution for menu styles.

A colour is either one of nine named palette entries or an index into the
256-colour extended palette. ``resolve_colour`` is the single place that
turns caller input into one of those two variants, taking the terminal's
colour support into account. Everything downstream (escape code
generation) only sees the resolved variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from rich.color import Color, ColorSystem

from .exceptions import InvalidColourCodeError, InvalidColourError


@dataclass(frozen=True)
class SgrPair:
    """Foreground and background SGR parameters for a named colour."""

    fg: int
    bg: int


# Order matters: it is the public ordering of get_available_colours().
COLOUR_CODES: MappingProxyType[str, SgrPair] = MappingProxyType(
    {
        "black": SgrPair(fg=30, bg=40),
        "red": SgrPair(fg=31, bg=41),
        "green": SgrPair(fg=32, bg=42),
        "yellow": SgrPair(fg=33, bg=43),
        "blue": SgrPair(fg=34, bg=44),
        "magenta": SgrPair(fg=35, bg=45),
        "cyan": SgrPair(fg=36, bg=46),
        "white": SgrPair(fg=37, bg=47),
        "default": SgrPair(fg=39, bg=49),
    }
)

AVAILABLE_COLOURS: tuple[str, ...] = tuple(COLOUR_CODES)

MIN_COLOUR_CODE = 0
MAX_COLOUR_CODE = 255

# Terminals reporting fewer colours than this only get named colours.
EXTENDED_COLOUR_SUPPORT = 256


@dataclass(frozen=True)
class NamedColour:
    """A colour from the fixed 9-entry palette."""

    name: str

    def __post_init__(self):
        validate_colour_name(self.name)

    @property
    def value(self) -> str:
        return self.name

    @property
    def fg_code(self) -> str:
        return str(COLOUR_CODES[self.name].fg)

    @property
    def bg_code(self) -> str:
        return str(COLOUR_CODES[self.name].bg)


@dataclass(frozen=True)
class IndexedColour:
    """A colour from the 256-colour extended palette."""

    index: int

    def __post_init__(self):
        validate_colour_code(self.index)

    @property
    def value(self) -> int:
        return self.index

    @property
    def fg_code(self) -> str:
        return f"38;5;{self.index}"

    @property
    def bg_code(self) -> str:
        return f"48;5;{self.index}"


Colour = Union[NamedColour, IndexedColour]
ColourValue = Union[str, int]


def _is_colour_code(value: object) -> bool:
    # bool is an int subclass but never a colour index
    return isinstance(value, int) and not isinstance(value, bool)


def validate_colour_name(name: object) -> str:
    """Return ``name`` if it is a palette colour, else raise InvalidColourError."""
    if not isinstance(name, str) or name not in COLOUR_CODES:
        raise InvalidColourError(name)
    return name


def validate_colour_code(code: object) -> int:
    """Return ``code`` if it is a valid 0-255 index, else raise.

    Raises:
        InvalidColourCodeError: If ``code`` is an integer outside 0-255.
        InvalidColourError: If ``code`` is not an integer at all.
    """
    if not _is_colour_code(code):
        raise InvalidColourError(code)
    if not MIN_COLOUR_CODE <= code <= MAX_COLOUR_CODE:
        raise InvalidColourCodeError(code)
    return code


def map_256_to_8(code: int) -> str:
    """Map an extended palette index to the closest of the 8 basic colours."""
    validate_colour_code(code)
    standard = Color.from_ansi(code).downgrade(ColorSystem.STANDARD)
    # 8-15 are the bright variants of 0-7
    return AVAILABLE_COLOURS[standard.number % 8]


def resolve_colour(
    value: ColourValue,
    colour_support: int,
    fallback: str | None = None,
) -> Colour:
    """Resolve a requested colour against the terminal's colour support.

    Args:
        value: A palette colour name or an extended palette index.
        colour_support: Number of colours the terminal supports.
        fallback: Named colour used instead of an index when the terminal
            cannot display extended colours.

    Returns:
        IndexedColour when the terminal supports 256 colours or more and an
        index was requested, NamedColour otherwise.

    Raises:
        InvalidColourCodeError: If an index is outside 0-255.
        InvalidColourError: If a name (or the fallback) is not in the palette.
    """
    if not _is_colour_code(value):
        return NamedColour(validate_colour_name(value))

    validate_colour_code(value)
    if fallback is not None:
        validate_colour_name(fallback)

    if colour_support >= EXTENDED_COLOUR_SUPPORT:
        return IndexedColour(value)
    if fallback is None:
        return NamedColour(map_256_to_8(value))
    return NamedColour(fallback)
