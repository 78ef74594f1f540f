"""Errors raised by cli_menu style resolution."""

from __future__ import annotations


class CliMenuError(Exception):
    """Base error for cli_menu."""


class InvalidColourError(CliMenuError, ValueError):
    """Raised when a colour name is not part of the palette."""

    def __init__(self, colour: object, message: str | None = None):
        self.colour = colour
        super().__init__(message or f"Invalid colour: {colour!r}")


class InvalidColourCodeError(InvalidColourError):
    """Raised when an indexed colour is outside 0-255."""

    def __init__(self, code: int):
        super().__init__(code, f"Invalid colour code: {code}")
        self.code = code


class InvalidInstantiationError(CliMenuError, TypeError):
    """Raised when a style is built from unusable collaborators or values."""
