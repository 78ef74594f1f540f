"""Tests for colour validation and resolution."""

import pytest

from cli_menu import IndexedColour, NamedColour, map_256_to_8, resolve_colour
from cli_menu.colours import COLOUR_CODES, validate_colour_code, validate_colour_name
from cli_menu.exceptions import InvalidColourCodeError, InvalidColourError


def test_palette_maps_to_standard_sgr_codes():
    assert COLOUR_CODES["black"].fg == 30
    assert COLOUR_CODES["white"].bg == 47
    assert COLOUR_CODES["default"].fg == 39
    assert COLOUR_CODES["default"].bg == 49


def test_palette_is_read_only():
    with pytest.raises(TypeError):
        COLOUR_CODES["orange"] = COLOUR_CODES["red"]


class TestVariants:
    def test_named_colour_codes(self):
        colour = NamedColour("magenta")
        assert colour.value == "magenta"
        assert colour.fg_code == "35"
        assert colour.bg_code == "45"

    def test_indexed_colour_codes(self):
        colour = IndexedColour(206)
        assert colour.value == 206
        assert colour.fg_code == "38;5;206"
        assert colour.bg_code == "48;5;206"

    def test_variants_validate_on_construction(self):
        with pytest.raises(InvalidColourError):
            NamedColour("orange")
        with pytest.raises(InvalidColourCodeError):
            IndexedColour(300)


class TestValidation:
    def test_code_error_message(self):
        with pytest.raises(InvalidColourCodeError, match="Invalid colour code: 512"):
            validate_colour_code(512)

    def test_code_error_keeps_code(self):
        with pytest.raises(InvalidColourCodeError) as exc_info:
            validate_colour_code(-1)
        assert exc_info.value.code == -1

    def test_bool_is_not_a_colour_code(self):
        with pytest.raises(InvalidColourError):
            validate_colour_code(True)

    def test_name_must_be_a_string(self):
        with pytest.raises(InvalidColourError):
            validate_colour_name(4)

    def test_valid_values_pass_through(self):
        assert validate_colour_code(0) == 0
        assert validate_colour_name("default") == "default"


class TestResolveColour:
    def test_name_is_kept_on_any_terminal(self):
        assert resolve_colour("red", 8) == NamedColour("red")
        assert resolve_colour("red", 256) == NamedColour("red")

    def test_index_kept_on_extended_terminal(self):
        assert resolve_colour(16, 256, "white") == IndexedColour(16)

    def test_index_replaced_by_fallback_on_basic_terminal(self):
        assert resolve_colour(16, 8, "white") == NamedColour("white")

    def test_index_without_fallback_is_mapped(self):
        assert resolve_colour(21, 8) == NamedColour("blue")


@pytest.mark.parametrize(
    "index,expected",
    [
        (0, "black"),
        (1, "red"),
        (7, "white"),
        (9, "red"),
        (16, "black"),
        (196, "red"),
        (231, "white"),
    ],
)
def test_map_256_to_8(index, expected):
    assert map_256_to_8(index) == expected
