"""Tests for color parsing and quantization."""

import itertools
import logging

import pytest

from styled_term.core.color import (
    AnsiColorMode,
    Color,
    color_code,
    color_distance,
    indexed_color_code,
    map_to_6,
    named_color_index,
    rgb_color_code,
    standard_color_code,
    standard_color_index,
)
from styled_term.core.errors import InvalidColorError, InvalidColorModeError


class TestColor:
    """Tests for the Color value."""

    def test_from_rgb_normalizes(self) -> None:
        color = Color.from_rgb(255, 0, 51)
        assert color.red == 1.0
        assert color.green == 0.0
        assert color.blue == pytest.approx(0.2)

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Color.RED.red = 0.5  # type: ignore[misc]

    def test_palette_constants(self) -> None:
        assert Color.BLACK.to_rgb() == (0, 0, 0)
        assert Color.GREEN.to_rgb() == (0, 128, 0)
        assert Color.WHITE.to_rgb() == (255, 255, 255)

    def test_to_rgb_truncates(self) -> None:
        assert Color(0.5, 0.5, 0.5).to_rgb() == (127, 127, 127)
        assert Color(0.999, 0.0, 0.0).to_rgb() == (254, 0, 0)

    def test_parse_names_and_expressions(self) -> None:
        assert Color.parse("orange").to_rgb() == (255, 165, 0)
        assert Color.parse("SteelBlue").to_rgb() == (70, 130, 180)
        assert Color.parse("#336699").to_rgb() == (0x33, 0x66, 0x99)
        assert Color.parse("#fff").to_rgb() == (255, 255, 255)
        assert Color.parse("0x00ff00").to_rgb() == (0, 255, 0)
        assert Color.parse("rgb(10, 20, 30)").to_rgb() == (10, 20, 30)

    def test_parse_ignores_alpha(self) -> None:
        assert Color.parse("#11223344").to_rgb() == (0x11, 0x22, 0x33)

    @pytest.mark.parametrize("expression", ["", "   ", "notacolor", "#12", "rgb(1,2)"])
    def test_parse_invalid(self, expression: str) -> None:
        with pytest.raises(InvalidColorError):
            Color.parse(expression)

    def test_invalid_color_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Color.parse("notacolor")


class TestStandardMode:
    """Nearest match against the 8-color palette."""

    def test_palette_colors_match_themselves(self) -> None:
        for index, rgb in enumerate([
            (0, 0, 0), (255, 0, 0), (0, 128, 0), (255, 255, 0),
            (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
        ]):
            assert standard_color_index(Color.from_rgb(*rgb)) == index

    def test_nearby_colors(self) -> None:
        assert standard_color_code(Color.from_rgb(250, 10, 10)) == "1"
        assert standard_color_code(Color.from_rgb(10, 10, 240)) == "4"
        assert standard_color_code(Color.from_rgb(240, 240, 240)) == "7"
        assert standard_color_code(Color.from_rgb(20, 20, 20)) == "0"

    def test_bright_green_maps_to_green(self) -> None:
        # (0,255,0) sits closer to web green (0,128,0) than to cyan or yellow
        assert standard_color_code(Color.from_rgb(0, 255, 0)) == "2"

    def test_always_in_palette_range(self) -> None:
        levels = (0, 64, 128, 192, 255)
        for r, g, b in itertools.product(levels, repeat=3):
            assert 0 <= standard_color_index(Color.from_rgb(r, g, b)) <= 7

    def test_distance_is_zero_for_same_color(self) -> None:
        assert color_distance(Color.CYAN, Color.CYAN) == 0.0

    def test_distance_weights(self) -> None:
        # green differences weigh 4, blue 3 - rmean, red 2 + rmean
        assert color_distance(Color(0, 0, 0), Color(0, 1, 0)) == pytest.approx(2.0)
        assert color_distance(Color(0, 0, 0), Color(0, 0, 1)) == pytest.approx(3 ** 0.5)
        assert color_distance(Color(0, 0, 0), Color(1, 0, 0)) == pytest.approx(2.5 ** 0.5)


class TestIndexedMode:
    """6x6x6 cube quantization."""

    def test_map_to_6_boundaries(self) -> None:
        assert map_to_6(0) == 0
        assert map_to_6(42) == 0
        assert map_to_6(43) == 1
        assert map_to_6(255) == 5

    def test_map_to_6_clamps(self) -> None:
        assert map_to_6(-10) == map_to_6(0)
        assert map_to_6(300) == map_to_6(255)

    def test_cube_corners(self) -> None:
        assert indexed_color_code(Color.from_rgb(0, 0, 0)) == "8;5;16"
        assert indexed_color_code(Color.from_rgb(255, 0, 0)) == "8;5;196"
        assert indexed_color_code(Color.from_rgb(0, 255, 0)) == "8;5;46"
        assert indexed_color_code(Color.from_rgb(0, 0, 255)) == "8;5;21"
        assert indexed_color_code(Color.from_rgb(255, 255, 255)) == "8;5;231"

    def test_out_of_range_channels_clamp(self) -> None:
        assert indexed_color_code(Color(-0.5, 2.0, 0.0)) == indexed_color_code(Color(0.0, 1.0, 0.0))

    def test_truncates_buckets(self) -> None:
        # 165 * 6 / 256 = 3.87 -> 3
        assert indexed_color_code(Color.from_rgb(255, 165, 0)) == "8;5;214"


class TestRgbMode:
    """24-bit truecolor codes."""

    def test_format(self) -> None:
        assert rgb_color_code(Color.from_rgb(255, 128, 64)) == "8;2;255;128;64"

    def test_integer_channels_survive(self) -> None:
        for value in (0, 1, 17, 127, 128, 200, 254, 255):
            code = rgb_color_code(Color.from_rgb(value, 255 - value, value))
            fields = [int(part) for part in code.split(";")[2:]]
            assert fields == [value, 255 - value, value]

    def test_truncates(self) -> None:
        assert rgb_color_code(Color(0.5, 0.999, 0.0)) == "8;2;127;254;0"


class TestAnsiColorMode:
    """Mode lookup and per-mode dispatch."""

    def test_parse_case_insensitive(self) -> None:
        assert AnsiColorMode.parse("standard") is AnsiColorMode.STANDARD
        assert AnsiColorMode.parse("INDEXED") is AnsiColorMode.INDEXED
        assert AnsiColorMode.parse("Rgb") is AnsiColorMode.RGB

    def test_parse_empty_selects_standard(self) -> None:
        assert AnsiColorMode.parse("") is AnsiColorMode.STANDARD
        assert AnsiColorMode.parse(None) is AnsiColorMode.STANDARD

    def test_parse_invalid(self) -> None:
        with pytest.raises(InvalidColorModeError):
            AnsiColorMode.parse("cmyk")

    def test_dispatch(self) -> None:
        color = Color.from_rgb(255, 0, 0)
        assert AnsiColorMode.STANDARD.color_code(color) == "1"
        assert AnsiColorMode.INDEXED.color_code(color) == "8;5;196"
        assert AnsiColorMode.RGB.color_code(color) == "8;2;255;0;0"

    def test_deterministic(self) -> None:
        color = Color.from_rgb(12, 200, 99)
        for mode in AnsiColorMode:
            assert mode.color_code(color) == mode.color_code(color)


class TestColorCode:
    """Name resolution with the basic-color fast path."""

    def test_named_index(self) -> None:
        assert named_color_index("default") == -1
        assert named_color_index("black") == 0
        assert named_color_index("White") == 7
        assert named_color_index("orange") == -1

    @pytest.mark.parametrize("mode", list(AnsiColorMode))
    def test_named_colors_ignore_mode(self, mode: AnsiColorMode) -> None:
        assert color_code("red", mode) == "1"
        assert color_code("RED", mode) == "1"
        assert color_code("Cyan", mode) == "6"

    def test_other_names_use_mode(self) -> None:
        assert color_code("orange", AnsiColorMode.INDEXED) == "8;5;214"
        assert color_code("orange", AnsiColorMode.RGB) == "8;2;255;165;0"
        assert color_code("#ff0000", AnsiColorMode.STANDARD) == "1"

    def test_default_means_no_color(self) -> None:
        assert color_code("default") is None
        assert color_code("DEFAULT", AnsiColorMode.RGB) is None

    def test_empty_means_no_color(self) -> None:
        assert color_code(None) is None
        assert color_code("") is None

    def test_invalid_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert color_code("notacolor", AnsiColorMode.RGB) is None
        assert "Invalid color: notacolor" in caplog.text
