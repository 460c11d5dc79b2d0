"""Color representation and quantization to ANSI color codes."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional

from PIL import ImageColor

from styled_term.core.constants import NAMED_COLORS, STANDARD_PALETTE
from styled_term.core.errors import InvalidColorError, InvalidColorModeError

logger = logging.getLogger(__name__)


def _to_255(value: float) -> int:
    """Scale a [0,1] channel to 0-255, truncating rather than rounding."""
    # round() only strips float noise such as 254.99999999999997
    return int(round(255 * value, 9))


@dataclass(frozen=True)
class Color:
    """
    An RGB color with channels normalized to [0, 1].

    Values outside the range are kept as given; the quantizers clamp
    where their encoding needs it.
    """
    red: float
    green: float
    blue: float

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from 0-255 channel values."""
        return cls(r / 255, g / 255, b / 255)

    @classmethod
    def parse(cls, expression: str) -> "Color":
        """
        Resolve a web color name or CSS-style expression.

        Accepts names ("orange", "SteelBlue"), "#rgb", "#rrggbb",
        "0xrrggbb", "rgb(...)", "hsl(...)" and "hsv(...)".
        Raises InvalidColorError when the expression cannot be resolved.
        """
        if not expression or not expression.strip():
            raise InvalidColorError(expression)
        text = expression.strip()
        if text[:2].lower() == "0x":
            text = "#" + text[2:]
        try:
            rgb = ImageColor.getrgb(text)
        except ValueError as e:
            raise InvalidColorError(expression) from e
        r, g, b = rgb[:3]
        return cls.from_rgb(r, g, b)

    def to_rgb(self) -> tuple[int, int, int]:
        """Return truncated 0-255 channel values."""
        return (_to_255(self.red), _to_255(self.green), _to_255(self.blue))


# Initialize class-level palette constants
Color.BLACK = Color.from_rgb(*STANDARD_PALETTE[0])
Color.RED = Color.from_rgb(*STANDARD_PALETTE[1])
Color.GREEN = Color.from_rgb(*STANDARD_PALETTE[2])
Color.YELLOW = Color.from_rgb(*STANDARD_PALETTE[3])
Color.BLUE = Color.from_rgb(*STANDARD_PALETTE[4])
Color.MAGENTA = Color.from_rgb(*STANDARD_PALETTE[5])
Color.CYAN = Color.from_rgb(*STANDARD_PALETTE[6])
Color.WHITE = Color.from_rgb(*STANDARD_PALETTE[7])

STANDARD_COLORS: tuple[Color, ...] = (
    Color.BLACK,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
)


def color_distance(col1: Color, col2: Color) -> float:
    """Weighted Euclidean distance, with red-dependent channel weights."""
    rmean = (col1.red + col2.red) / 2
    dr = col1.red - col2.red
    dg = col1.green - col2.green
    db = col1.blue - col2.blue
    return math.sqrt((2 + rmean) * dr * dr + 4 * dg * dg + (3 - rmean) * db * db)


def standard_color_index(color: Color) -> int:
    """Index (0-7) of the closest 8-color palette entry. Ties go to the lowest index."""
    best_dist = math.inf
    best_index = -1
    for i, candidate in enumerate(STANDARD_COLORS):
        dist = color_distance(color, candidate)
        if dist < best_dist:
            best_dist = dist
            best_index = i
    return best_index


def standard_color_code(color: Color) -> str:
    """Color code for 8-color terminals, e.g. "1"."""
    return str(standard_color_index(color))


def map_to_6(value: float) -> int:
    """Bucket a 0-255 channel value into the 6 levels of the color cube."""
    if value < 0:
        value = 0
    if value > 255:
        value = 255
    return int(value * 6.0 / 256.0)


def indexed_color_code(color: Color) -> str:
    """Color code for 256-color terminals, e.g. "8;5;196"."""
    r = 255 * color.red
    g = 255 * color.green
    b = 255 * color.blue
    index = 16 + 36 * map_to_6(r) + 6 * map_to_6(g) + map_to_6(b)
    return f"8;5;{index}"


def rgb_color_code(color: Color) -> str:
    """Color code for truecolor terminals, e.g. "8;2;255;128;0"."""
    r, g, b = color.to_rgb()
    return f"8;2;{r};{g};{b}"


class AnsiColorMode(Enum):
    """Color capability tier of the terminal."""
    STANDARD = "standard"   # 8 colors, nearest palette match
    INDEXED = "indexed"     # 256 colors, 6x6x6 cube
    RGB = "rgb"             # 24-bit truecolor

    @classmethod
    def parse(cls, value: Optional[str]) -> "AnsiColorMode":
        """
        Look up a mode by name, ignoring case.

        None or an empty string selects STANDARD.
        """
        if not value:
            return cls.STANDARD
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise InvalidColorModeError(value) from None

    def color_code(self, color: Color) -> str:
        """Quantize a color under this mode."""
        return _COLOR_CODE_PROVIDERS[self](color)


_COLOR_CODE_PROVIDERS: dict[AnsiColorMode, Callable[[Color], str]] = {
    AnsiColorMode.STANDARD: standard_color_code,
    AnsiColorMode.INDEXED: indexed_color_code,
    AnsiColorMode.RGB: rgb_color_code,
}


def named_color_index(name: str) -> int:
    """8-color index of a basic color name (case-insensitive), or -1."""
    return NAMED_COLORS.get(name.strip().lower(), -1)


def color_code(name: Optional[str], mode: AnsiColorMode = AnsiColorMode.STANDARD) -> Optional[str]:
    """
    Resolve a color name or expression to an ANSI color code.

    Basic color names resolve to their 8-color index regardless of mode.
    Anything else is parsed and quantized under ``mode``. Returns None for
    an empty name, for "default" and, with a warning, for invalid input.
    """
    if not name:
        return None
    if name.strip().lower() == "default":
        return None
    code = named_color_index(name)
    if code >= 0:
        return str(code)
    try:
        color = Color.parse(name)
    except InvalidColorError:
        logger.warning("Invalid color: %s", name)
        return None
    return mode.color_code(color)
