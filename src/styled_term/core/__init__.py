"""Core color and style model."""

from styled_term.core.color import AnsiColorMode, Color, color_code
from styled_term.core.errors import InvalidColorError, InvalidColorModeError, StyledTermError
from styled_term.core.style import StyleData, compose, wrap

__all__ = [
    "AnsiColorMode",
    "Color",
    "color_code",
    "StyleData",
    "compose",
    "wrap",
    "StyledTermError",
    "InvalidColorError",
    "InvalidColorModeError",
]
