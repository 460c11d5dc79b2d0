"""Style state for one text context and its rendering to ANSI prefixes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from styled_term.core.color import AnsiColorMode, color_code
from styled_term.core.constants import (
    BACKGROUND_PREFIX,
    BOLD,
    CSI,
    FOREGROUND_PREFIX,
    ITALIC,
    RESET,
    UNDERLINE,
)

logger = logging.getLogger(__name__)


@dataclass
class StyleData:
    """
    Style applied to one context (prompt or input text).

    ``color`` and ``background`` hold ready-to-emit SGR sequences;
    an empty string means no override.
    """
    color: str = ""
    background: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def clear(self) -> None:
        """Drop every color and attribute."""
        self.color = ""
        self.background = ""
        self.bold = False
        self.italic = False
        self.underline = False

    def is_empty(self) -> bool:
        return not (self.color or self.background or self.bold or self.italic or self.underline)


def ansi_color(prefix: int, name: Optional[str], mode: AnsiColorMode = AnsiColorMode.STANDARD) -> str:
    """
    Build the SGR sequence for a color name.

    ``prefix`` is 3 for foreground and 4 for background.
    Returns an empty string when the name yields no color.
    """
    code = color_code(name, mode)
    sequence = f"{CSI}1;{prefix}{code}m" if code is not None else ""
    logger.debug("ansi_color(%s, %s) = %r", prefix, name, sequence)
    return sequence


def ansi_foreground(name: Optional[str], mode: AnsiColorMode = AnsiColorMode.STANDARD) -> str:
    return ansi_color(FOREGROUND_PREFIX, name, mode)


def ansi_background(name: Optional[str], mode: AnsiColorMode = AnsiColorMode.STANDARD) -> str:
    return ansi_color(BACKGROUND_PREFIX, name, mode)


def compose(style: StyleData) -> str:
    """Render a style as an escape prefix: color, background, bold, italic, underline."""
    return (
        style.color
        + style.background
        + (BOLD if style.bold else "")
        + (ITALIC if style.italic else "")
        + (UNDERLINE if style.underline else "")
    )


def wrap(style: StyleData, text: str) -> str:
    """Surround text with the style prefix and the reset sequence."""
    return compose(style) + text + RESET
