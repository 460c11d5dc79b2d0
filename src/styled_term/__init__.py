"""
styled-term: styled, interrupt-aware line reading for terminals

Style prompt and input text with named, web or RGB colors quantized for
8-color, 256-color or truecolor terminals, and read lines without losing
what the user typed when they press Ctrl-C.

Quick Start:
    >>> from styled_term import StyledTerminal
    >>> term = StyledTerminal()
    >>> term.set_ansi_color_mode("indexed")
    >>> term.set_prompt_color("orange")
    >>> term.set_input_color("cyan")
    >>> term.raw_print("Name: ")
    >>> name = term.read()

Features:
    - Nearest-color matching for 8-color terminals
    - 6x6x6 cube quantization for 256-color terminals
    - 24-bit truecolor codes
    - Independent prompt and input styles (color, background, bold, italic, underline)
    - Masked input for passwords
    - Pluggable Ctrl-C handling that keeps partial input
    - Style properties from code or TOML files
"""

__version__ = "0.1.0"

# Core types
from styled_term.core.color import AnsiColorMode, Color, color_code
from styled_term.core.errors import InvalidColorError, InvalidColorModeError, StyledTermError
from styled_term.core.style import StyleData, compose, wrap

# Terminal
from styled_term.term.editor import Completed, ConsoleLineEditor, Interrupted, LineEditor
from styled_term.term.terminal import ReadState, StyledTerminal, default_interrupt_handler

# Configuration
from styled_term.config.properties import TerminalProperties, load_properties

__all__ = [
    # Version
    "__version__",
    # Core types
    "AnsiColorMode",
    "Color",
    "color_code",
    "StyleData",
    "compose",
    "wrap",
    # Errors
    "StyledTermError",
    "InvalidColorError",
    "InvalidColorModeError",
    # Terminal
    "StyledTerminal",
    "ReadState",
    "default_interrupt_handler",
    "LineEditor",
    "ConsoleLineEditor",
    "Completed",
    "Interrupted",
    # Configuration
    "TerminalProperties",
    "load_properties",
]
