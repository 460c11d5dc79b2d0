"""Shared constants for terminal styling."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
ITALIC = f"{CSI}3m"
UNDERLINE = f"{CSI}4m"

# SGR prefixes combined with a color code: ESC[1;3<code>m / ESC[1;4<code>m
FOREGROUND_PREFIX = 3
BACKGROUND_PREFIX = 4

# Color names that map straight to an 8-color index, whatever the color mode.
# "default" is reserved for the terminal's own color and never chosen by
# distance search.
NAMED_COLORS: dict[str, int] = {
    "default": -1,
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

# 8-color palette in index order, as 0-255 RGB (web color values)
STANDARD_PALETTE: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),        # black
    (255, 0, 0),      # red
    (0, 128, 0),      # green
    (255, 255, 0),    # yellow
    (0, 0, 255),      # blue
    (255, 0, 255),    # magenta
    (0, 255, 255),    # cyan
    (255, 255, 255),  # white
)

# Character echoed for each keystroke of a masked read
MASK_CHAR = "*"

# Prefix accepted in front of property keys
PROPERTY_PREFIX = "styled_term."
