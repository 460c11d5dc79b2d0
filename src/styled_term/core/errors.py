"""Exception types raised by the color and mode parsers."""


class StyledTermError(Exception):
    """Base class for styled-term errors."""


class InvalidColorError(StyledTermError, ValueError):
    """A color name or expression that cannot be resolved to RGB."""

    def __init__(self, expression: str) -> None:
        super().__init__(f"Invalid color: {expression!r}")
        self.expression = expression


class InvalidColorModeError(StyledTermError, ValueError):
    """An ANSI color mode name other than standard, indexed or rgb."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid value for ansi color mode: {value!r}")
        self.value = value
