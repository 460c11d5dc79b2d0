"""Property keys recognized by TerminalProperties."""

PROP_PROMPT_COLOR = "prompt.color"
PROP_PROMPT_BGCOLOR = "prompt.bgcolor"
PROP_PROMPT_BOLD = "prompt.bold"
PROP_PROMPT_ITALIC = "prompt.italic"
PROP_PROMPT_UNDERLINE = "prompt.underline"

PROP_INPUT_COLOR = "input.color"
PROP_INPUT_BGCOLOR = "input.bgcolor"
PROP_INPUT_BOLD = "input.bold"
PROP_INPUT_ITALIC = "input.italic"
PROP_INPUT_UNDERLINE = "input.underline"

PROP_ANSI_COLOR_MODE = "ansi.color.mode"

ALL_KEYS: tuple[str, ...] = (
    PROP_PROMPT_COLOR,
    PROP_PROMPT_BGCOLOR,
    PROP_PROMPT_BOLD,
    PROP_PROMPT_ITALIC,
    PROP_PROMPT_UNDERLINE,
    PROP_INPUT_COLOR,
    PROP_INPUT_BGCOLOR,
    PROP_INPUT_BOLD,
    PROP_INPUT_ITALIC,
    PROP_INPUT_UNDERLINE,
    PROP_ANSI_COLOR_MODE,
)
