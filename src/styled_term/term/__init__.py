"""Terminal I/O - the styled terminal and its line editor."""

from styled_term.term.editor import (
    Completed,
    ConsoleLineEditor,
    Interrupted,
    LineEditor,
    ReadResult,
)
from styled_term.term.terminal import (
    InterruptHandler,
    ReadState,
    StyledTerminal,
    default_interrupt_handler,
)

__all__ = [
    "Completed",
    "ConsoleLineEditor",
    "Interrupted",
    "LineEditor",
    "ReadResult",
    "InterruptHandler",
    "ReadState",
    "StyledTerminal",
    "default_interrupt_handler",
]
