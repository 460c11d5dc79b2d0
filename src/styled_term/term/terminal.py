"""Styled terminal with interrupt-aware line reading."""

from __future__ import annotations

import logging
import sys
from enum import Enum, auto
from typing import Callable, Optional

from styled_term.core.color import AnsiColorMode, color_code
from styled_term.core.constants import BACKGROUND_PREFIX, FOREGROUND_PREFIX, MASK_CHAR, RESET
from styled_term.core.errors import InvalidColorModeError
from styled_term.core.style import StyleData, ansi_color, compose
from styled_term.term.editor import Completed, ConsoleLineEditor, LineEditor

logger = logging.getLogger(__name__)

InterruptHandler = Callable[["StyledTerminal"], None]


class ReadState(Enum):
    """Where a read() call currently is."""
    AWAITING_INPUT = auto()
    INTERRUPTED = auto()
    DONE = auto()


def default_interrupt_handler(terminal: "StyledTerminal") -> None:
    """Terminate the process. Used until another handler is registered."""
    sys.exit(-1)


class StyledTerminal:
    """
    Terminal that styles prompt and input text and survives user interrupts.

    Prompt text (everything written through raw_print) and input text
    (what the user types during read) carry independent styles. Colors are
    quantized for the active ANSI color mode when they are set, so changing
    the mode leaves already configured colors untouched.

    Not thread-safe: one terminal, one thread, one outstanding read.
    """

    def __init__(self, editor: Optional[LineEditor] = None) -> None:
        self._editor: LineEditor = editor if editor is not None else ConsoleLineEditor()
        self._interrupt_handler: InterruptHandler = default_interrupt_handler
        self._abort_read = True
        self._ansi_color_mode = AnsiColorMode.STANDARD
        self.prompt_style = StyleData()
        self.input_style = StyleData()
        self.read_state: Optional[ReadState] = None

    @property
    def editor(self) -> LineEditor:
        return self._editor

    @property
    def ansi_color_mode(self) -> AnsiColorMode:
        return self._ansi_color_mode

    @property
    def abort_read(self) -> bool:
        return self._abort_read

    # -- reading ---------------------------------------------------------

    def read(self, masking: bool = False) -> str:
        """
        Read one line of input styled with the input context.

        When the user interrupts, the registered handler runs first. If
        reads are aborted on interrupt, the text typed so far is returned;
        otherwise reading continues and that text prefixes the final line.
        I/O failures are logged and produce an empty string. The reset
        sequence is written on every exit path.
        """
        self.print_ansi(compose(self.input_style))
        mask = MASK_CHAR if masking else None
        partial_line = ""
        try:
            while True:
                self.read_state = ReadState.AWAITING_INPUT
                try:
                    result = self._editor.read_line(mask)
                except (OSError, EOFError):
                    logger.error("read error.", exc_info=True)
                    return ""

                if isinstance(result, Completed):
                    return partial_line + result.text

                self.read_state = ReadState.INTERRUPTED
                partial_line += result.partial_line
                self._interrupt_handler(self)
                if self._abort_read:
                    return partial_line
        finally:
            self.read_state = ReadState.DONE
            self.print_ansi(RESET)

    def register_user_interrupt_handler(
        self,
        handler: Optional[InterruptHandler],
        abort_read: bool = True,
    ) -> bool:
        """Replace the interrupt handler (None restores the default) and set the abort flag."""
        self._interrupt_handler = handler if handler is not None else default_interrupt_handler
        self._abort_read = abort_read
        return True

    # -- output ----------------------------------------------------------

    def raw_print(self, message: str) -> None:
        """Write a message styled with the prompt context."""
        self.print_ansi(compose(self.prompt_style) + message + RESET)

    def print(self, message: str) -> None:
        """Write a message, turning each newline into a println()."""
        for i, segment in enumerate(message.split("\n")):
            if i > 0:
                self.println()
            if segment:
                self.raw_print(segment)

    def print_ansi(self, text: str) -> bool:
        """Draw raw text (escape sequences included) through the editor."""
        try:
            self._editor.draw(text)
            return True
        except OSError:
            logger.error("print error.", exc_info=True)
            return False

    def println(self) -> None:
        try:
            self._editor.println()
        except OSError:
            logger.error("println error.", exc_info=True)

    def reset_line(self) -> bool:
        """Clear the current line, leaving an empty buffer."""
        try:
            self._editor.reset_line()
            return True
        except OSError:
            logger.error("reset_line error.", exc_info=True)
            return False

    def move_to_line_start(self) -> bool:
        """Carriage return, styled with the prompt context."""
        return self.print_ansi(compose(self.prompt_style) + "\r" + RESET)

    # -- colors ----------------------------------------------------------

    def color_code(self, name: Optional[str]) -> Optional[str]:
        """Color code for a name under the active mode, or None."""
        return color_code(name, self._ansi_color_mode)

    def ansi_color(self, name: Optional[str]) -> str:
        return ansi_color(FOREGROUND_PREFIX, name, self._ansi_color_mode)

    def ansi_background_color(self, name: Optional[str]) -> str:
        return ansi_color(BACKGROUND_PREFIX, name, self._ansi_color_mode)

    def set_ansi_color_mode(self, mode: Optional[str]) -> None:
        """
        Select standard, indexed or rgb (case-insensitive).

        None or empty selects standard. Unknown values are logged and the
        current mode is kept.
        """
        try:
            self._ansi_color_mode = AnsiColorMode.parse(mode)
        except InvalidColorModeError:
            logger.warning("Invalid value for ansi color mode: %s", mode)
            return
        logger.debug("ansi color mode set to: %s", self._ansi_color_mode)

    # -- prompt style ----------------------------------------------------

    def set_prompt_color(self, name: Optional[str]) -> None:
        self.prompt_style.color = self.ansi_color(name)

    def set_prompt_background_color(self, name: Optional[str]) -> None:
        self.prompt_style.background = self.ansi_background_color(name)

    def set_prompt_bold(self, bold: bool) -> None:
        self.prompt_style.bold = bold

    def set_prompt_italic(self, italic: bool) -> None:
        self.prompt_style.italic = italic

    def set_prompt_underline(self, underline: bool) -> None:
        self.prompt_style.underline = underline

    def clear_prompt_style(self) -> None:
        self.prompt_style.clear()

    # -- input style -----------------------------------------------------

    def set_input_color(self, name: Optional[str]) -> None:
        self.input_style.color = self.ansi_color(name)

    def set_input_background_color(self, name: Optional[str]) -> None:
        self.input_style.background = self.ansi_background_color(name)

    def set_input_bold(self, bold: bool) -> None:
        self.input_style.bold = bold

    def set_input_italic(self, italic: bool) -> None:
        self.input_style.italic = italic

    def set_input_underline(self, underline: bool) -> None:
        self.input_style.underline = underline

    def clear_input_style(self) -> None:
        self.input_style.clear()
