"""Line editor collaborator - the blocking read and redraw primitives."""

from __future__ import annotations

import codecs
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, TextIO, Union

from styled_term.core.constants import CSI


@dataclass(frozen=True)
class Completed:
    """A line was entered."""
    text: str


@dataclass(frozen=True)
class Interrupted:
    """The user interrupted the read after typing ``partial_line``."""
    partial_line: str = ""


ReadResult = Union[Completed, Interrupted]


class LineEditor(Protocol):
    """
    What the styled terminal needs from a line editor.

    ``read_line`` may raise OSError or EOFError on I/O failure.
    The other methods may raise OSError.
    """

    def read_line(self, mask: Optional[str] = None) -> ReadResult:
        ...

    def draw(self, text: str) -> None:
        ...

    def println(self) -> None:
        ...

    def reset_line(self) -> None:
        ...


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Context manager for raw terminal mode (Unix only)."""
    try:
        import termios
        import tty
    except ImportError:
        # Windows or no termios - just yield
        yield
        return
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


class ConsoleLineEditor:
    """
    Minimal line editor over stdin/stdout.

    On a TTY, characters are read in raw mode so that Ctrl-C can report
    what was typed so far and masked input never echoes. Otherwise one
    line is read from the stream.
    """

    INTERRUPT = "\x03"
    EOF = "\x04"
    BACKSPACE = ("\x7f", "\x08")
    ENTER = ("\r", "\n")

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def is_interactive(self) -> bool:
        try:
            return self._in.isatty()
        except (AttributeError, ValueError):
            return False

    def read_line(self, mask: Optional[str] = None) -> ReadResult:
        if self.is_interactive():
            return self._read_raw(mask)
        return self._read_stream()

    def _read_stream(self) -> ReadResult:
        try:
            line = self._in.readline()
        except KeyboardInterrupt:
            return Interrupted("")
        except UnicodeDecodeError as e:
            raise OSError(f"undecodable input: {e}") from e
        if not line:
            raise EOFError("end of input")
        return Completed(line.rstrip("\r\n"))

    def _read_raw(self, mask: Optional[str]) -> ReadResult:
        fd = self._in.fileno()
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        buffer = ""
        pending = ""
        with raw_mode(fd):
            while True:
                if not pending:
                    data = os.read(fd, 1024)
                    if not data:
                        raise EOFError("end of input")
                    pending = decoder.decode(data)
                    continue
                ch, pending = pending[0], pending[1:]

                if ch in self.ENTER:
                    self._write("\r\n")
                    return Completed(buffer)
                if ch == self.INTERRUPT:
                    self._write("\r\n")
                    return Interrupted(buffer)
                if ch == self.EOF and not buffer:
                    raise EOFError("end of input")
                if ch in self.BACKSPACE:
                    if buffer:
                        buffer = buffer[:-1]
                        self._write("\b \b")
                    continue
                if ch == "\x1b":
                    pending = self._skip_escape_sequence(pending)
                    continue
                if ch.isprintable():
                    buffer += ch
                    self._write(mask if mask else ch)

    @staticmethod
    def _skip_escape_sequence(pending: str) -> str:
        """Drop the rest of an escape sequence (cursor keys and the like)."""
        if pending.startswith("O"):
            # SS3: a single final character follows the introducer
            return pending[2:]
        for i, ch in enumerate(pending):
            if ch.isalpha() or ch == "~":
                return pending[i + 1:]
        return ""

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def draw(self, text: str) -> None:
        self._write(text)

    def println(self) -> None:
        self._write("\n")

    def reset_line(self) -> None:
        """Return to column 0 and clear the line."""
        self._write(f"\r{CSI}2K")
