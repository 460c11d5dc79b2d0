"""Logging setup with level-colored output."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from styled_term.core.color import AnsiColorMode
from styled_term.core.style import StyleData, ansi_foreground, wrap

LOG_LEVEL_ENV = "STYLED_TERM_LOG_LEVEL"

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_COLORS = (
    (logging.ERROR, "red"),
    (logging.WARNING, "yellow"),
    (logging.INFO, "green"),
    (logging.DEBUG, "cyan"),
)


class AnsiFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color
        self._styles = {
            level: StyleData(color=ansi_foreground(name, AnsiColorMode.STANDARD))
            for level, name in _LEVEL_COLORS
        }
        self._styles[logging.CRITICAL] = StyleData(
            color=ansi_foreground("red", AnsiColorMode.STANDARD), bold=True
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_color:
            return message
        style = self._style_for(record.levelno)
        if style is None:
            return message
        return wrap(style, message)

    def _style_for(self, level: int) -> Optional[StyleData]:
        if level >= logging.CRITICAL:
            return self._styles[logging.CRITICAL]
        for threshold, _ in _LEVEL_COLORS:
            if level >= threshold:
                return self._styles[threshold]
        return None


def resolve_env_log_level() -> Optional[int]:
    """Logging level from STYLED_TERM_LOG_LEVEL ("DEBUG", "warning", "10"), or None."""
    val = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    level = logging.getLevelName(v)
    return level if isinstance(level, int) else None


def setup_logging(level: Optional[int] = None) -> None:
    """
    Configure the root logger to write colored records to stderr.

    Without an explicit level, STYLED_TERM_LOG_LEVEL is consulted, then
    WARNING is used.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(AnsiFormatter(fmt, use_color=sys.stderr.isatty()))
    root_logger.addHandler(handler)
