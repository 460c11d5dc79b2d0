"""Pytest configuration: a scripted line editor for terminal tests."""

import logging
from typing import Optional, Union

import pytest

from styled_term.term.editor import ReadResult
from styled_term.term.terminal import StyledTerminal

ScriptStep = Union[ReadResult, BaseException]


class ScriptedEditor:
    """
    LineEditor that replays scripted read results and records output.

    Each read_line() pops the next step; exceptions in the script are raised.
    """

    def __init__(self, *steps: ScriptStep) -> None:
        self.steps: list[ScriptStep] = list(steps)
        self.events: list[tuple[str, ...]] = []
        self.masks: list[Optional[str]] = []
        self.fail_draw = False
        self.fail_println = False
        self.fail_reset = False

    def script(self, *steps: ScriptStep) -> None:
        self.steps.extend(steps)

    def read_line(self, mask: Optional[str] = None) -> ReadResult:
        self.masks.append(mask)
        if not self.steps:
            raise AssertionError("no scripted input left")
        step = self.steps.pop(0)
        if isinstance(step, BaseException):
            raise step
        return step

    def draw(self, text: str) -> None:
        if self.fail_draw:
            raise OSError("draw failed")
        self.events.append(("draw", text))

    def println(self) -> None:
        if self.fail_println:
            raise OSError("println failed")
        self.events.append(("println",))

    def reset_line(self) -> None:
        if self.fail_reset:
            raise OSError("reset failed")
        self.events.append(("reset_line",))

    @property
    def drawn(self) -> list[str]:
        return [event[1] for event in self.events if event[0] == "draw"]


@pytest.fixture
def editor() -> ScriptedEditor:
    return ScriptedEditor()


@pytest.fixture
def term(editor: ScriptedEditor) -> StyledTerminal:
    return StyledTerminal(editor)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    # pytest attaches and detaches its own capture handlers per test phase
    handlers = [h for h in root.handlers if not type(h).__module__.startswith("_pytest")]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)

