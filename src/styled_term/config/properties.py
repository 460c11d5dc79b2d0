"""Bind named properties (from code or a TOML file) to terminal setters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

import toml

from styled_term.config.keys import (
    PROP_ANSI_COLOR_MODE,
    PROP_INPUT_BGCOLOR,
    PROP_INPUT_BOLD,
    PROP_INPUT_COLOR,
    PROP_INPUT_ITALIC,
    PROP_INPUT_UNDERLINE,
    PROP_PROMPT_BGCOLOR,
    PROP_PROMPT_BOLD,
    PROP_PROMPT_COLOR,
    PROP_PROMPT_ITALIC,
    PROP_PROMPT_UNDERLINE,
)
from styled_term.core.color import AnsiColorMode
from styled_term.core.constants import PROPERTY_PREFIX

if TYPE_CHECKING:
    from styled_term.term.terminal import StyledTerminal

logger = logging.getLogger(__name__)

PropertyValue = Union[str, bool, None]

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})


@dataclass
class _Listener:
    kind: type
    default: PropertyValue
    callback: Callable[["StyledTerminal", Any], None]
    read_back: Optional[Callable[["StyledTerminal"], PropertyValue]] = None


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"not a boolean: {value!r}")


def normalize_key(key: str) -> str:
    """Lower-case a key and strip the optional ``styled_term.`` prefix."""
    key = key.strip().lower()
    if key.startswith(PROPERTY_PREFIX):
        key = key[len(PROPERTY_PREFIX):]
    return key


class TerminalProperties:
    """
    Named style settings for a StyledTerminal.

    Each known key is bound to a setter. A setter runs whenever the value
    of its key changes; setting a key to its current value does nothing.
    """

    def __init__(self, terminal: "StyledTerminal") -> None:
        self._terminal = terminal
        self._listeners: dict[str, _Listener] = {}
        self._values: dict[str, PropertyValue] = {}

        self.add_string_listener(PROP_PROMPT_COLOR, None, lambda term, v: term.set_prompt_color(v))
        self.add_string_listener(PROP_PROMPT_BGCOLOR, None, lambda term, v: term.set_prompt_background_color(v))
        self.add_boolean_listener(PROP_PROMPT_BOLD, False, lambda term, v: term.set_prompt_bold(v))
        self.add_boolean_listener(PROP_PROMPT_ITALIC, False, lambda term, v: term.set_prompt_italic(v))
        self.add_boolean_listener(PROP_PROMPT_UNDERLINE, False, lambda term, v: term.set_prompt_underline(v))
        self.add_string_listener(PROP_INPUT_COLOR, None, lambda term, v: term.set_input_color(v))
        self.add_string_listener(PROP_INPUT_BGCOLOR, None, lambda term, v: term.set_input_background_color(v))
        self.add_boolean_listener(PROP_INPUT_BOLD, False, lambda term, v: term.set_input_bold(v))
        self.add_boolean_listener(PROP_INPUT_ITALIC, False, lambda term, v: term.set_input_italic(v))
        self.add_boolean_listener(PROP_INPUT_UNDERLINE, False, lambda term, v: term.set_input_underline(v))

        self.add_string_listener(
            PROP_ANSI_COLOR_MODE,
            AnsiColorMode.STANDARD.value,
            lambda term, v: term.set_ansi_color_mode(v),
            read_back=lambda term: term.ansi_color_mode.value,
        )

    def add_string_listener(
        self,
        key: str,
        default: Optional[str],
        callback: Callable[["StyledTerminal", Optional[str]], None],
        read_back: Optional[Callable[["StyledTerminal"], PropertyValue]] = None,
    ) -> None:
        """``read_back`` fetches the value the terminal actually kept after the setter ran."""
        self._listeners[normalize_key(key)] = _Listener(str, default, callback, read_back)

    def add_boolean_listener(
        self,
        key: str,
        default: bool,
        callback: Callable[["StyledTerminal", bool], None],
    ) -> None:
        self._listeners[normalize_key(key)] = _Listener(bool, default, callback)

    @property
    def keys(self) -> list[str]:
        return list(self._listeners)

    def get(self, key: str) -> PropertyValue:
        """Current value of a key, or its default when never set."""
        key = normalize_key(key)
        listener = self._listeners.get(key)
        if listener is None:
            raise KeyError(key)
        return self._values.get(key, listener.default)

    def set(self, key: str, value: Any) -> bool:
        """
        Assign a property and notify its setter if the value changed.

        Unknown keys and values that cannot be coerced are logged and
        ignored; False is returned for them.
        """
        name = normalize_key(key)
        listener = self._listeners.get(name)
        if listener is None:
            logger.warning("Unknown property: %s", key)
            return False

        try:
            if listener.kind is bool:
                new_value: PropertyValue = _to_bool(value)
            else:
                new_value = None if value is None else str(value)
        except ValueError:
            logger.warning("Invalid value for property %s: %r", key, value)
            return False

        old_value = self._values.get(name, listener.default)
        self._values[name] = new_value
        if new_value != old_value:
            logger.debug("property %s: %r -> %r", name, old_value, new_value)
            listener.callback(self._terminal, new_value)
            if listener.read_back is not None:
                self._values[name] = listener.read_back(self._terminal)
        return True

    def update(self, values: Mapping[str, Any]) -> None:
        """Assign several properties. The color mode goes first so colors quantize under it."""
        ordered = sorted(values.items(), key=lambda item: normalize_key(item[0]) != PROP_ANSI_COLOR_MODE)
        for key, value in ordered:
            self.set(key, value)

    def load(self, path: Union[str, Path]) -> None:
        """Apply the properties found in a TOML file."""
        self.update(load_properties(path))


def _flatten(table: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in table.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = value
    return flat


def load_properties(path: Union[str, Path]) -> dict[str, Any]:
    """
    Read a TOML file into dotted property keys.

    Nested tables are flattened, so ``[prompt] color = "red"`` becomes
    ``{"prompt.color": "red"}``. Errors are logged and an empty dict is
    returned.
    """
    path = Path(path)
    try:
        data = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    return _flatten(data)
