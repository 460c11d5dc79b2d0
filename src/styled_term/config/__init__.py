"""Configuration: property binding and logging setup."""

from styled_term.config.logging import setup_logging
from styled_term.config.properties import TerminalProperties, load_properties

__all__ = ["TerminalProperties", "load_properties", "setup_logging"]
