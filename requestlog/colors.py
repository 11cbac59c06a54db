"""
Terminal color strategies for log lines.

The formatters only ever ask for a named color; whether that turns into an
ANSI escape sequence or nothing at all is decided by the colorizer handed
to the middleware.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Color(str, Enum):
    """
    Palette used by the request logger. Values are ANSI SGR parameters.
    """

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"

    BRIGHT_BLACK = "30;1"
    BRIGHT_RED = "31;1"
    BRIGHT_GREEN = "32;1"
    BRIGHT_YELLOW = "33;1"
    BRIGHT_BLUE = "34;1"
    BRIGHT_MAGENTA = "35;1"
    BRIGHT_CYAN = "36;1"
    BRIGHT_WHITE = "37;1"


RESET = "\033[0m"


class Colorizer(ABC):
    """
    Strategy that decorates a span of log text with a color.
    """

    @abstractmethod
    def colorize(self, text: str, color: Color) -> str:
        raise NotImplementedError


class PlainColorizer(Colorizer):
    """
    Returns text unchanged. Suitable for files and log shippers.
    """

    def colorize(self, text: str, color: Color) -> str:
        return text


class AnsiColorizer(Colorizer):
    """
    Wraps text in an ANSI escape sequence followed by a reset.
    """

    def colorize(self, text: str, color: Color) -> str:
        return f"\033[{color.value}m{text}{RESET}"


def get_colorizer(enabled: bool) -> Colorizer:
    """
    Pick the colorizer matching the REQUEST_LOG_COLOR switch.
    """
    return AnsiColorizer() if enabled else PlainColorizer()
