from __future__ import annotations

import re
from typing import Protocol

from .errors import NoMatchError
from .models import MatchSpan


# ----------------------------
# Color helpers
# ----------------------------
ANSI_RESET = "\x1b[0m"
ANSI_DIM = "\x1b[2m"
ANSI_RED = "\x1b[31m"
ANSI_GREEN = "\x1b[32m"
ANSI_CYAN = "\x1b[36m"

COLOR_MODES = ("auto", "always", "never")


def supports_color(stream) -> bool:
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(s: str, color: str, enabled: bool) -> str:
    return f"{color}{s}{ANSI_RESET}" if enabled else s


# ----------------------------
# Formatters
# ----------------------------
class Formatter(Protocol):
    def emphasize(self, text: str) -> str: ...

    def label(self, text: str) -> str: ...


class PlainFormatter:
    def emphasize(self, text: str) -> str:
        return text

    def label(self, text: str) -> str:
        return text


class AnsiFormatter:
    def __init__(self, color: str = ANSI_GREEN) -> None:
        self.color = color

    def emphasize(self, text: str) -> str:
        return colorize(text, self.color, enabled=True)

    def label(self, text: str) -> str:
        return colorize(text, ANSI_DIM, enabled=True)


def make_formatter(mode: str, stream) -> Formatter:
    """Map a --color mode onto a formatter; "auto" colors only on a TTY."""
    if mode == "always" or (mode == "auto" and supports_color(stream)):
        return AnsiFormatter()
    return PlainFormatter()


# ----------------------------
# Match location
# ----------------------------
def locate_first_match(line: str, rx: re.Pattern) -> MatchSpan:
    m = rx.search(line)
    if m is None:
        raise NoMatchError(f"Pattern {rx.pattern!r} does not match line {line!r}")
    a, b = m.span()
    return MatchSpan(a, b)


def split_match(line: str, rx: re.Pattern) -> tuple[str, str, str]:
    """
    Split a matching line into (prefix, match, suffix) around its first match.

    The three parts always concatenate back to the original line, terminator
    included.
    """
    span = locate_first_match(line, rx)
    return line[: span.start], line[span.start : span.end], line[span.end :]
