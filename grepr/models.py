from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union

from .errors import ConfigError

STDIN = "-"


# ----------------------------
# Search configuration
# ----------------------------
@dataclass(frozen=True)
class SearchConfig:
    pattern: re.Pattern
    files: tuple[str, ...] = (STDIN,)
    recursive: bool = False
    count: bool = False
    invert_match: bool = False


def build_config(
    pattern: str,
    files: Iterable[str] = (),
    insensitive: bool = False,
    recursive: bool = False,
    count: bool = False,
    invert_match: bool = False,
) -> SearchConfig:
    """
    Compile the pattern and freeze the options into a SearchConfig.

    Case-insensitivity is baked into the compiled pattern and not kept as a
    separate field. Raises ConfigError before anything touches the filesystem.
    """
    flags = re.IGNORECASE if insensitive else 0
    try:
        rx = re.compile(pattern, flags)
    except re.error as ex:
        raise ConfigError.invalid_pattern(pattern) from ex

    return SearchConfig(
        pattern=rx,
        files=tuple(files) or (STDIN,),
        recursive=recursive,
        count=count,
        invert_match=invert_match,
    )


# ----------------------------
# Path outcomes
# ----------------------------
@dataclass(frozen=True)
class Resolved:
    path: str


@dataclass(frozen=True)
class Failed:
    path: str
    reason: str


PathOutcome = Union[Resolved, Failed]


# ----------------------------
# Match span
# ----------------------------
@dataclass(frozen=True)
class MatchSpan:
    start: int
    end: int


# ----------------------------
# Stats
# ----------------------------
@dataclass
class Stats:
    files_seen: int = 0
    files_read: int = 0
    files_failed: int = 0
    lines_seen: int = 0
    lines_reported: int = 0
    elapsed_s: float = 0.0
