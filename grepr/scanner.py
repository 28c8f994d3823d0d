from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterator, TextIO

from .errors import OpenError, ScanError
from .models import STDIN, Stats


@contextmanager
def open_input(path: str, stdin: TextIO) -> Iterator[TextIO]:
    """
    Open a resolved path as a line source.

    The stdin sentinel hands back the given stdin stream, which is left open
    for any later "-" in the same run. Files are read as UTF-8 with
    newline="\\n": lines end only at "\\n", and "\\r" (alone or in "\\r\\n")
    is kept verbatim.
    """
    if path == STDIN:
        yield stdin
        return

    try:
        f = open(path, "r", encoding="utf-8", newline="\n")
    except OSError as ex:
        raise OpenError.from_os_error(path, ex) from ex

    with f:
        yield f


def scan_lines(
    stream: TextIO,
    rx: re.Pattern,
    invert: bool,
    path: str = STDIN,
    stats: Stats | None = None,
) -> list[str]:
    """
    Return the lines of stream selected by rx (or rejected by it when
    invert is set), each with its original terminator.

    The stream is consumed once, forward only. A read or decode failure
    raises ScanError and whatever was collected so far is dropped.
    """
    selected = []
    try:
        for line in stream:
            if stats is not None:
                stats.lines_seen += 1
            # "$" matches before a final "\n" but not before "\r\n"
            matched = rx.search(line) is not None
            if matched != invert:
                selected.append(line)
    except (OSError, UnicodeDecodeError) as ex:
        raise ScanError.from_exception(path, ex) from ex
    return selected
