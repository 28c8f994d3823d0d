from __future__ import annotations

import logging
import sys
import time
from typing import TextIO

from .errors import OpenError, ScanError
from .highlight import Formatter, PlainFormatter, split_match
from .models import Failed, SearchConfig, Stats
from .paths import count_resolved, resolve_paths
from .scanner import open_input, scan_lines


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()


def run(
    config: SearchConfig,
    out: TextIO | None = None,
    err: TextIO | None = None,
    stdin: TextIO | None = None,
    formatter: Formatter | None = None,
    logger: logging.Logger | None = None,
) -> Stats:
    """
    Search every input named by config and write the results.

    Per-input failures go to err, one line each, and never stop the run.
    Lines get a "path:" prefix only when more than one input resolved to a
    readable file; in highlight mode the prefix is followed by a space.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    stdin = sys.stdin if stdin is None else stdin
    formatter = PlainFormatter() if formatter is None else formatter
    logger = logging.getLogger("grepr") if logger is None else logger

    stats = Stats()
    t0 = time.perf_counter()

    outcomes = resolve_paths(config.files, config.recursive)
    multi = count_resolved(outcomes) > 1
    logger.debug("Resolved %d input(s) into %d outcome(s)", len(config.files), len(outcomes))

    def prefix(path: str, sep: str = "") -> str:
        return formatter.label(f"{path}:") + sep if multi else ""

    for outcome in outcomes:
        if isinstance(outcome, Failed):
            logger.warning("Cannot resolve '%s': %s", outcome.path, outcome.reason)
            stats.files_failed += 1
            _write(err, f"{outcome.reason}\n")
            continue

        path = outcome.path
        stats.files_seen += 1
        try:
            with open_input(path, stdin) as f:
                lines = scan_lines(f, config.pattern, config.invert_match, path=path, stats=stats)
        except (OpenError, ScanError) as ex:
            logger.warning("Cannot read '%s': %s", path, ex)
            stats.files_failed += 1
            _write(err, f"{ex}\n")
            continue

        stats.files_read += 1
        logger.debug("%s: %d line(s) selected", path, len(lines))

        if config.count:
            _write(out, f"{prefix(path)}{len(lines)}\n")
            stats.lines_reported += 1
            continue

        for line in lines:
            if config.invert_match:
                _write(out, f"{prefix(path)}{line}")
            else:
                before, matched, after = split_match(line, config.pattern)
                _write(out, f"{prefix(path, ' ')}{before}{formatter.emphasize(matched)}{after}")
            stats.lines_reported += 1

    stats.elapsed_s = time.perf_counter() - t0
    return stats
