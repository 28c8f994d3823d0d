from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .errors import ConfigError
from .highlight import ANSI_CYAN, ANSI_RED, COLOR_MODES, colorize, make_formatter, supports_color
from .models import STDIN, build_config
from .runner import run


# ----------------------------
# Logging
# ----------------------------
def setup_logging(debug: bool, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the "grepr" logger.

    Nothing is written anywhere unless asked for: --log-file adds a file
    handler and --debug adds a stderr handler. Per-file errors reach stderr
    through the runner, not through logging.
    """
    logger = logging.getLogger("grepr")
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = False

    fmt = logging.Formatter("%(asctime)s %(levelname)s: %(message)s")

    if log_file is not None:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if debug:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


# ----------------------------
# CLI
# ----------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="grepr",
        description="Search files (or stdin) for lines matching a regular expression.",
    )
    p.add_argument("pattern", metavar="PATTERN", help="Search pattern (Python re).")
    p.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        default=[STDIN],
        help='Input file(s) or folders; "-" reads stdin (default: -).',
    )

    p.add_argument("-i", "--insensitive", "--ignore-case", dest="insensitive", action="store_true", help="Case-insensitive search.")
    p.add_argument("-r", "--recursive", action="store_true", help="Recurse into folders.")
    p.add_argument("-c", "--count", action="store_true", help="Print the number of selected lines per file.")
    p.add_argument("-v", "--invert-match", dest="invert_match", action="store_true", help="Select non-matching lines.")

    p.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Highlight matches (default: auto).",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")
    p.add_argument("--log-file", type=Path, help="Also write the run log to this file.")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    return p


def _prepare_stdin() -> None:
    # split stdin on "\n" only, keeping "\r" verbatim
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(encoding="utf-8", newline="\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(args.debug, args.log_file)
    err_color = args.color == "always" or (args.color == "auto" and supports_color(sys.stderr))

    logger.info("Args: %s", " ".join(sys.argv if argv is None else argv))
    logger.info("Options: recursive=%s insensitive=%s invert=%s count=%s color=%s debug=%s",
                args.recursive, args.insensitive, args.invert_match, args.count, args.color, args.debug)

    try:
        try:
            config = build_config(
                args.pattern,
                args.files,
                insensitive=args.insensitive,
                recursive=args.recursive,
                count=args.count,
                invert_match=args.invert_match,
            )
        except ConfigError as ex:
            logger.error("%s", ex)
            print(colorize(str(ex), ANSI_RED, err_color), file=sys.stderr)
            return 1

        if STDIN in config.files:
            _prepare_stdin()

        stats = run(
            config,
            formatter=make_formatter(args.color, sys.stdout),
            logger=logger,
        )

        logger.info(
            "Performance: files_seen=%d files_read=%d files_failed=%d lines_seen=%d lines_reported=%d elapsed=%.6fs",
            stats.files_seen,
            stats.files_read,
            stats.files_failed,
            stats.lines_seen,
            stats.lines_reported,
            stats.elapsed_s,
        )
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C).")
        print(colorize("Interrupted.", ANSI_RED, err_color), file=sys.stderr)
        return 130

    finally:
        if args.log_file is not None:
            print(colorize(f"Log written to: {args.log_file}", ANSI_CYAN, err_color), file=sys.stderr)
