from __future__ import annotations

import logging
import os
import stat
from typing import Iterable, Iterator

from .errors import PathError
from .models import STDIN, Failed, PathOutcome, Resolved

logger = logging.getLogger("grepr")


def walk_files(root: str) -> Iterator[str]:
    """
    Yield every regular file beneath root, sorted by full path.

    Symlinks are neither followed nor reported, and entries that vanish or
    cannot be inspected during the walk are skipped.
    """
    found = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_skip_walk_error):
        dirnames.sort()
        for name in filenames:
            fp = os.path.join(dirpath, name)
            try:
                st = os.lstat(fp)
            except OSError as ex:
                _skip_walk_error(ex)
                continue
            if stat.S_ISREG(st.st_mode):
                found.append(fp)
    yield from sorted(found)


def _skip_walk_error(ex: OSError) -> None:
    logger.debug("Skipping unreadable entry: %s", ex)


def resolve_paths(paths: Iterable[str], recursive: bool) -> list[PathOutcome]:
    outcomes: list[PathOutcome] = []
    for path in paths:
        if path == STDIN:
            outcomes.append(Resolved(path))
            continue

        try:
            st = os.stat(path)
        except OSError as ex:
            outcomes.append(Failed(path, str(PathError.from_os_error(path, ex))))
            continue

        if stat.S_ISDIR(st.st_mode):
            if recursive:
                before = len(outcomes)
                outcomes.extend(Resolved(fp) for fp in walk_files(path))
                logger.debug("Expanded %s into %d file(s)", path, len(outcomes) - before)
            else:
                outcomes.append(Failed(path, str(PathError.is_directory(path))))
        elif stat.S_ISREG(st.st_mode):
            outcomes.append(Resolved(path))
        else:
            # FIFOs, sockets, device nodes
            logger.debug("Ignoring non-regular path: %s", path)

    return outcomes


def count_resolved(outcomes: Iterable[PathOutcome]) -> int:
    return sum(1 for o in outcomes if isinstance(o, Resolved))
