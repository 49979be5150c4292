from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from lintignore.errors import IgnoreFileUnreadable

logger = logging.getLogger(__name__)

IGNORE_FILENAME = ".lintignore"

# base_dir used when no ignore file was loaded
NO_BASE_DIR = "."


@dataclass(frozen=True)
class IgnoreFileLocation:
    base_dir: str
    lines: tuple[str, ...] = ()
    path: str | None = None


def read_ignore_lines(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise IgnoreFileUnreadable(path, reason) from e
    return [line.rstrip("\r") for line in content.split("\n")]


def locate_ignore_file(cwd: str, ignore_path: str | None = None) -> IgnoreFileLocation:
    """Find the single ignore file that applies to ``cwd``.

    An explicit ``ignore_path`` always wins. Otherwise only ``cwd`` itself is
    searched; parent directories are never consulted, so a project does not
    pick up rules from an unrelated ancestor.
    """
    if ignore_path:
        path = os.path.abspath(os.path.join(cwd, ignore_path))
        lines = read_ignore_lines(path)
        logger.debug("Loaded ignore file %s (%d lines)", path, len(lines))
        return IgnoreFileLocation(os.path.dirname(path), tuple(lines), path)

    candidate = os.path.join(os.path.abspath(cwd), IGNORE_FILENAME)
    if not os.path.lexists(candidate):
        logger.debug("No %s in %s", IGNORE_FILENAME, cwd)
        return IgnoreFileLocation(NO_BASE_DIR)

    lines = read_ignore_lines(candidate)
    logger.debug("Loaded ignore file %s (%d lines)", candidate, len(lines))
    return IgnoreFileLocation(os.path.dirname(candidate), tuple(lines), candidate)
