from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from lintignore.ignored_paths import IgnoredPaths
from lintignore.locator import NO_BASE_DIR


def _query_path(path: Path, ignored: IgnoredPaths, is_dir: bool = False) -> str:
    # Without an ignore file there is no base directory, so match relative to cwd
    if ignored.base_dir == NO_BASE_DIR:
        query = Path(os.path.relpath(path, ignored.cwd)).as_posix()
    else:
        query = str(path)
    return query + "/" if is_dir else query


def scan_files(
    root: Path,
    ignored: IgnoredPaths,
    suffixes: Iterable[str] | None = None,
) -> Iterator[Path]:
    """Yield the files under ``root`` that ``ignored`` does not contain.

    Directories are walked top-down: the files of a directory come first,
    sorted by name, then its subdirectories in name order.
    """
    root = root.absolute()
    wanted = tuple(suffixes) if suffixes else None
    # A negation may re-include a file below an ignored directory
    prune = not any(rule.negated for rule in ignored.rules)

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        if prune:
            dirnames[:] = [
                d for d in dirnames
                if not ignored.contains(_query_path(current / d, ignored, is_dir=True))
            ]
        dirnames.sort()
        for name in sorted(filenames):
            path = current / name
            if wanted and not name.endswith(wanted):
                continue
            if ignored.contains(_query_path(path, ignored)):
                continue
            yield path
