from __future__ import annotations

import os

from lintignore.errors import InvalidArgument


def is_absolute(filepath: str) -> bool:
    return filepath.startswith("/") or os.path.isabs(filepath)


def normalize_filepath(filepath: str) -> str:
    """Use forward slashes and drop a single leading ``./``.

    Only query paths are normalized. Pattern text is matched as written, so a
    pattern ``./foo`` never matches the query ``./foo`` (normalized to ``foo``).
    """
    filepath = filepath.replace("\\", "/")
    if filepath.startswith("./"):
        filepath = filepath[2:]
    return filepath


def resolve_filepath(filepath: str, base_dir: str | None = None) -> str:
    """Resolve an absolute ``filepath`` to a path relative to ``base_dir``.

    For ``/my/project/foo.py`` and base ``/my/project`` this returns ``foo.py``.
    Without a base directory only the leading slash is removed. Symlinks are
    not followed.
    """
    if not is_absolute(filepath):
        raise InvalidArgument(f"filepath should be an absolute path: {filepath!r}")
    if base_dir:
        if not is_absolute(base_dir):
            raise InvalidArgument(f"base_dir should be an absolute path: {base_dir!r}")
        relative = os.path.relpath(filepath, base_dir).replace(os.sep, "/")
        # relpath drops the trailing separator that marks a directory query
        if filepath.endswith(("/", "\\")) and not relative.endswith("/"):
            relative += "/"
        return relative
    if filepath.startswith("/"):
        return filepath[1:]
    return filepath
