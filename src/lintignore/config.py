from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from lintignore.errors import InvalidArgument

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class IgnoreOptions:
    ignore: bool = True
    cwd: str = field(default_factory=os.getcwd)
    ignore_path: str | None = None
    ignore_pattern: str | list[str] | None = None
    # True keeps dotfiles in play
    dotfiles: bool = False

    def __post_init__(self) -> None:
        for name in ("ignore", "dotfiles"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidArgument(f"{name} must be a bool, got {getattr(self, name)!r}")
        if not isinstance(self.cwd, (str, os.PathLike)):
            raise InvalidArgument(f"cwd must be a path, got {self.cwd!r}")
        self.cwd = os.path.abspath(self.cwd)
        if self.ignore_path is not None:
            if not isinstance(self.ignore_path, (str, os.PathLike)):
                raise InvalidArgument(f"ignore_path must be a path, got {self.ignore_path!r}")
            self.ignore_path = os.fspath(self.ignore_path)
        if self.ignore_pattern is not None:
            patterns = [self.ignore_pattern] if isinstance(self.ignore_pattern, str) else self.ignore_pattern
            if not isinstance(patterns, (list, tuple)) or not all(isinstance(p, str) for p in patterns):
                raise InvalidArgument(
                    f"ignore_pattern must be a string or a list of strings, got {self.ignore_pattern!r}"
                )

    @property
    def patterns(self) -> list[str]:
        if self.ignore_pattern is None:
            return []
        if isinstance(self.ignore_pattern, str):
            return [self.ignore_pattern]
        return list(self.ignore_pattern)


def load_options(project_path: Path) -> IgnoreOptions:
    pyproject = project_path / "pyproject.toml"
    if not pyproject.exists():
        return IgnoreOptions(cwd=str(project_path))

    if tomllib is None:
        return IgnoreOptions(cwd=str(project_path))

    with open(pyproject, "rb") as f:
        data = tomllib.load(f)

    tool_config = data.get("tool", {}).get("lintignore", {})
    if not tool_config:
        return IgnoreOptions(cwd=str(project_path))

    field_map = {
        "ignore": "ignore",
        "ignore-path": "ignore_path",
        "ignore-pattern": "ignore_pattern",
        "dotfiles": "dotfiles",
    }

    kwargs = {}
    for toml_key, attr_name in field_map.items():
        if toml_key in tool_config:
            kwargs[attr_name] = tool_config[toml_key]

    if isinstance(kwargs.get("ignore_path"), str):
        kwargs["ignore_path"] = str(project_path / kwargs["ignore_path"])

    return IgnoreOptions(cwd=str(project_path), **kwargs)
