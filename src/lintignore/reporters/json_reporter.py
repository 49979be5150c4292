from __future__ import annotations

import json
from pathlib import Path

from lintignore.ignored_paths import IgnoredPaths


def render_check_json(results: dict[str, bool]) -> str:
    data = {
        "total_paths": len(results),
        "total_ignored": sum(1 for ignored in results.values() if ignored),
        "paths": [
            {"path": path, "ignored": ignored}
            for path, ignored in results.items()
        ],
    }
    return json.dumps(data, indent=2)


def render_files_json(files: list[Path], root: Path) -> str:
    data = {
        "root": str(root),
        "total_files": len(files),
        "files": [path.relative_to(root).as_posix() for path in files],
    }
    return json.dumps(data, indent=2)


def render_rules_json(ignored: IgnoredPaths) -> str:
    data = {
        "base_dir": ignored.base_dir,
        "ignore_file": ignored.ignore_file,
        "default_patterns": list(ignored.default_patterns),
        "rules": [
            {
                "pattern": rule.pattern,
                "negated": rule.negated,
                "anchored": rule.anchored,
            }
            for rule in ignored.rules
        ],
    }
    return json.dumps(data, indent=2)
