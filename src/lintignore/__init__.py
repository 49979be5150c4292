from lintignore.config import IgnoreOptions, load_options
from lintignore.errors import (
    IgnoreFileUnreadable,
    InvalidArgument,
    InvalidPattern,
    LintIgnoreError,
    NotInitialized,
)
from lintignore.ignored_paths import IgnoredPaths
from lintignore.patterns import DEFAULT_PATTERNS, default_patterns

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PATTERNS",
    "IgnoreFileUnreadable",
    "IgnoreOptions",
    "IgnoredPaths",
    "InvalidArgument",
    "InvalidPattern",
    "LintIgnoreError",
    "NotInitialized",
    "default_patterns",
    "load_options",
]
