from __future__ import annotations


class LintIgnoreError(Exception):
    """Base class for every error raised by lintignore."""


class IgnoreFileUnreadable(LintIgnoreError, OSError):
    def __init__(self, path: str, reason: str | None = None):
        message = f"Cannot read ignore file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path


class InvalidArgument(LintIgnoreError, ValueError):
    pass


class NotInitialized(LintIgnoreError, RuntimeError):
    pass


class InvalidPattern(LintIgnoreError, ValueError):
    def __init__(self, pattern: str, reason: str | None = None):
        message = f"Invalid ignore pattern: {pattern!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.pattern = pattern
        self.reason = reason
