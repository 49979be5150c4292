from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from lintignore.config import IgnoreOptions
from lintignore.errors import NotInitialized
from lintignore.locator import NO_BASE_DIR, locate_ignore_file
from lintignore.paths import is_absolute, normalize_filepath, resolve_filepath
from lintignore.patterns import RuleSet, compile_rules, default_patterns

logger = logging.getLogger(__name__)

_DEFAULT = object()


@dataclass(frozen=True)
class Context:
    base_dir: str
    rules: RuleSet
    dotfiles_excluded: bool
    ignore_enabled: bool
    ignore_file: str | None = None
    cwd: str = ""


def build_context(options: IgnoreOptions) -> Context:
    if options.ignore:
        location = locate_ignore_file(options.cwd, options.ignore_path)
    else:
        location = None

    rules = compile_rules(
        location.lines if location else (),
        options.patterns,
        ignore=options.ignore,
        dotfiles=options.dotfiles,
    )
    return Context(
        base_dir=location.base_dir if location else NO_BASE_DIR,
        rules=rules,
        dotfiles_excluded=not options.dotfiles,
        ignore_enabled=options.ignore,
        ignore_file=location.path if location else None,
        cwd=options.cwd,
    )


class IgnoredPaths:
    """Decides whether a path is excluded from analysis.

    All configuration is resolved when the object is built: the ignore file is
    read once and the rules are compiled into an immutable :class:`Context`.
    :meth:`contains` does no I/O afterwards and is safe to call from several
    threads at once.

    Passing ``None`` (or anything that is not an :class:`IgnoreOptions`)
    leaves the instance unusable; :meth:`contains` then raises
    :class:`NotInitialized` instead of failing somewhere deeper.
    """

    def __init__(self, options: IgnoreOptions | None = _DEFAULT):  # type: ignore[assignment]
        if options is _DEFAULT:
            options = IgnoreOptions()
        self.options = options
        self._context: Context | None = None
        if isinstance(options, IgnoreOptions):
            self._context = build_context(options)
        else:
            logger.debug("IgnoredPaths created without options; queries will fail")

    @property
    def context(self) -> Context:
        if self._context is None:
            raise NotInitialized("IgnoredPaths was not initialized with valid options")
        return self._context

    @property
    def base_dir(self) -> str:
        return self.context.base_dir

    @property
    def rules(self) -> RuleSet:
        return self.context.rules

    @property
    def cwd(self) -> str:
        return self.context.cwd

    @property
    def ignore_file(self) -> str | None:
        return self.context.ignore_file

    @property
    def default_patterns(self) -> tuple[str, ...]:
        return default_patterns()

    def _relative(self, filepath: str) -> str:
        path = normalize_filepath(filepath)
        if is_absolute(path):
            base_dir = self.context.base_dir
            path = resolve_filepath(path, None if base_dir == NO_BASE_DIR else base_dir)
        return path

    def contains(self, filepath: str) -> bool:
        """Return True when ``filepath`` is excluded by the rule set."""
        context = self.context
        path = self._relative(filepath)

        ignored = False
        for rule in context.rules:
            if ignored == (not rule.negated):
                # the rule could not change the verdict
                continue
            if rule.matches(path):
                ignored = not rule.negated

        logger.debug("%s -> %s", filepath, "ignored" if ignored else "included")
        return ignored

    def filter(self, filepaths: Iterable[str]) -> list[str]:
        return [p for p in filepaths if not self.contains(p)]
