from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from pathspec.patterns.gitwildmatch import GitWildMatchPattern, GitWildMatchPatternError

from lintignore.errors import InvalidPattern

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS: tuple[str, ...] = ("/node_modules/", "/bower_components/")

DOTFILE_PATTERN = ".*"


def default_patterns() -> tuple[str, ...]:
    return DEFAULT_PATTERNS


@dataclass(frozen=True)
class Rule:
    pattern: str
    negated: bool = False
    regex: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)
    # set when the pattern could not be compiled; such a rule never matches
    error: str | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            regex = self._compile()
        except InvalidPattern as e:
            logger.warning("Skipping ignore pattern %r: %s", self.source, e.reason)
            object.__setattr__(self, "error", e.reason)
            regex = None
        object.__setattr__(self, "regex", regex)

    @classmethod
    def parse(cls, line: str) -> Rule:
        if line.startswith("!"):
            return cls(line[1:], negated=True)
        return cls(line)

    @property
    def anchored(self) -> bool:
        return self.pattern.startswith("/")

    @property
    def matches_descendants(self) -> bool:
        return self.pattern.strip("/") != "*"

    @property
    def source(self) -> str:
        """The rule as it would be written in an ignore file."""
        return f"!{self.pattern}" if self.negated else self.pattern

    def _compile(self) -> re.Pattern[str]:
        body = self.pattern
        if body.startswith(("#", "!")):
            body = "\\" + body
        if not self.anchored and "/" in body.rstrip("/") and not body.startswith("**/"):
            body = "**/" + body
        try:
            compiled = GitWildMatchPattern(body)
        except GitWildMatchPatternError as e:
            raise InvalidPattern(self.source, str(e)) from e
        if compiled.regex is None:
            raise InvalidPattern(self.source, "pattern is empty")
        return compiled.regex

    @property
    def valid(self) -> bool:
        return self.error is None

    def matches(self, path: str) -> bool:
        if self.regex is None:
            return False
        return self.regex.match(path) is not None


@dataclass(frozen=True)
class DotfileRule(Rule):
    """Matches any path with a segment that starts with a dot.

    ``.`` and ``..`` are navigation segments and never count as dotfiles.
    """

    pattern: str = DOTFILE_PATTERN

    def _compile(self) -> None:
        return None

    def matches(self, path: str) -> bool:
        return any(
            part.startswith(".") and part not in (".", "..")
            for part in path.split("/")
        )


RuleSet = tuple[Rule, ...]


def clean_lines(lines: Iterable[str]) -> list[str]:
    cleaned = []
    for line in lines:
        line = line.rstrip("\r")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        cleaned.append(line)
    return cleaned


def _as_list(ignore_pattern: str | Sequence[str] | None) -> list[str]:
    if ignore_pattern is None:
        return []
    if isinstance(ignore_pattern, str):
        return [ignore_pattern]
    return list(ignore_pattern)


def compile_rules(
    file_lines: Iterable[str],
    ignore_pattern: str | Sequence[str] | None = None,
    *,
    ignore: bool = True,
    dotfiles: bool = False,
    strict: bool = False,
) -> RuleSet:
    """Build the ordered rule set.

    Patterns that cannot be compiled are kept as rules that never match, the
    way git skips them. With ``strict=True`` the first one raises
    :class:`InvalidPattern` instead.
    """
    rules: list[Rule] = []
    if ignore:
        rules.extend(Rule.parse(line) for line in clean_lines(file_lines))
        rules.extend(Rule.parse(line) for line in clean_lines(_as_list(ignore_pattern)))
        if strict:
            for rule in rules:
                if not rule.valid:
                    raise InvalidPattern(rule.source, rule.error)
        # Defaults go last so user negations can't re-include vendor directories
        rules.extend(Rule(pattern) for pattern in DEFAULT_PATTERNS)
    if not dotfiles:
        rules.append(DotfileRule())

    logger.debug(
        "Compiled %d rules (ignore=%s, dotfiles=%s)", len(rules), ignore, dotfiles
    )
    return tuple(rules)
