"""Exclusion Rules - Drop build output, IDE folders and lock files before analysis."""

import re
from dataclasses import dataclass
from typing import Iterable

# Anchors are deliberate: "^node_modules/" only matches at the repository root
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    r'^\.windsurf/',
    r'^\.cursor/',
    r'^\.vscode/',
    r'^\.idea/',
    r'^node_modules/',
    r'^\.next/',
    r'^dist/',
    r'^build/',
    r'^coverage/',
    r'\.log$',
    r'^\.env',
    r'^\.gitignore$',
    r'^package-lock\.json$',
    r'^yarn\.lock$',
)


@dataclass(frozen=True)
class ExclusionRules:
    """Ordered, pre-compiled exclusion patterns."""
    patterns: tuple[re.Pattern, ...] = ()

    @classmethod
    def compile(cls, sources: Iterable[str]) -> 'ExclusionRules':
        """Compile pattern sources once. Raises re.error on a bad pattern."""
        return cls(patterns=tuple(re.compile(source) for source in sources))

    @property
    def sources(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self.patterns)

    def matches(self, path: str) -> bool:
        return any(p.search(path) for p in self.patterns)

    def filter(self, paths: Iterable[str]) -> list[str]:
        """Return the paths no pattern matches, in input order."""
        return [path for path in paths if not self.matches(path)]
