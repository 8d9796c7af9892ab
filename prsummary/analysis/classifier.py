"""Type Classifier - Pick one PR type from commit subjects and file paths."""

from dataclasses import dataclass
from typing import Callable

from prsummary import PR_TYPES, DEFAULT_PR_TYPE


@dataclass(frozen=True)
class PRType:
    """PR type label with its display icon."""
    label: str
    icon: str

    @classmethod
    def named(cls, label: str) -> 'PRType':
        return cls(label=label, icon=PR_TYPES[label])

    def __str__(self) -> str:
        return f"{self.icon} {self.label}"


# Predicate signature: (commit_text, file_text) -> bool, both lower-cased
Predicate = Callable[[str, str], bool]


def _commits_mention(*words: str) -> Predicate:
    return lambda commits, files: any(w in commits for w in words)


def _files_mention(*words: str) -> Predicate:
    return lambda commits, files: any(w in files for w in words)


def _either(*predicates: Predicate) -> Predicate:
    return lambda commits, files: any(p(commits, files) for p in predicates)


# Evaluated top to bottom, first match wins
TYPE_RULES: list[tuple[Predicate, str]] = [
    (_commits_mention('fix', 'bug', 'resolve'), 'Fix'),
    (_commits_mention('feat', 'feature', 'add'), 'Feature'),
    (_commits_mention('refactor', 'restructure'), 'Refactor'),
    (_either(_commits_mention('docs', 'documentation'), _files_mention('.md')), 'Docs'),
    (_either(_commits_mention('test'), _files_mention('test', 'spec')), 'Test'),
    (_commits_mention('perf', 'performance', 'optimize'), 'Performance'),
]


def classify(commits: list[str], files: list[str]) -> PRType:
    """Classify a change set. Files must already be exclusion-filtered."""
    commit_text = ' '.join(commits).lower()
    file_text = ' '.join(files).lower()

    for predicate, label in TYPE_RULES:
        if predicate(commit_text, file_text):
            return PRType.named(label)
    return PRType.named(DEFAULT_PR_TYPE)
