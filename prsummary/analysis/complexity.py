"""Complexity Analyzer - Score change size and risk from numstat output."""

from dataclasses import dataclass

LOW = 'Low'
MEDIUM = 'Medium'
HIGH = 'High'

# A file is "large" above this many changed lines (added + removed)
LARGE_FILE_THRESHOLD = 200

# (total_changes above, large_files above) -> tier
COMPLEXITY_HIGH = (1000, 3)
COMPLEXITY_MEDIUM = (300, 1)
RISK_HIGH = (2000, 5)
RISK_MEDIUM_LARGE_FILES = 2
RISK_MEDIUM_REMOVAL_RATIO = 2


@dataclass(frozen=True)
class FileStat:
    """Added/removed line counts for one file."""
    path: str
    added: int = 0
    removed: int = 0

    @property
    def total_changes(self) -> int:
        return self.added + self.removed

    @property
    def is_large(self) -> bool:
        return self.total_changes > LARGE_FILE_THRESHOLD


@dataclass(frozen=True)
class ComplexityReport:
    """Aggregate line counts plus complexity and risk tiers."""
    complexity: str = LOW
    risk: str = LOW
    total_added: int = 0
    total_removed: int = 0
    large_files: int = 0
    file_count: int = 0

    @property
    def total_changes(self) -> int:
        return self.total_added + self.total_removed


def _to_count(field: str) -> int:
    # Binary files report "-" instead of a number; only ASCII digits parse
    field = field.strip()
    return int(field) if field.isascii() and field.isdecimal() else 0


def parse_numstat(output: str) -> list[FileStat]:
    """Parse 'git diff --numstat' output. Malformed fields count as zero."""
    stats = []
    for line in output.split('\n'):
        if not line.strip():
            continue
        parts = line.split('\t')
        added = _to_count(parts[0])
        removed = _to_count(parts[1]) if len(parts) > 1 else 0
        path = parts[2] if len(parts) > 2 else ''
        stats.append(FileStat(path=path, added=added, removed=removed))
    return stats


def _complexity_tier(total_changes: int, large_files: int) -> str:
    changes, large = COMPLEXITY_HIGH
    if total_changes > changes or large_files > large:
        return HIGH
    changes, large = COMPLEXITY_MEDIUM
    if total_changes > changes or large_files > large:
        return MEDIUM
    return LOW


def _risk_tier(total_added: int, total_removed: int, large_files: int) -> str:
    # Independent of complexity: heavy deletions alone can raise risk
    risk = LOW
    if large_files > RISK_MEDIUM_LARGE_FILES or total_removed > total_added * RISK_MEDIUM_REMOVAL_RATIO:
        risk = MEDIUM
    changes, large = RISK_HIGH
    if large_files > large or total_added + total_removed > changes:
        risk = HIGH
    return risk


def analyze(stats: list[FileStat]) -> ComplexityReport:
    total_added = sum(s.added for s in stats)
    total_removed = sum(s.removed for s in stats)
    large_files = sum(1 for s in stats if s.is_large)

    return ComplexityReport(
        complexity=_complexity_tier(total_added + total_removed, large_files),
        risk=_risk_tier(total_added, total_removed, large_files),
        total_added=total_added,
        total_removed=total_removed,
        large_files=large_files,
        file_count=len(stats),
    )
