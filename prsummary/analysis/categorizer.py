"""File Categorizer - Sort changed paths into fixed buckets."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Iterator

from prsummary.analysis.exclusions import ExclusionRules


class Category(Enum):
    """File buckets, in rendering order."""
    COMPONENTS = 'components'
    HOOKS = 'hooks'
    UTILS = 'utils'
    TYPES = 'types'
    STYLES = 'styles'
    TESTS = 'tests'
    DOCS = 'docs'
    CONFIG = 'config'
    SCRIPTS = 'scripts'
    OTHER = 'other'

    @property
    def label(self) -> str:
        """Heading used in the 'Changes Made' section."""
        return CATEGORY_LABELS[self]

    @property
    def title(self) -> str:
        """Capitalized key used in the file listing."""
        return self.value.capitalize()


CATEGORY_LABELS = {
    Category.COMPONENTS: 'Components',
    Category.HOOKS: 'Hooks',
    Category.UTILS: 'Utilities',
    Category.TYPES: 'Types',
    Category.STYLES: 'Styles',
    Category.TESTS: 'Tests',
    Category.DOCS: 'Documentation',
    Category.CONFIG: 'Configuration',
    Category.SCRIPTS: 'Scripts',
    Category.OTHER: 'Other Files',
}

_STYLE_RE = re.compile(r'\.(scss|css|less|sass)$')
_TEST_RE = re.compile(r'\.(test|spec)\.(ts|tsx|js|jsx)$')
_CONFIG_RE = re.compile(r'\.(json|yml|yaml|config\.(ts|js))$')


def _contains(fragment: str) -> Callable[[str], bool]:
    return lambda path: fragment in path


def _is_doc(path: str) -> bool:
    return path.endswith('.md') and 'node_modules' not in path


# Directory rules come before extension rules; first match wins.
# "components/" also covers "src/components/", likewise for the others.
CATEGORY_RULES: list[tuple[Callable[[str], bool], Category]] = [
    (_contains('components/'), Category.COMPONENTS),
    (_contains('hooks/'), Category.HOOKS),
    (_contains('utils/'), Category.UTILS),
    (_contains('types/'), Category.TYPES),
    (lambda path: bool(_STYLE_RE.search(path)), Category.STYLES),
    (lambda path: bool(_TEST_RE.search(path)), Category.TESTS),
    (_contains('scripts/'), Category.SCRIPTS),
    (_is_doc, Category.DOCS),
    (lambda path: bool(_CONFIG_RE.search(path)), Category.CONFIG),
]


def category_for(path: str) -> Category:
    for predicate, category in CATEGORY_RULES:
        if predicate(path):
            return category
    return Category.OTHER


@dataclass(frozen=True)
class FileCategories:
    """Every category mapped to its files. All keys always present."""
    buckets: dict[Category, tuple[str, ...]] = field(
        default_factory=lambda: {c: () for c in Category}
    )

    def __getitem__(self, category: Category) -> tuple[str, ...]:
        return self.buckets[category]

    def __iter__(self) -> Iterator[tuple[Category, tuple[str, ...]]]:
        for category in Category:
            yield category, self.buckets[category]

    def non_empty(self) -> list[tuple[Category, tuple[str, ...]]]:
        return [(c, files) for c, files in self if files]

    @property
    def total_files(self) -> int:
        return sum(len(files) for files in self.buckets.values())

    @property
    def is_empty(self) -> bool:
        return self.total_files == 0


def categorize(paths: Iterable[str], exclusions: ExclusionRules | None = None) -> FileCategories:
    """Bucket paths by the first matching rule, skipping excluded ones."""
    exclusions = exclusions or ExclusionRules()
    grouped: dict[Category, list[str]] = {c: [] for c in Category}

    for path in paths:
        if exclusions.matches(path):
            continue
        grouped[category_for(path)].append(path)

    return FileCategories(buckets={c: tuple(files) for c, files in grouped.items()})
