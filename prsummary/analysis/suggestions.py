"""Suggestion Engine - Reviewer hints derived from which kinds of files changed."""

from typing import Callable

from prsummary.analysis.categorizer import Category, FileCategories
from prsummary.analysis.classifier import PRType

SCREENSHOTS = '📸 Consider adding screenshots for UI changes'
ACCESSIBILITY = '♿ Verify accessibility with screen reader'
HOOK_TESTS = '🧪 Add unit tests for custom hooks'
UTIL_COVERAGE = '📊 Aim for 100% test coverage on utility functions'
NO_TESTS = '⚠️  No test files modified - consider adding tests'
TYPE_DOCS = '📝 Update JSDoc comments for type changes'
RESPONSIVE = '🎨 Test responsive design on mobile devices'
DARK_MODE = '🌓 Verify dark mode compatibility (if applicable)'


def _has(category: Category) -> Callable[[FileCategories, PRType], bool]:
    return lambda categories, pr_type: bool(categories[category])


def _missing_tests(categories: FileCategories, pr_type: PRType) -> bool:
    return not categories[Category.TESTS] and pr_type.label != 'Docs'


# Rules are independent; every matching rule contributes, in this order
SUGGESTION_RULES: list[tuple[Callable[[FileCategories, PRType], bool], tuple[str, ...]]] = [
    (_has(Category.COMPONENTS), (SCREENSHOTS, ACCESSIBILITY)),
    (_has(Category.HOOKS), (HOOK_TESTS,)),
    (_has(Category.UTILS), (UTIL_COVERAGE,)),
    (_missing_tests, (NO_TESTS,)),
    (_has(Category.TYPES), (TYPE_DOCS,)),
    (_has(Category.STYLES), (RESPONSIVE, DARK_MODE)),
]


def suggest(categories: FileCategories, pr_type: PRType) -> tuple[str, ...]:
    suggestions: list[str] = []
    for condition, messages in SUGGESTION_RULES:
        if condition(categories, pr_type):
            suggestions.extend(messages)
    return tuple(suggestions)
