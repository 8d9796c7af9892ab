"""Change Set Analysis Package"""

from prsummary.analysis.exclusions import ExclusionRules, DEFAULT_EXCLUDE_PATTERNS
from prsummary.analysis.classifier import PRType, classify, TYPE_RULES
from prsummary.analysis.categorizer import Category, FileCategories, categorize, CATEGORY_RULES
from prsummary.analysis.complexity import FileStat, ComplexityReport, parse_numstat, analyze
from prsummary.analysis.suggestions import suggest

__all__ = [
    "ExclusionRules",
    "DEFAULT_EXCLUDE_PATTERNS",
    "PRType",
    "classify",
    "TYPE_RULES",
    "Category",
    "FileCategories",
    "categorize",
    "CATEGORY_RULES",
    "FileStat",
    "ComplexityReport",
    "parse_numstat",
    "analyze",
    "suggest",
]
