"""
PR Summary Generator

Pre-filled pull request templates from the commits on the current branch.
"""

__version__ = "1.0.0"

# Centralized PR types - single source of truth
# Used by: analysis/classifier.py (PRType icons shown in the document and console)
PR_TYPES = {
    'Fix': '🐛',
    'Feature': '✨',
    'Refactor': '♻️',
    'Docs': '📝',
    'Test': '🧪',
    'Performance': '⚡',
    'Chore': '🔧',
}

DEFAULT_PR_TYPE = 'Chore'
