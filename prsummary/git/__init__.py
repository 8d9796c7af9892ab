"""Git Operations Package"""

from prsummary.git.repository import GitRepository, GitError, ChangeSet

__all__ = [
    "GitRepository",
    "GitError",
    "ChangeSet",
]
