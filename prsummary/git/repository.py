"""Git Repository - Collect commits, changed files and numstat for a branch range."""

import subprocess
from dataclasses import dataclass

from prsummary.analysis.complexity import FileStat, parse_numstat


@dataclass(frozen=True)
class ChangeSet:
    """Commits and files unique to the current branch."""
    commits: tuple[str, ...] = ()
    files: tuple[str, ...] = ()

    @classmethod
    def build(cls, commits: list[str], files: list[str]) -> 'ChangeSet':
        # dict keeps first-seen order while dropping duplicates
        return cls(commits=tuple(commits), files=tuple(dict.fromkeys(files)))


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepository:
    """Reads the commit range between a base branch and HEAD.

    Construction fails fast outside a work tree. Individual queries never
    raise: a failed git call yields an empty result.
    """

    def __init__(self, cwd: str | None = None):
        self.cwd = cwd
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.cwd,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _query(self, *args: str) -> str:
        """Like _run_git, but a failure degrades to empty output."""
        try:
            return self._run_git(*args).strip()
        except GitError:
            return ""

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not a git repository")

    def current_branch(self) -> str:
        return self._query('rev-parse', '--abbrev-ref', 'HEAD')

    def commit_subjects(self, base: str) -> list[str]:
        output = self._query('log', f'{base}..HEAD', '--pretty=format:%s')
        return [line for line in output.split('\n') if line]

    def changed_files(self, base: str) -> list[str]:
        """Files touched by the branch's own commits, de-duplicated."""
        output = self._query('log', f'{base}..HEAD', '--name-only', '--pretty=format:')
        return list(dict.fromkeys(line for line in output.split('\n') if line))

    def diff_stats(self, base: str) -> list[FileStat]:
        return parse_numstat(self._query('diff', f'{base}..HEAD', '--numstat'))

    def collect(self, base: str) -> ChangeSet:
        return ChangeSet.build(self.commit_subjects(base), self.changed_files(base))
