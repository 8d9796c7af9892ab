"""Pipeline - Turn a collected change set into the PR document and assistant prompt."""

from dataclasses import dataclass

from prsummary.analysis import (
    ComplexityReport, FileCategories, FileStat, PRType,
    analyze, categorize, classify, suggest,
)
from prsummary.config import Config
from prsummary.git import ChangeSet
from prsummary.render import DocumentRenderer, PromptRenderer


@dataclass(frozen=True)
class PRSummary:
    """Everything one run produces."""
    pr_type: PRType
    files: tuple[str, ...]
    categories: FileCategories
    report: ComplexityReport
    suggestions: tuple[str, ...]
    document: str
    prompt: str


def build_summary(changes: ChangeSet, stats: list[FileStat], config: Config) -> PRSummary:
    """Classify, categorize, score and render. Performs no I/O."""
    exclusions = config.exclusions
    files = exclusions.filter(changes.files)
    commits = list(changes.commits)
    counted = [s for s in stats if not exclusions.matches(s.path)]

    pr_type = classify(commits, files)
    categories = categorize(files, exclusions)
    report = analyze(counted)
    suggestions = suggest(categories, pr_type)

    document = DocumentRenderer().render(pr_type, commits, categories, report, list(suggestions))
    prompt = PromptRenderer().render(config.output_file, commits, files, config.base_branch)

    return PRSummary(
        pr_type=pr_type,
        files=tuple(files),
        categories=categories,
        report=report,
        suggestions=suggestions,
        document=document,
        prompt=prompt,
    )
