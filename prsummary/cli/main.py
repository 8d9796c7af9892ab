"""CLI Main Entry Point"""

from prsummary.config import Config, load_config
from prsummary.git import GitRepository, GitError
from prsummary.pipeline import PRSummary, build_summary
from prsummary.output import (
    success, warning, info, dim, bold, print_error,
    colorize_pr_type, colorize_tier, CHECK, ARROW,
)

from prsummary.cli.args import parse_args
from prsummary.cli.commands import display_config, run_install_completion
from prsummary.cli.utils import copy_to_clipboard, write_output

BANNER_WIDTH = 50

POST_FILL_CHECKLIST = [
    "Link to related ticket",
    "Verify regression testing is complete",
    "Confirm test scenarios cover edge cases",
    "Add screenshots if UI changes",
]


def _print_banner():
    print(f"\n{'=' * BANNER_WIDTH}")
    print(info("PR Summary Generator".center(BANNER_WIDTH)))
    print(f"{'=' * BANNER_WIDTH}\n")


def _display_report(summary: PRSummary, config: Config, branch: str, commit_count: int):
    """Show where the summary went and what was detected."""
    report = summary.report
    print(f"{success(CHECK)} {bold('Generated:')} {config.output_file}")
    print(f"  {info('Branch:')} {branch or '(unknown)'} {ARROW} {config.base_branch}")
    print(f"  {info('Type:')} {summary.pr_type.icon} {colorize_pr_type(summary.pr_type.label)}")
    print(f"  {info('Files:')} {len(summary.files)} changed")
    print(f"  {info('Commits:')} {commit_count}")
    print(f"  {info('Complexity:')} {colorize_tier(report.complexity)}  {info('Risk:')} {colorize_tier(report.risk)}")


def _copy_and_report(prompt: str, output_file: str, no_copy: bool):
    """Copy the assistant prompt to the clipboard and print result."""
    if no_copy:
        return
    copied, reason = copy_to_clipboard(prompt)
    if copied:
        print(f"\n{success(CHECK)} AI prompt copied to clipboard!")
        print(dim(f"  {ARROW} Paste to your AI agent to fill in {output_file}"))
    else:
        print(f"\n{warning('!')} Could not copy to clipboard{': ' + reason if reason else ''}")
        print(dim(f"  {ARROW} Fill in {output_file} manually or rerun with a clipboard tool installed"))


def _display_checklist():
    print(f"\n{warning('After AI fills the PR:')}")
    for item in POST_FILL_CHECKLIST:
        print(f"  {success(CHECK)} {item}")
    print()


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(args.config, base_branch=args.base_branch, output_file=args.output), True
    return 0, False


def _generate_summary_flow(args, config: Config) -> int:
    """Collect, analyze, write and copy.

    Returns:
        int: Exit code
    """
    _print_banner()

    try:
        repo = GitRepository()
    except GitError as e:
        print_error(f"Error: {e}")
        return 1

    branch = repo.current_branch()
    changes = repo.collect(config.base_branch)
    stats = repo.diff_stats(config.base_branch)

    summary = build_summary(changes, stats, config)

    try:
        write_output(config.output_file, summary.document)
    except OSError as e:
        print_error(f"Could not write {config.output_file}: {e}")
        return 1

    _display_report(summary, config, branch, len(changes.commits))
    _copy_and_report(summary.prompt, config.output_file, args.no_copy)
    _display_checklist()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    # CLI arguments win over the config file
    config = load_config(args.config).with_overrides(
        base_branch=args.base_branch,
        output_file=args.output,
    )

    return _generate_summary_flow(args, config)
