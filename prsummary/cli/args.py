"""CLI Argument Parsing"""

import argparse
import sys

import argcomplete

from prsummary import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pr-summary',
        description='Generate a pre-filled PR summary from the commits on this branch',
        epilog='Example: pr-summary develop --output MY_PR.md'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Range and output; a bare --output/--config falls back to the config value
    parser.add_argument('base_branch', nargs='?', default=None, metavar='BASE_BRANCH', help='Branch to compare against (default: from config, else main)')
    parser.add_argument('--output', type=str, nargs='?', metavar='PATH', help='Where to write the PR summary (default: PR_SUMMARY.md)')
    parser.add_argument('--config', type=str, nargs='?', metavar='PATH', help='JSON config file (default: .prsummaryrc.json and friends)')
    parser.add_argument('--no-copy', action='store_true', help='Do not copy the assistant prompt to the clipboard')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show the resolved configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments. Unknown flags are ignored rather than fatal."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args, unknown = parser.parse_known_args(argv)

    # A leading "-name" is a branch, anything starting with "--" never is
    first = argv[0] if argv else None
    if args.base_branch is None and first in unknown and not first.startswith('--'):
        args.base_branch = first
    if args.base_branch and args.base_branch.startswith('--'):
        args.base_branch = None
    return args
