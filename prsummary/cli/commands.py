"""CLI Commands"""

import os
import sys

from prsummary.config import ConfigManager
from prsummary.output import bold, dim, info


def display_config(explicit: str | None = None, base_branch: str | None = None, output_file: str | None = None) -> int:
    """Display the configuration a run would use, CLI overrides included."""
    manager = ConfigManager()
    config = manager.load(explicit).with_overrides(base_branch=base_branch, output_file=output_file)
    config_path = manager.get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .prsummaryrc.json found)")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    baseBranch:      {info(config.base_branch)}")
    print(f"    outputFile:      {info(config.output_file)}")
    print(f"    excludePatterns: {info(str(len(config.exclude_patterns)))}")
    for pattern in config.exclude_patterns:
        print(f"      {dim(pattern)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .prsummaryrc.json, .prsummaryrc, prsummary.config.json")
    print(f"    Global: ~/.prsummaryrc.json\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete pr-summary)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell pr-summary | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish pr-summary | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
