"""Configuration Management Package

Config is looked up in the working directory (first hit wins):

1. the path passed with --config
2. .prsummaryrc.json
3. .prsummaryrc
4. prsummary.config.json
5. ~/.prsummaryrc.json
6. Built-in defaults

Config format (JSON):
{
    "baseBranch": "develop",
    "outputFile": "PR_SUMMARY.md",
    "excludePatterns": ["^dist/", "\\.log$"]
}
"""

import json
import re
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from prsummary.analysis.exclusions import ExclusionRules, DEFAULT_EXCLUDE_PATTERNS

# JSON key -> Config field
CONFIG_KEYS = {
    "baseBranch": "base_branch",
    "outputFile": "output_file",
    "excludePatterns": "exclude_patterns",
}

CONFIG_FILENAMES = (".prsummaryrc.json", ".prsummaryrc", "prsummary.config.json")
GLOBAL_CONFIG_FILENAME = ".prsummaryrc.json"


def _warn(message: str) -> None:
    print(f"Config warning: {message}", file=sys.stderr)


@dataclass(frozen=True)
class Config:
    """Resolved settings for one run. Exclusions are compiled on construction."""
    base_branch: str = "main"
    output_file: str = "PR_SUMMARY.md"
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    exclusions: ExclusionRules = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'exclude_patterns', tuple(self.exclude_patterns))
        object.__setattr__(self, 'exclusions', ExclusionRules.compile(self.exclude_patterns))

    def with_overrides(self, base_branch: str | None = None, output_file: str | None = None) -> 'Config':
        """Return a copy with CLI overrides applied."""
        changes = {}
        if base_branch:
            changes['base_branch'] = base_branch
        if output_file:
            changes['output_file'] = output_file
        return replace(self, **changes) if changes else self

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """Create Config from parsed JSON, ignoring unknown keys.

        Values of the wrong type fall back to the default; patterns that do
        not compile are dropped. Each problem is reported on stderr.
        """
        values = {}
        for key, attr in CONFIG_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if attr == 'exclude_patterns':
                patterns = _valid_patterns(value)
                if patterns is not None:
                    values[attr] = patterns
            elif isinstance(value, str) and value.strip():
                values[attr] = value
            else:
                _warn(f"Invalid {key} '{value}', using default")
        return cls(**values)


def _valid_patterns(value) -> Optional[tuple[str, ...]]:
    if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        _warn("excludePatterns must be a list of strings, using defaults")
        return None

    patterns = []
    for source in value:
        try:
            re.compile(source)
        except re.error as e:
            _warn(f"Ignoring invalid exclude pattern '{source}': {e}")
            continue
        patterns.append(source)
    return tuple(patterns)


class ConfigManager:
    """Locates and loads the configuration file."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd or Path.cwd()
        self._config_path: Optional[Path] = None

    def candidates(self, explicit: str | None = None) -> list[Path]:
        paths = [self.cwd / name for name in CONFIG_FILENAMES]
        paths.append(Path.home() / GLOBAL_CONFIG_FILENAME)
        if explicit:
            paths.insert(0, self.cwd / explicit)
        return paths

    def load(self, explicit: str | None = None) -> Config:
        if explicit and not (self.cwd / explicit).exists():
            _warn(f"Config file {explicit} not found")

        for path in self.candidates(explicit):
            if path.is_file():
                self._config_path = path
                return self._load_from_file(path)

        return Config()

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            _warn(f"Could not parse config file {path}: {e}")
            return Config()

        if not isinstance(data, dict):
            _warn(f"Config file {path} must contain a JSON object")
            return Config()
        return Config.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        """Return the path of the loaded config file, if any."""
        return self._config_path


def load_config(explicit: str | None = None) -> Config:
    return ConfigManager().load(explicit)


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "CONFIG_KEYS",
    "CONFIG_FILENAMES",
]
