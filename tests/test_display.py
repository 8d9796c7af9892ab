"""
Tests for the CLI flow and its console output.

Git and the clipboard are replaced with fakes. Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import json
import re

import pytest

from prsummary.analysis import FileStat
from prsummary.cli import main as cli_main
from prsummary.cli.args import parse_args
from prsummary.git import ChangeSet, GitError

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory with an empty fake home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    return tmp_path


@pytest.fixture
def fake_repo(monkeypatch):
    """Install a fake GitRepository and return the object holding its data."""
    class FakeRepo:
        commits = ["fix: resolve redirect loop"]
        files = ["src/hooks/useAuth.ts", "node_modules/x.js"]
        stats = [FileStat("src/hooks/useAuth.ts", 12, 3)]
        branch = "feature/login"
        bases = []

        def __init__(self, cwd=None):
            pass

        def current_branch(self):
            return self.branch

        def collect(self, base):
            FakeRepo.bases.append(base)
            return ChangeSet.build(self.commits, self.files)

        def diff_stats(self, base):
            return self.stats

    FakeRepo.bases = []
    monkeypatch.setattr(cli_main, "GitRepository", FakeRepo)
    return FakeRepo


@pytest.fixture
def clipboard(monkeypatch):
    """Capture clipboard writes. Set .result to simulate failure."""
    class Clipboard:
        copied = []
        result = (True, "")

    def _copy(text):
        Clipboard.copied.append(text)
        return Clipboard.result

    Clipboard.copied = []
    monkeypatch.setattr(cli_main, "copy_to_clipboard", _copy)
    return Clipboard


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.base_branch is None
        assert args.output is None
        assert args.config is None
        assert args.no_copy is False

    def test_positional_base_branch(self):
        args = parse_args(["develop", "--output", "MY_PR.md"])
        assert args.base_branch == "develop"
        assert args.output == "MY_PR.md"

    def test_options_only(self):
        args = parse_args(["--config", "custom.json"])
        assert args.base_branch is None
        assert args.config == "custom.json"

    def test_option_looking_branch_ignored(self):
        args = parse_args(["--", "--weird"])
        assert args.base_branch is None

    def test_single_dash_branch_accepted(self):
        assert parse_args(["-release"]).base_branch == "-release"

    def test_unknown_flags_ignored(self):
        args = parse_args(["--bogus"])
        assert args.base_branch is None
        assert parse_args(["develop", "--unknown"]).base_branch == "develop"

    def test_bare_output_and_config_fall_back(self):
        args = parse_args(["--output", "--config"])
        assert args.output is None
        assert args.config is None


# ---------------------------------------------------------------------------
# Main flow
# ---------------------------------------------------------------------------

class TestMain:

    def test_not_a_repository_exits_1(self, workdir, monkeypatch, capsys, strip_ansi):
        class NoRepo:
            def __init__(self, cwd=None):
                raise GitError("Not a git repository")

        monkeypatch.setattr(cli_main, "GitRepository", NoRepo)
        assert cli_main.main([]) == 1
        err = strip_ansi(capsys.readouterr().err)
        assert "Not a git repository" in err
        assert not (workdir / "PR_SUMMARY.md").exists()

    def test_writes_document(self, workdir, fake_repo, clipboard):
        assert cli_main.main([]) == 0

        doc = (workdir / "PR_SUMMARY.md").read_text(encoding="utf-8")
        assert doc.startswith("# 🐛 Fix: [Brief Description]")
        assert "src/hooks/useAuth.ts" in doc
        assert "node_modules" not in doc
        assert fake_repo.bases == ["main"]

    def test_overwrites_existing_output(self, workdir, fake_repo, clipboard):
        target = workdir / "PR_SUMMARY.md"
        target.write_text("stale", encoding="utf-8")
        cli_main.main([])
        assert "stale" not in target.read_text(encoding="utf-8")

    def test_cli_overrides(self, workdir, fake_repo, clipboard):
        assert cli_main.main(["develop", "--output", "out/MY_PR.md"]) == 0
        assert (workdir / "out" / "MY_PR.md").exists()
        assert fake_repo.bases == ["develop"]
        assert "git diff develop..HEAD" in clipboard.copied[0]
        assert clipboard.copied[0].startswith("# Fill PR Summary: out/MY_PR.md")

    def test_config_file_used(self, workdir, fake_repo, clipboard):
        (workdir / ".prsummaryrc.json").write_text(json.dumps({
            "baseBranch": "release",
            "outputFile": "FROM_CONFIG.md",
            "excludePatterns": ["^src/hooks/"],
        }))
        assert cli_main.main([]) == 0
        assert fake_repo.bases == ["release"]
        doc = (workdir / "FROM_CONFIG.md").read_text(encoding="utf-8")
        assert "useAuth" not in doc
        # Default exclusions are replaced, not merged
        assert "node_modules/x.js" in doc

    def test_malformed_config_falls_back(self, workdir, fake_repo, clipboard, capsys):
        (workdir / ".prsummaryrc.json").write_text("not json {{{")
        assert cli_main.main([]) == 0
        assert (workdir / "PR_SUMMARY.md").exists()
        assert "Config warning" in capsys.readouterr().err

    def test_empty_range_still_succeeds(self, workdir, fake_repo, clipboard):
        fake_repo.commits = []
        fake_repo.files = []
        fake_repo.stats = []
        assert cli_main.main([]) == 0
        doc = (workdir / "PR_SUMMARY.md").read_text(encoding="utf-8")
        assert "# 🔧 Chore" in doc

    def test_no_copy_skips_clipboard(self, workdir, fake_repo, clipboard):
        assert cli_main.main(["--no-copy"]) == 0
        assert clipboard.copied == []

    def test_unknown_flag_still_generates(self, workdir, fake_repo, clipboard):
        assert cli_main.main(["--unknown-flag", "--no-copy"]) == 0
        assert (workdir / "PR_SUMMARY.md").exists()
        assert fake_repo.bases == ["main"]



# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

class TestConsoleReport:

    def test_report_lines(self, workdir, fake_repo, clipboard, capsys, strip_ansi):
        cli_main.main([])
        out = strip_ansi(capsys.readouterr().out)

        assert "PR Summary Generator" in out
        assert "Generated: PR_SUMMARY.md" in out
        assert "Branch: feature/login → main" in out
        assert "Type: 🐛 Fix" in out
        assert "Files: 1 changed" in out
        assert "Commits: 1" in out
        assert "Complexity: Low" in out

    def test_clipboard_success_message(self, workdir, fake_repo, clipboard, capsys, strip_ansi):
        cli_main.main([])
        out = strip_ansi(capsys.readouterr().out)
        assert "AI prompt copied to clipboard!" in out
        assert "After AI fills the PR:" in out
        assert "Link to related ticket" in out

    def test_clipboard_failure_is_not_fatal(self, workdir, fake_repo, clipboard, capsys, strip_ansi):
        clipboard.result = (False, "No clipboard tool found")
        assert cli_main.main([]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "Could not copy to clipboard: No clipboard tool found" in out
        assert (workdir / "PR_SUMMARY.md").exists()

    def test_display_config(self, workdir, capsys, strip_ansi):
        (workdir / ".prsummaryrc.json").write_text(json.dumps({"baseBranch": "develop"}))
        assert cli_main.main(["--display-config"]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "Current Configuration" in out
        assert ".prsummaryrc.json" in out
        assert "baseBranch:      develop" in out
        assert "^node_modules/" in out

    def test_display_config_shows_cli_overrides(self, workdir, capsys, strip_ansi):
        (workdir / ".prsummaryrc.json").write_text(json.dumps({"baseBranch": "release"}))
        assert cli_main.main(["develop", "--output", "X.md", "--display-config"]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "baseBranch:      develop" in out
        assert "outputFile:      X.md" in out
        assert not (workdir / "X.md").exists()


    def test_install_completion(self, capsys, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/bash")
        assert cli_main.main(["--install-completion"]) == 0
        assert "register-python-argcomplete pr-summary" in capsys.readouterr().out
