"""Tests for DisplayService and formatters"""
import io

from rich.console import Console

from git_worktree_manager.formatters import format_usage, format_worktree_row
from git_worktree_manager.models.worktree import WorktreeInfo
from git_worktree_manager.services.display_service import DisplayService


def _display():
    output = io.StringIO()
    console = Console(file=output, soft_wrap=True, highlight=False, no_color=True, width=40)
    return DisplayService(console=console), output


class TestFormatters:
    def test_row_layout(self):
        wt = WorktreeInfo(path="/repo", commit_sha="0123456789abcdef", branch_name="main")

        row = format_worktree_row(wt)

        assert row == "  " + "/repo".ljust(40) + " " + "main".ljust(20) + " 0123456"

    def test_row_detached(self):
        wt = WorktreeInfo(path="/repo-x", commit_sha="fedcba9876543210")

        assert "detached" in format_worktree_row(wt)

    def test_usage_uses_prog_name(self):
        usage = format_usage("gwt")

        assert "Usage: gwt [command] [args]" in usage
        assert "gwt switch app-ai" in usage


class TestDisplayService:
    def test_message_symbols(self):
        display, output = _display()

        display.success("done")
        display.error("broken")
        display.warning("careful")

        lines = output.getvalue().splitlines()
        assert lines == ["✓ done", "✗ broken", "⚠ careful"]

    def test_markup_in_messages_is_escaped(self):
        display, output = _display()

        display.info("branch [feature] ready")

        assert output.getvalue().strip() == "branch [feature] ready"

    def test_long_paths_are_not_wrapped(self):
        display, output = _display()
        long_path = "/very/long/" + "nested/" * 20 + "worktree"

        display.plain(f"cd {long_path}")

        assert output.getvalue() == f"cd {long_path}\n"

    def test_worktree_list_skips_bare(self):
        display, output = _display()
        worktrees = [
            WorktreeInfo(path="/srv/repo.git", commit_sha="", is_main=True, is_bare=True),
            WorktreeInfo(path="/srv/checkout", commit_sha="abcdef0123", branch_name="dev"),
        ]

        display.display_worktree_list(worktrees)

        text = output.getvalue()
        assert text.startswith("Git Worktrees:\n\n")
        assert "/srv/checkout" in text
        assert "/srv/repo.git" not in text
