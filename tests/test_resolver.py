"""Tests for token-to-worktree resolution"""
from git_worktree_manager.models.worktree import WorktreeInfo
from git_worktree_manager.services.git import find_by_branch, find_by_substring, resolve_worktree


def _worktrees():
    return [
        WorktreeInfo(path="/work/app", commit_sha="a" * 40, branch_name="main", is_main=True),
        WorktreeInfo(path="/work/app-feat-one", commit_sha="b" * 40, branch_name="feat-one"),
        WorktreeInfo(path="/work/app-feat-two", commit_sha="c" * 40, branch_name="feat-two"),
        WorktreeInfo(path="/work/hotfix-dir", commit_sha="d" * 40, branch_name="Urgent-Fix"),
        WorktreeInfo(path="/work/scratch", commit_sha="e" * 40, branch_name=None),
    ]


class TestFindByBranch:
    def test_exact_match(self):
        match = find_by_branch(_worktrees(), "feat-two")

        assert match.path == "/work/app-feat-two"

    def test_partial_name_does_not_match(self):
        assert find_by_branch(_worktrees(), "feat") is None

    def test_case_sensitive(self):
        assert find_by_branch(_worktrees(), "urgent-fix") is None


class TestFindBySubstring:
    def test_matches_path(self):
        match = find_by_substring(_worktrees(), "hotfix")

        assert match.path == "/work/hotfix-dir"

    def test_matches_branch_ignoring_case(self):
        match = find_by_substring(_worktrees(), "URGENT")

        assert match.path == "/work/hotfix-dir"

    def test_first_match_wins(self):
        match = find_by_substring(_worktrees(), "feat")

        assert match.path == "/work/app-feat-one"

    def test_can_match_main(self):
        match = find_by_substring(_worktrees(), "app")

        assert match.is_main

    def test_detached_matches_by_path(self):
        match = find_by_substring(_worktrees(), "scratch")

        assert match.branch_name is None

    def test_no_match(self):
        assert find_by_substring(_worktrees(), "nothing-here") is None


class TestResolveWorktree:
    def test_branch_match_beats_earlier_substring(self):
        worktrees = [
            WorktreeInfo(path="/work/dev-tools", commit_sha="a" * 40, branch_name="main", is_main=True),
            WorktreeInfo(path="/work/other", commit_sha="b" * 40, branch_name="dev"),
        ]

        match = resolve_worktree(worktrees, "dev")

        assert match.path == "/work/other"

    def test_falls_back_to_substring(self):
        match = resolve_worktree(_worktrees(), "two")

        assert match.branch_name == "feat-two"

    def test_empty_token(self):
        assert resolve_worktree(_worktrees(), "") is None
