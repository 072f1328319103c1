"""Worktree formatting utilities."""

from typing import Iterable

from git_worktree_manager.constants import (
    LIST_BRANCH_WIDTH,
    LIST_INDENT,
    LIST_PATH_WIDTH,
    USAGE_TEXT,
)
from git_worktree_manager.models.worktree import WorktreeInfo


def format_worktree_row(worktree: WorktreeInfo) -> str:
    """Format one worktree as `path branch sha` with fixed left-aligned columns."""
    return (
        f"{LIST_INDENT}{worktree.path:<{LIST_PATH_WIDTH}} "
        f"{worktree.display_branch:<{LIST_BRANCH_WIDTH}} "
        f"{worktree.short_sha}"
    )


def format_worktree_rows(worktrees: Iterable[WorktreeInfo]) -> list[str]:
    """Format every worktree that has a HEAD commit; bare entries have none."""
    return [format_worktree_row(wt) for wt in worktrees if wt.commit_sha]


def format_usage(prog_name: str) -> str:
    return USAGE_TEXT.format(prog=prog_name)
