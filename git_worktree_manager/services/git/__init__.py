"""Git-related services for git-worktree-manager."""

from .worktrees import WorktreeService, parse_worktree_porcelain
from .resolver import find_by_branch, find_by_substring, resolve_worktree

__all__ = [
    "WorktreeService",
    "parse_worktree_porcelain",
    "find_by_branch",
    "find_by_substring",
    "resolve_worktree",
]
