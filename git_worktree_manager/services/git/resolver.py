"""Resolve a user-supplied token to a worktree.

Resolution is first-match: when several worktrees share a substring the
earliest in listing order wins, which can be the wrong one. Callers that need
precision should pass a full branch name or path.
"""

from typing import Iterable, Optional

from git_worktree_manager.logging_config import get_logger
from git_worktree_manager.models.worktree import WorktreeInfo

logger = get_logger(__name__)


def find_by_branch(worktrees: Iterable[WorktreeInfo], branch_name: str) -> Optional[WorktreeInfo]:
    """Return the first worktree whose branch is exactly branch_name."""
    for wt in worktrees:
        if wt.branch_name and wt.branch_name == branch_name:
            return wt
    return None


def find_by_substring(worktrees: Iterable[WorktreeInfo], token: str) -> Optional[WorktreeInfo]:
    """Return the first worktree whose path or branch contains token, ignoring case."""
    needle = token.lower()
    for wt in worktrees:
        if needle in wt.path.lower():
            return wt
        if wt.branch_name and needle in wt.branch_name.lower():
            return wt
    return None


def resolve_worktree(worktrees: list[WorktreeInfo], token: str) -> Optional[WorktreeInfo]:
    """Exact branch match first, then substring match on path or branch."""
    if not token:
        return None

    match = find_by_branch(worktrees, token)
    if match:
        logger.debug(f"'{token}' matched branch of {match.path}")
        return match

    match = find_by_substring(worktrees, token)
    if match:
        logger.debug(f"'{token}' matched {match.path} by substring")
    return match
