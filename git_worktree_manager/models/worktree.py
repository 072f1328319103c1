"""Worktree data models."""

import os
from dataclasses import dataclass
from typing import Optional

SHORT_SHA_LENGTH = 7


@dataclass
class WorktreeInfo:
    """Information about a git worktree, as reported by `git worktree list --porcelain`."""

    path: str
    commit_sha: str
    branch_name: Optional[str] = None  # None when HEAD is detached
    is_main: bool = False  # First entry in the listing
    is_bare: bool = False

    @property
    def is_orphaned(self) -> bool:
        """Directory missing?"""
        return not os.path.isdir(self.path)

    @property
    def short_sha(self) -> str:
        return self.commit_sha[:SHORT_SHA_LENGTH]

    @property
    def display_branch(self) -> str:
        return self.branch_name if self.branch_name else "detached"

    def __str__(self) -> str:
        """String representation of worktree."""
        main_marker = " (main)" if self.is_main else ""
        return f"{self.display_branch} @ {self.path}{main_marker}"
