"""Data models for git-worktree-manager."""

from .worktree import WorktreeInfo

__all__ = ["WorktreeInfo"]
