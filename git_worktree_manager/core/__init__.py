"""Core worktree management logic."""

from .worktree_manager import WorktreeManager

__all__ = ["WorktreeManager"]
