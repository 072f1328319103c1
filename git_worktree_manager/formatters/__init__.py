"""Formatting utilities for git-worktree-manager."""

from .worktree import format_usage, format_worktree_row, format_worktree_rows

__all__ = ["format_usage", "format_worktree_row", "format_worktree_rows"]
