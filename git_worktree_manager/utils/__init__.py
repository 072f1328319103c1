"""Utility functions for git-worktree-manager.

This package provides utility modules:
- prompt: confirmation input sources for interactive and piped use
"""

from .prompt import ConfirmationReader, KeyReader, LineReader, get_confirmation_reader, is_affirmative

__all__ = [
    "ConfirmationReader",
    "KeyReader",
    "LineReader",
    "get_confirmation_reader",
    "is_affirmative",
]
