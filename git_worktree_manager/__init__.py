"""
git-worktree-manager - create, list, remove, merge and switch between git worktrees
"""

from .__version__ import __version__
from .core import WorktreeManager
from .cli.main import main

__all__ = ["WorktreeManager", "main", "__version__"]
