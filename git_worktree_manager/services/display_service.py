"""Display service for worktree messages and listings"""
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from git_worktree_manager.constants import (
    STYLE_ERROR,
    STYLE_INFO,
    STYLE_SUCCESS,
    STYLE_WARNING,
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
)
from git_worktree_manager.formatters import format_worktree_rows
from git_worktree_manager.logging_config import get_logger
from git_worktree_manager.models.worktree import WorktreeInfo

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None, no_color: bool = False):
        # soft_wrap keeps long paths on one line; the `cd` line is parsed by a shell
        self.console = console or Console(soft_wrap=True, highlight=False, no_color=no_color or None)

    def _styled(self, style: str, message: str) -> None:
        self.console.print(f"[{style}]{escape(message)}[/{style}]")

    def info(self, message: str) -> None:
        self._styled(STYLE_INFO, message)

    def success(self, message: str) -> None:
        self._styled(STYLE_SUCCESS, f"{SYMBOL_SUCCESS} {message}")

    def error(self, message: str) -> None:
        self._styled(STYLE_ERROR, f"{SYMBOL_ERROR} {message}")

    def warning(self, message: str) -> None:
        self._styled(STYLE_WARNING, f"{SYMBOL_WARNING} {message}")

    def plain(self, message: str = "", end: str = "\n") -> None:
        """Print text exactly as given, no markup and no styling."""
        self.console.print(message, markup=False, highlight=False, end=end)

    def display_worktree_list(self, worktrees: Iterable[WorktreeInfo]) -> None:
        """Display the `list` command output."""
        self.info("Git Worktrees:")
        self.plain()
        for row in format_worktree_rows(worktrees):
            self.plain(row)

    def display_available(self, worktrees: Iterable[WorktreeInfo]) -> None:
        """Show the listing as a hint after a failed lookup."""
        self.info("Available worktrees:")
        for row in format_worktree_rows(worktrees):
            self.plain(row)
