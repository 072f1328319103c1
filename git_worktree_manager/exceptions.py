"""Custom exceptions for git-worktree-manager"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from git_worktree_manager.models.worktree import WorktreeInfo


class WorktreeManagerError(Exception):
    """Base exception for all git-worktree-manager errors."""
    pass


class MissingArgumentError(WorktreeManagerError):
    """Exception raised when a command is invoked without a required argument."""

    def __init__(self, message: str, usage: Optional[str] = None):
        self.message = message
        self.usage = usage
        super().__init__(message)


class GitOperationError(WorktreeManagerError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, target: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.target = target
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if target:
            error_msg += f" for '{target}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(GitOperationError):
    """Exception raised when the working directory is not inside a git repository."""

    def __init__(self, path: str):
        super().__init__("open_repository", path, "Not a git repository")


class BranchNotFoundError(WorktreeManagerError):
    """Exception raised when a local branch does not exist."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"Branch not found: {branch}")


class WorktreeNotFoundError(WorktreeManagerError):
    """Exception raised when no worktree matches a user-supplied token.

    Carries the current listing so callers can show what is available.
    """

    def __init__(self, message: str, worktrees: Optional[List["WorktreeInfo"]] = None):
        self.message = message
        self.worktrees = worktrees or []
        super().__init__(message)
