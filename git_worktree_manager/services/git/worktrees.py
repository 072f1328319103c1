"""Worktree operations service for git-worktree-manager."""

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import git

from git_worktree_manager.exceptions import GitOperationError, NotARepositoryError
from git_worktree_manager.logging_config import get_logger
from git_worktree_manager.models.worktree import WorktreeInfo

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def _clean_stream(value: Optional[str]) -> str:
    """Strip GitPython's "stdout: '...'" wrapping from captured output."""
    if not value:
        return ""
    value = value.strip()
    for prefix in ("stdout:", "stderr:"):
        if value.startswith(prefix):
            value = value[len(prefix):].strip()
            # Only the quote pair GitPython added; git's own quotes stay
            if len(value) >= 2 and value[0] == value[-1] == "'":
                value = value[1:-1].strip()
    return value


def _describe_git_error(e: git.exc.GitCommandError, command: str) -> str:
    """Build a readable message from a GitCommandError."""
    stderr = _clean_stream(e.stderr if hasattr(e, "stderr") else str(e))
    status = e.status if hasattr(e, "status") else "unknown"

    if stderr:
        return f"{command} failed (exit {status}): {stderr}"
    return f"{command} failed with exit code {status}"


def _build_worktree(entry: Dict[str, Any], is_main: bool) -> WorktreeInfo:
    return WorktreeInfo(
        path=entry["path"],
        commit_sha=entry.get("HEAD", ""),
        branch_name=entry.get("branch"),
        is_main=is_main,
        is_bare=entry.get("bare", False),
    )


def parse_worktree_porcelain(output: str) -> list[WorktreeInfo]:
    """Parse the output of `git worktree list --porcelain`.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or "detached", or "bare")
        (blank line between worktrees)

    The first entry is the main worktree.
    """
    worktree_list: list[WorktreeInfo] = []
    current: Dict[str, Any] = {}

    for line in output.split("\n"):
        line = line.rstrip("\r")

        if not line.strip():
            # Empty line marks end of worktree entry
            if current.get("path"):
                worktree_list.append(_build_worktree(current, is_main=not worktree_list))
            current = {}
            continue

        if line.startswith("worktree "):
            current["path"] = line.split(" ", 1)[1]
        elif line.startswith("HEAD "):
            current["HEAD"] = line.split(" ", 1)[1].strip()
        elif line.startswith("branch "):
            branch_ref = line.split(" ", 1)[1].strip()
            if branch_ref.startswith(BRANCH_REF_PREFIX):
                current["branch"] = branch_ref[len(BRANCH_REF_PREFIX):]
        elif line == "bare":
            current["bare"] = True
        # "detached", "locked" and "prunable" carry nothing we display

    # Handle last entry if no trailing blank line
    if current.get("path"):
        worktree_list.append(_build_worktree(current, is_main=not worktree_list))

    return worktree_list


class WorktreeService:
    """Service for the git calls behind every worktree command."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Directory the tool was invoked from; any directory
                inside the repository or one of its worktrees works
        """
        self.repo_path = repo_path

    @contextmanager
    def _repo(self) -> Iterator[git.Repo]:
        """Open a git.Repo for the duration of one operation."""
        try:
            repo = git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"Could not open repository at {self.repo_path}: {e}")
            raise NotARepositoryError(self.repo_path) from e
        try:
            yield repo
        finally:
            repo.close()

    def _resolve_path(self, path: str) -> str:
        """Make a user-supplied path absolute relative to the invocation directory.

        GitPython runs git from the repository root, not from where the user is.
        """
        return os.path.abspath(os.path.join(self.repo_path, os.path.expanduser(path)))

    def list_worktrees(self) -> list[WorktreeInfo]:
        """Get detailed information about all worktrees.

        Returns:
            List of WorktreeInfo objects, main worktree first
        """
        with self._repo() as repo:
            try:
                output = repo.git.worktree("list", "--porcelain")
            except git.exc.GitCommandError as e:
                error_msg = _describe_git_error(e, "git worktree list")
                logger.debug(error_msg)
                raise GitOperationError("list_worktrees", message=error_msg) from e

        worktree_list = parse_worktree_porcelain(output)
        logger.debug(f"Found {len(worktree_list)} worktrees")
        for wt in worktree_list:
            logger.debug(f"  {wt}")
        return worktree_list

    def branch_exists(self, branch_name: str) -> bool:
        """Check whether a local branch exists."""
        with self._repo() as repo:
            try:
                repo.git.show_ref("--verify", "--quiet", f"{BRANCH_REF_PREFIX}{branch_name}")
                return True
            except git.exc.GitCommandError:
                return False

    def current_branch(self) -> str:
        """Name of the checked out branch, or "HEAD" when detached."""
        with self._repo() as repo:
            try:
                return repo.git.rev_parse("--abbrev-ref", "HEAD")
            except git.exc.GitCommandError as e:
                error_msg = _describe_git_error(e, "git rev-parse")
                raise GitOperationError("current_branch", message=error_msg) from e

    def add_worktree(self, path: str, branch_name: str, create_branch: bool) -> str:
        """Create a worktree at path for branch_name.

        Args:
            path: Target directory, relative to the invocation directory or absolute
            branch_name: Branch to check out
            create_branch: Create the branch together with the worktree

        Returns:
            Absolute path of the new worktree
        """
        abs_path = self._resolve_path(path)
        if create_branch:
            args = ["add", "-b", branch_name, abs_path]
        else:
            args = ["add", abs_path, branch_name]

        with self._repo() as repo:
            try:
                output = repo.git.worktree(*args)
            except git.exc.GitCommandError as e:
                error_msg = _describe_git_error(e, "git worktree add")
                logger.debug(f"Failed to add worktree at {abs_path}: {error_msg}")
                raise GitOperationError("add_worktree", branch_name, error_msg) from e

        if output:
            logger.debug(output)
        logger.info(f"Added worktree at {abs_path} for branch {branch_name}")
        return abs_path

    def remove_worktree(self, path: str) -> None:
        """Remove the worktree at path.

        Raises:
            GitOperationError: git refused (not a worktree, dirty, main worktree, ...)
        """
        abs_path = self._resolve_path(path)
        with self._repo() as repo:
            try:
                repo.git.worktree("remove", abs_path)
            except git.exc.GitCommandError as e:
                error_msg = _describe_git_error(e, "git worktree remove")
                logger.debug(f"Failed to remove worktree at {abs_path}: {error_msg}")
                raise GitOperationError("remove_worktree", path, error_msg) from e

        logger.info(f"Removed worktree at {abs_path}")

    def merge(self, branch_name: str) -> tuple[bool, str]:
        """Merge branch_name into the current branch.

        Returns:
            Tuple of (success, output). success is False when git reports a
            non-zero result (conflicts, or a merge git refused to start).
        """
        with self._repo() as repo:
            try:
                output = repo.git.merge(branch_name)
                logger.info(f"Merged {branch_name}")
                return True, output
            except git.exc.GitCommandError as e:
                logger.info(_describe_git_error(e, "git merge"))
                streams = (_clean_stream(e.stdout), _clean_stream(e.stderr))
                output = "\n".join(part for part in streams if part)
                return False, output

    def is_listed(self, path: str, worktrees: Optional[list[WorktreeInfo]] = None) -> bool:
        """Check whether path refers to one of the listed worktrees."""
        target = os.path.realpath(self._resolve_path(path))
        if worktrees is None:
            worktrees = self.list_worktrees()
        return any(os.path.realpath(wt.path) == target for wt in worktrees)
