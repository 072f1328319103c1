"""Main WorktreeManager class that coordinates the worktree commands."""

import os
from typing import Optional, Union

from git_worktree_manager.config import Config
from git_worktree_manager.constants import COMMAND_USAGE, CONFIRM_PROMPT
from git_worktree_manager.exceptions import (
    BranchNotFoundError,
    GitOperationError,
    MissingArgumentError,
    WorktreeNotFoundError,
)
from git_worktree_manager.logging_config import get_logger
from git_worktree_manager.models.worktree import WorktreeInfo
from git_worktree_manager.services.display_service import DisplayService
from git_worktree_manager.services.git import WorktreeService, resolve_worktree
from git_worktree_manager.utils.prompt import ConfirmationReader, is_affirmative

logger = get_logger(__name__)


class WorktreeManager:
    """Runs one worktree command against the repository containing cwd.

    Nothing is cached between calls: every command asks git for the current
    worktree listing.
    """

    def __init__(
        self,
        cwd: str,
        config: Optional[Union[Config, dict]] = None,
        display: Optional[DisplayService] = None,
    ):
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.cwd = cwd
        self.config = config
        self.display = display or DisplayService(no_color=config.no_color)
        self.worktree_service = WorktreeService(cwd)

    def _usage(self, command: str) -> str:
        return COMMAND_USAGE[command].format(prog=self.config.prog_name)

    def _require(self, value: Optional[str], message: str, command: str) -> str:
        if not value:
            raise MissingArgumentError(message, self._usage(command))
        return value

    def default_path(self, branch_name: str) -> str:
        """../<current-dir-name>-<branch>"""
        dir_name = os.path.basename(os.path.normpath(self.cwd))
        return os.path.join(self.config.worktree_parent, f"{dir_name}-{branch_name}")

    def create(self, branch_name: Optional[str], path: Optional[str] = None) -> str:
        """Create a worktree, creating the branch too when it does not exist yet.

        Returns:
            The path as given, or the derived default path
        """
        branch_name = self._require(branch_name, "Branch name required", "new")
        if not path:
            path = self.default_path(branch_name)

        if self.worktree_service.branch_exists(branch_name):
            self.display.info(f"Using existing branch: {branch_name}")
            self.worktree_service.add_worktree(path, branch_name, create_branch=False)
        else:
            self.display.info(f"Creating new branch: {branch_name}")
            self.worktree_service.add_worktree(path, branch_name, create_branch=True)

        self.display.success(f"Worktree created at: {path}")
        self.display.info(f"To switch to it: cd {path}")
        return path

    def remove(self, target: Optional[str]) -> str:
        """Remove a worktree given a path, a branch name or part of either.

        Tried in order, first match wins: the token as a path, an exact
        branch match, then a case-insensitive substring of path or branch.

        Returns:
            The path that was removed
        """
        target = self._require(target, "Path or branch name required", "rm")

        try:
            self.worktree_service.remove_worktree(target)
            self.display.success(f"Removed worktree: {target}")
            return target
        except GitOperationError as e:
            worktrees = self.worktree_service.list_worktrees()
            if self.worktree_service.is_listed(target, worktrees):
                # The token is a worktree path; git refused to remove it
                raise
            logger.debug(f"'{target}' is not a removable worktree path: {e}")

        match = resolve_worktree(worktrees, target)
        if match is None:
            raise WorktreeNotFoundError(f"No worktree found matching: {target}", worktrees)

        self.worktree_service.remove_worktree(match.path)
        self.display.success(f"Removed worktree: {match.path}")
        return match.path

    def list_worktrees(self) -> list[WorktreeInfo]:
        worktrees = self.worktree_service.list_worktrees()
        self.display.display_worktree_list(worktrees)
        return worktrees

    def merge(self, branch_name: Optional[str]) -> bool:
        """Merge branch_name into the current branch.

        Returns:
            True when merged, False when git stopped with conflicts. A
            conflict is reported as a warning, not an error; the repository
            is left for the user to resolve.
        """
        branch_name = self._require(branch_name, "Branch name required", "merge")
        current = self.worktree_service.current_branch()

        self.display.info(f"Merging {branch_name} into {current}")

        if not self.worktree_service.branch_exists(branch_name):
            raise BranchNotFoundError(branch_name)

        merged, output = self.worktree_service.merge(branch_name)
        if output:
            self.display.plain(output)

        if merged:
            self.display.success(f"Successfully merged {branch_name} into {current}")
        else:
            self.display.warning("Merge conflict! Resolve conflicts and commit")
        return merged

    def switch(self, target: Optional[str]) -> str:
        """Print a `cd <path>` line for the worktree matching target.

        The last line of output is meant for a shell function, since this
        process cannot change its parent's directory.
        """
        target = self._require(target, "Path or branch name required", "switch")
        worktrees = self.worktree_service.list_worktrees()

        match = resolve_worktree(worktrees, target)
        if match is None or match.is_orphaned:
            raise WorktreeNotFoundError(f"Worktree not found: {target}", worktrees)

        self.display.info(f"Switching to: {match.path}")
        self.display.plain(f"cd {match.path}")
        return match.path

    def clean(self, reader: ConfirmationReader) -> bool:
        """Remove every worktree except the main one, after confirmation.

        Individual removal failures are warned about and skipped.

        Returns:
            True if cleanup ran, False if cancelled
        """
        self.display.warning("This will remove all worktrees except the main one")
        reply = reader.read_reply(CONFIRM_PROMPT)
        self.display.plain(reply if reader.needs_echo and reply.isprintable() else "")

        if not is_affirmative(reply):
            self.display.info("Cancelled")
            return False

        worktrees = self.worktree_service.list_worktrees()
        failed = []
        for wt in worktrees:
            if wt.is_main:
                continue
            self.display.info(f"Removing: {wt.path}")
            try:
                self.worktree_service.remove_worktree(wt.path)
            except GitOperationError as e:
                failed.append(wt.path)
                self.display.warning(f"Failed to remove {wt.path}: {e.message or e}")

        if failed:
            logger.info(f"{len(failed)} worktree(s) could not be removed")
        self.display.success("Cleanup complete")
        return True
