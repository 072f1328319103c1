"""Command-line entry point: dispatches a command to WorktreeManager."""

import os
import sys
from typing import List, Optional

from git_worktree_manager.cli.args import get_prog_name, parse_args
from git_worktree_manager.config import Config
from git_worktree_manager.constants import COMMAND_ALIASES, SHELL_FUNCTION
from git_worktree_manager.core import WorktreeManager
from git_worktree_manager.exceptions import (
    GitOperationError,
    MissingArgumentError,
    WorktreeManagerError,
    WorktreeNotFoundError,
)
from git_worktree_manager.formatters import format_usage
from git_worktree_manager.logging_config import get_logger, setup_logging
from git_worktree_manager.services.display_service import DisplayService
from git_worktree_manager.utils.prompt import get_confirmation_reader

logger = get_logger(__name__)


def _arg(args: List[str], index: int) -> Optional[str]:
    return args[index] if len(args) > index else None


def run_command(manager: WorktreeManager, command: str, args: List[str]) -> int:
    """Run a canonical command; errors propagate to the caller."""
    if command == "new":
        manager.create(_arg(args, 0), _arg(args, 1))
    elif command == "rm":
        manager.remove(_arg(args, 0))
    elif command == "list":
        manager.list_worktrees()
    elif command == "merge":
        manager.merge(_arg(args, 0))
    elif command == "switch":
        manager.switch(_arg(args, 0))
    elif command == "clean":
        manager.clean(get_confirmation_reader(sys.stdin, manager.display.console))
    return 0


def _report_error(display: DisplayService, error: WorktreeManagerError) -> None:
    if isinstance(error, MissingArgumentError):
        display.error(error.message)
        if error.usage:
            display.plain(f"Usage: {error.usage}")
    elif isinstance(error, WorktreeNotFoundError):
        display.error(error.message)
        display.display_available(error.worktrees)
    elif isinstance(error, GitOperationError) and error.message:
        display.error(error.message)
    else:
        display.error(str(error))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    prog = get_prog_name()
    parsed_args = parse_args(argv, prog=prog)

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    display = DisplayService(no_color=parsed_args.no_color)
    try:
        config = Config(
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            no_color=parsed_args.no_color,
            prog_name=prog,
            worktree_parent=parsed_args.parent,
        )
    except ValueError as e:
        display.error(str(e))
        return 1

    if parsed_args.debug:
        display.console.print("[yellow]Debug mode enabled[/yellow]")
        display.console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            display.console.print(f"  {key}: {value}")

    if parsed_args.help or not parsed_args.command:
        display.plain(format_usage(config.prog_name))
        return 0

    command = COMMAND_ALIASES.get(parsed_args.command)
    if command is None:
        logger.debug(f"Unknown command: {parsed_args.command}")
        display.plain(format_usage(config.prog_name))
        return 1

    if command == "shell-init":
        display.plain(SHELL_FUNCTION.format(prog=config.prog_name))
        return 0

    manager = WorktreeManager(os.getcwd(), config, display=display)
    try:
        return run_command(manager, command, parsed_args.args)
    except WorktreeManagerError as e:
        logger.debug(f"{command} failed: {e}")
        _report_error(display, e)
        return 1
    except KeyboardInterrupt:
        display.console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        display.error(f"Error: {e}")
        if parsed_args.debug:
            display.console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
