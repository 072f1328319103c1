"""Shared constants for git-worktree-manager."""

from typing import Dict

# Command aliases, mapped to the canonical command name
COMMAND_ALIASES: Dict[str, str] = {
    "new": "new",
    "add": "new",
    "create": "new",
    "rm": "rm",
    "remove": "rm",
    "delete": "rm",
    "list": "list",
    "ls": "list",
    "merge": "merge",
    "switch": "switch",
    "cd": "switch",
    "clean": "clean",
    "shell-init": "shell-init",
}

# Per-command usage lines, formatted with the program name
COMMAND_USAGE: Dict[str, str] = {
    "new": "{prog} new <branch-name> [path]",
    "rm": "{prog} rm <path-or-branch>",
    "merge": "{prog} merge <branch>",
    "switch": "{prog} switch <path-or-branch>",
}

# Symbol constants
SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "⚠"

# Rich styles for message kinds
STYLE_INFO = "blue"
STYLE_SUCCESS = "green"
STYLE_ERROR = "red"
STYLE_WARNING = "bold yellow"

# List layout: "  %-40s %-20s %s"
LIST_PATH_WIDTH = 40
LIST_BRANCH_WIDTH = 20
LIST_INDENT = "  "

CONFIRM_PROMPT = "Are you sure? (y/N) "

USAGE_TEXT = """\
Git Worktree Manager

Usage: {prog} [command] [args]

Commands:
  new <branch-name> [path]     Create new worktree
  rm <path-or-branch>          Remove worktree
  list                         List all worktrees
  merge <branch>               Merge branch from worktree
  switch <path-or-branch>      Switch to worktree directory
  clean                        Remove all worktrees except main
  shell-init                   Print the wtcd shell function

Options:
  -h, --help                   Show this message
  --version                    Show version
  -v, --verbose                Show verbose output
  --debug                      Show debug information
  --no-color                   Disable colored output
  --parent DIR                 Directory for default worktree paths (default ..)

Examples:
  {prog} new feature-ai ../app-ai
  {prog} new hotfix-123
  {prog} rm ../app-ai
  {prog} merge feature-ai
  {prog} switch app-ai"""

# Shell function that turns the final "cd <path>" line of `switch` into a directory change
SHELL_FUNCTION = """\
wtcd() {{
    local target
    target=$({prog} switch "$1" | tail -n 1 | sed 's/^cd //')
    if [ -n "$target" ] && [ -d "$target" ]; then
        cd "$target"
    fi
}}"""
