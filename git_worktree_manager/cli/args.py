"""Command-line argument parsing for git-worktree-manager."""

import argparse
import os
import sys
from typing import List, Optional

from git_worktree_manager.__version__ import __version__

DEFAULT_PROG = "wt"


def get_prog_name(argv0: Optional[str] = None) -> str:
    """Name to show in usage text; script and module invocations show as `wt`."""
    name = os.path.basename(argv0 if argv0 is not None else sys.argv[0])
    if not name or name == "wt.sh" or name.endswith(".py"):
        return DEFAULT_PROG
    return name


def build_parser(prog: str = DEFAULT_PROG) -> argparse.ArgumentParser:
    # Help is rendered by the dispatcher so that `-h` and a bare invocation match
    parser = argparse.ArgumentParser(prog=prog, add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="Show usage")
    parser.add_argument("--version", action="version", version=f"git-worktree-manager {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--parent",
        default="..",
        metavar="DIR",
        help="Directory new worktrees are created in when no path is given (default: ..)",
    )
    parser.add_argument("command", nargs="?", default="", help="Command to run")
    # Options are only read before the command; everything after it, including
    # tokens starting with "-", belongs to the command
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")
    return parser


def parse_args(argv: Optional[List[str]] = None, prog: str = DEFAULT_PROG) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = build_parser(prog)
    return parser.parse_args(argv)
