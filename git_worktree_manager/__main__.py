"""Allow running as `python -m git_worktree_manager`."""

import sys

from git_worktree_manager.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
