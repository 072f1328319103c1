"""Configuration handling for git-worktree-manager"""

from dataclasses import dataclass


@dataclass
class Config:
    """Configuration for git-worktree-manager with validation."""

    # Output
    verbose: bool = False
    debug: bool = False
    no_color: bool = False

    # Name shown in usage and hint lines
    prog_name: str = "wt"

    # Directory, relative to the current one, that default worktree paths are created in
    worktree_parent: str = ".."

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_prog_name()
        self._validate_worktree_parent()

    def _validate_prog_name(self):
        """Validate prog_name is not empty."""
        if not self.prog_name or not self.prog_name.strip():
            raise ValueError("prog_name cannot be empty")
        self.prog_name = self.prog_name.strip()

    def _validate_worktree_parent(self):
        """Validate worktree_parent is not empty."""
        if not self.worktree_parent or not self.worktree_parent.strip():
            raise ValueError("worktree_parent cannot be empty")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "verbose": self.verbose,
            "debug": self.debug,
            "no_color": self.no_color,
            "prog_name": self.prog_name,
            "worktree_parent": self.worktree_parent,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "verbose",
            "debug",
            "no_color",
            "prog_name",
            "worktree_parent",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
