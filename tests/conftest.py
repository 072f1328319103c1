"""Pytest fixtures for git-worktree-manager tests"""
import io
import sys
import tempfile
from pathlib import Path

import git
import pytest

from git_worktree_manager.cli.main import main


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def run_cli(git_repo, monkeypatch, capsys):
    """Run the CLI in-process from inside git_repo.

    Returns a callable taking CLI arguments (and optional stdin text) that
    returns (exit_code, combined_output).
    """
    monkeypatch.chdir(git_repo.working_dir)
    monkeypatch.setattr(sys, "argv", ["wt"])

    def _run(*args, stdin=None):
        if stdin is not None:
            monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
        exit_code = main(list(args))
        captured = capsys.readouterr()
        return exit_code, captured.out + captured.err

    return _run


@pytest.fixture
def list_paths(git_repo):
    """Return the worktree paths git currently lists for git_repo."""

    def _list():
        output = git_repo.git.worktree("list", "--porcelain")
        return [line.split(" ", 1)[1] for line in output.splitlines() if line.startswith("worktree ")]

    return _list


def commit_file(repo_path, filename, content, message):
    """Write a file in a worktree and commit it there."""
    repo = git.Repo(repo_path)
    try:
        (Path(repo_path) / filename).write_text(content)
        repo.index.add([filename])
        repo.index.commit(message)
    finally:
        repo.close()
