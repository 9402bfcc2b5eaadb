"""Pytest configuration and shared fixtures."""

import shutil
import subprocess
from pathlib import Path

import pytest

# ============================================================================
# Git Repository Helpers
# ============================================================================
# These helpers consolidate git setup code to avoid duplication across tests.
# Use these functions in fixtures to create consistent test repositories.

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def run_git(path: Path, *args: str) -> str:
    """Run a git command in path and return its stripped stdout.

    Raises:
        subprocess.CalledProcessError: If the git command fails.
    """
    result = subprocess.run(
        ["git", *args],
        cwd=path,
        check=True,
        capture_output=True,
        timeout=5,
    )
    return result.stdout.decode("utf-8").strip()


def init_git_repo(
    path: Path,
    user_name: str = "Test User",
    user_email: str = "test@example.com",
) -> None:
    """Initialize a git repository with user configuration.

    Args:
        path: Directory to initialize as a git repository.
        user_name: Git user.name configuration value.
        user_email: Git user.email configuration value.

    Raises:
        subprocess.CalledProcessError: If git commands fail.
    """
    run_git(path, "init")
    run_git(path, "config", "user.name", user_name)
    run_git(path, "config", "user.email", user_email)


def git_add_and_commit(
    path: Path,
    message: str = "Initial commit",
    add_all: bool = True,
) -> None:
    """Stage files and create a git commit.

    Args:
        path: Git repository root directory.
        message: Commit message.
        add_all: If True, stages all files with 'git add .'.

    Raises:
        subprocess.CalledProcessError: If git commands fail.
    """
    if add_all:
        run_git(path, "add", ".")
    run_git(path, "commit", "-m", message)


def create_test_files(path: Path, files: dict[str, str]) -> None:
    """Create multiple files in a directory.

    Args:
        path: Base directory for file creation.
        files: Mapping of relative file paths to contents.
               Parent directories are created automatically.
    """
    for file_path, content in files.items():
        full_path = path / file_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)


def create_git_repo(
    path: Path,
    files: dict[str, str] | None = None,
    commit_message: str = "Initial commit",
) -> Path:
    """Create a git repository, optionally with committed files.

    Args:
        path: Directory for the repository (created if doesn't exist).
        files: Optional mapping of file paths to contents.
        commit_message: Message for the initial commit.

    Returns:
        Path to the repository root.
    """
    path.mkdir(parents=True, exist_ok=True)
    init_git_repo(path)

    if files:
        create_test_files(path, files)
        git_add_and_commit(path, message=commit_message)

    return path


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a git repository with one committed file at the root and one
    in a subdirectory.

    Returns:
        Path to the git repository root.
    """
    return create_git_repo(
        tmp_path / "repo",
        files={
            "main.c": "int main(void) { return 0; }\n",
            "src/util.c": "int util(void) { return 1; }\n",
        },
    )


@pytest.fixture
def outside_dir(tmp_path: Path) -> Path:
    """Create a directory, with one file, that is not inside any git repository."""
    directory = tmp_path / "plain"
    directory.mkdir()
    (directory / "notes.txt").write_text("not version controlled\n")
    return directory


@pytest.fixture(autouse=True)
def isolate_git_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop git from walking above the test's temp directory."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
