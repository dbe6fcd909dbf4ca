"""Git integration for SPECKIT.

This module provides the repository checks and initialization used by
`speckit init`.
"""

import subprocess
from pathlib import Path

from speckit.utils.errors import GitOperationError
from speckit.utils.logging import log_command

INITIAL_COMMIT_MESSAGE = "Initial commit from SpecKit"


def is_git_repo(path: Path | None = None) -> bool:
    """Check if a directory is inside a git work tree.

    Args:
        path: Directory to check (default: current directory)

    Returns:
        True if in a git repository
    """
    if path is None:
        path = Path.cwd()

    if not path.is_dir():
        return False

    try:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            capture_output=True,
            check=True,
            cwd=path,
        )
        log_command("git rev-parse --is-inside-work-tree", result.returncode)
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False


def _run_git(args: list[str], cwd: Path) -> None:
    command = " ".join(["git", *args])
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
    except subprocess.CalledProcessError as e:
        log_command(command, e.returncode)
        lines = (e.stderr or "").strip().splitlines()
        message = lines[0].strip() if lines else f"exit code {e.returncode}"
        raise GitOperationError(f"'{command}' failed: {message}") from e
    except FileNotFoundError as e:
        raise GitOperationError("git executable not found") from e
    log_command(command, result.returncode)


def init_git_repo(project_path: Path) -> None:
    """Initialize a repository and commit the project files.

    Args:
        project_path: Directory to initialize

    Raises:
        GitOperationError: If any git command fails
    """
    _run_git(["init"], project_path)
    _run_git(["add", "."], project_path)
    _run_git(["commit", "-m", INITIAL_COMMIT_MESSAGE], project_path)


__all__ = [
    "INITIAL_COMMIT_MESSAGE",
    "init_git_repo",
    "is_git_repo",
]
