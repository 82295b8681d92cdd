"""Error presentation utilities.

Centralized GitError formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitkit.core.errors import ErrorCode
from gitkit.git.errors import (
    CommandFailed,
    GitError,
    InvalidCommitHash,
    MissingWorkingDirectory,
    NotFound,
    ParseFailed,
)
from gitkit.output.console import Style

if TYPE_CHECKING:
    from gitkit.output.console import ConsoleProtocol

__all__ = ["print_git_error", "git_error_exit_code"]


def print_git_error(error: GitError, console: ConsoleProtocol) -> None:
    """Print a git error to the console with a hint where one helps."""
    console.error(error.message)
    match error:
        case CommandFailed(command=command) if command:
            console.print(f"command: {' '.join(command)}", Style.DIM)
        case NotFound(kind="current branch"):
            console.print("hint: HEAD is detached; check out a branch first", Style.DIM)
        case MissingWorkingDirectory():
            console.print("hint: pass --repo or run inside a working copy", Style.DIM)
        case _:
            pass


def git_error_exit_code(error: GitError) -> int:
    """Get exit code for a git error."""
    match error:
        case InvalidCommitHash():
            return int(ErrorCode.USER_ERROR)
        case CommandFailed() | ParseFailed():
            return int(ErrorCode.GIT_ERROR)
        case NotFound():
            return int(ErrorCode.NOT_FOUND)
        case MissingWorkingDirectory():
            return int(ErrorCode.CONFIG_ERROR)
    return int(ErrorCode.GIT_ERROR)
