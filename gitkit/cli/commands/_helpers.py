"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from gitkit.core.result import Err, Result
from gitkit.git.errors import GitError
from gitkit.output.errors import git_error_exit_code, print_git_error

if TYPE_CHECKING:
    from gitkit.cli.context import CLIContext


def unwrap_or_exit[T](result: Result[T, GitError], ctx: CLIContext) -> T:
    """Return the value of an Ok, or print the error and exit.

    Replaces the common pattern:
        match result:
            case Err(e):
                print_git_error(e, ctx.console)
                raise typer.Exit(code=git_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_git_error(result.error, ctx.console)
        raise typer.Exit(code=git_error_exit_code(result.error))
    return result.value
