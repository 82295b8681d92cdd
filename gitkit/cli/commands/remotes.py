"""Remote commands."""

from __future__ import annotations

import typer

from gitkit.cli.commands._helpers import unwrap_or_exit
from gitkit.cli.context import build_context
from gitkit.output.console import Style


def remotes() -> None:
    """List remotes."""
    ctx = build_context()
    found = unwrap_or_exit(ctx.repository.remotes(), ctx)
    if not found:
        ctx.console.print("no remotes", Style.DIM)
        return
    for remote in found:
        ctx.console.print(remote.name)


def remote_branches(
    remote: str = typer.Argument(..., help="Remote name, e.g. origin"),
) -> None:
    """List branches advertised by REMOTE (contacts the remote)."""
    ctx = build_context()
    found = unwrap_or_exit(ctx.repository.remote(remote), ctx)
    for branch in unwrap_or_exit(found.branches(), ctx):
        ctx.console.print(branch.full_name)
