"""Commit details."""

from __future__ import annotations

import typer

from gitkit.cli.commands._helpers import unwrap_or_exit
from gitkit.cli.context import build_context
from gitkit.core.result import Ok
from gitkit.git.commit import new_commit
from gitkit.output.console import Style


def show(
    commit: str | None = typer.Argument(None, help="Commit hash (default: HEAD)"),
) -> None:
    """Show metadata of a commit."""
    ctx = build_context()
    repo = ctx.repository

    if commit is None:
        target = unwrap_or_exit(repo.current_commit(), ctx)
    else:
        target = unwrap_or_exit(new_commit(repo, commit), ctx)

    full_hash = unwrap_or_exit(target.full_hash(), ctx)
    author = unwrap_or_exit(target.author_name(), ctx)
    email = unwrap_or_exit(target.author_email(), ctx)
    date = unwrap_or_exit(target.author_date(), ctx)
    relative = unwrap_or_exit(target.author_date_relative(), ctx)
    subject = unwrap_or_exit(target.message(), ctx)

    ctx.console.header(f"commit {full_hash}")
    ctx.console.print(f"author: {author} <{email}>")
    ctx.console.print(f"date: {date.isoformat()} ({relative})")
    patch_id = target.patch_id()
    ctx.console.print(f"patch-id: {patch_id.value if isinstance(patch_id, Ok) else '-'}", Style.DIM)
    ctx.console.newline()
    ctx.console.print(subject)
