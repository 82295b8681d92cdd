"""Local and remote branch commands."""

from __future__ import annotations

import typer

from gitkit.cli.commands._helpers import unwrap_or_exit
from gitkit.cli.context import CLIContext, build_context
from gitkit.core.result import Ok
from gitkit.git.local_branch import LocalBranch
from gitkit.git.remote_branch import RemoteBranch
from gitkit.output.console import Style


def branches() -> None:
    """List local branches (* current, [main] main branch)."""
    ctx = build_context()
    repo = ctx.repository

    listed = unwrap_or_exit(repo.branches(), ctx)
    if not listed:
        ctx.console.print("no branches yet", Style.DIM)
        return

    # Markers are best effort: a detached HEAD or a missing main branch is fine here
    current = repo.current_branch()
    main = repo.main_branch()
    current_branch = current.value if isinstance(current, Ok) else None
    main_branch = main.value if isinstance(main, Ok) else None

    for branch in listed:
        is_current = branch == current_branch
        marker = "*" if is_current else " "
        suffix = " [main]" if branch == main_branch else ""
        style = Style.BOLD if is_current else Style.DEFAULT
        ctx.console.print(f"{marker} {branch.name}{suffix}", style)


def current() -> None:
    """Print the checked out branch."""
    ctx = build_context()
    branch = unwrap_or_exit(ctx.repository.current_branch(), ctx)
    ctx.console.print(branch.name)


def main_branch(
    remote: str | None = typer.Option(None, "--remote", "-r", help="Resolve on this remote"),
) -> None:
    """Print the main branch of the repository or of a remote."""
    ctx = build_context()
    if remote is None:
        branch = unwrap_or_exit(ctx.repository.main_branch(), ctx)
        ctx.console.print(branch.full_name)
        return

    found = unwrap_or_exit(ctx.repository.remote(remote), ctx)
    remote_main = unwrap_or_exit(found.main_branch(), ctx)
    ctx.console.print(remote_main.full_name)


def merged(
    branch: str = typer.Argument(..., help="Branch to check"),
    into: str | None = typer.Option(None, "--into", help="Target branch (default: main branch)"),
    remote: str | None = typer.Option(
        None, "--remote", "-r", help="Compare branches of this remote"
    ),
) -> None:
    """Report whether BRANCH is merged into the target branch."""
    ctx = build_context()
    source, target = _resolve_pair(ctx, branch, into, remote)

    if unwrap_or_exit(source.is_merged_to(target), ctx):
        ctx.console.success(f"{source.full_name} is merged into {target.full_name}")
    else:
        message = f"{source.full_name} is not merged into {target.full_name}"
        ctx.console.print(message, Style.WARNING)


def delete(
    branch: str = typer.Argument(..., help="Branch to delete"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete a local branch even if unmerged"
    ),
    remote: str | None = typer.Option(
        None, "--remote", "-r", help="Delete the branch on this remote"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Do not ask before pushing a deletion"
    ),
) -> None:
    """Delete a local branch, or a branch on a remote."""
    ctx = build_context()
    repo = ctx.repository

    if remote is None:
        local = unwrap_or_exit(repo.branch(branch), ctx)
        unwrap_or_exit(local.force_delete() if force else local.delete(), ctx)
        ctx.console.success(f"deleted {local}")
        return

    found = unwrap_or_exit(repo.remote(remote), ctx)
    remote_branch = unwrap_or_exit(found.branch(branch), ctx)
    if not yes:
        typer.confirm(f"Delete {remote_branch.full_name} on {found.name} for everyone?", abort=True)
    unwrap_or_exit(remote_branch.delete(), ctx)
    ctx.console.success(f"deleted {remote_branch}")


def _resolve_pair(
    ctx: CLIContext,
    branch: str,
    into: str | None,
    remote: str | None,
) -> tuple[LocalBranch, LocalBranch] | tuple[RemoteBranch, RemoteBranch]:
    repo = ctx.repository
    if remote is None:
        local = unwrap_or_exit(repo.branch(branch), ctx)
        local_target = unwrap_or_exit(
            repo.branch(into) if into is not None else repo.main_branch(), ctx
        )
        return local, local_target

    found = unwrap_or_exit(repo.remote(remote), ctx)
    remote_branch = unwrap_or_exit(found.branch(branch), ctx)
    remote_target = unwrap_or_exit(
        found.branch(into) if into is not None else found.main_branch(), ctx
    )
    return remote_branch, remote_target
