from __future__ import annotations

import os
from pathlib import Path

import typer

from gitkit import __version__
from gitkit.cli.commands.branches import branches, current, delete, main_branch, merged
from gitkit.cli.commands.remotes import remote_branches, remotes
from gitkit.cli.commands.show import show
from gitkit.cli.context import CONFIG_ENV, REPO_ENV
from gitkit.output.log import configure_logging


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(branches)
app.command()(current)
app.command("main")(main_branch)
app.command()(merged)
app.command()(delete)
app.command()(remotes)
app.command("remote-branches")(remote_branches)
app.command()(show)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Working copy to operate on (default: current directory)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help=f"Config file (default: ${CONFIG_ENV}, then <repo>/.gitkit.toml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every git invocation."),
) -> None:
    configure_logging(verbose)

    if repo is not None:
        os.environ[REPO_ENV] = str(repo.expanduser())
    if config is not None:
        os.environ[CONFIG_ENV] = str(config.expanduser())


def main() -> None:
    app()
