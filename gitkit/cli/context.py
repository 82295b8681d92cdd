from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from gitkit.core.config import GitConfig, load_config, load_config_or_default
from gitkit.core.errors import ErrorCode
from gitkit.core.result import Err
from gitkit.git.repository import Repository
from gitkit.output.console import ConsoleProtocol, RichConsole

REPO_ENV = "GITKIT_REPO"
CONFIG_ENV = "GITKIT_CONFIG"
DEFAULT_CONFIG_NAME = ".gitkit.toml"


@dataclass(frozen=True, slots=True)
class CLIContext:
    repository: Repository
    config: GitConfig
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()
    repo_path = Path(os.environ.get(REPO_ENV) or ".")

    explicit = os.environ.get(CONFIG_ENV)
    if explicit:
        config_result = load_config(Path(explicit))
        if isinstance(config_result, Err):
            console.error(config_result.error.message)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        config = config_result.value
    else:
        config = load_config_or_default(repo_path / DEFAULT_CONFIG_NAME)

    return CLIContext(
        repository=Repository(repo_path, config),
        config=config,
        console=console,
    )
