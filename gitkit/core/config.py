"""Typed configuration loading and access.

Configuration is optional: every field has a default that reproduces the
stock behaviour (plain `git` on PATH, no timeout, `master, main, primary`
as main branch fallbacks).

Example `.gitkit.toml`:

    [git]
    executable = "/usr/local/bin/git"
    timeout = 30.0

    [branches]
    main_fallbacks = ["main", "trunk"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_str_list, get_table

__all__ = [
    "BranchesConfig",
    "ConfigError",
    "DEFAULT_BRANCH_KEY",
    "DEFAULT_MAIN_FALLBACKS",
    "GitConfig",
    "ToolConfig",
    "load_config",
    "load_config_or_default",
]

DEFAULT_MAIN_FALLBACKS: tuple[str, ...] = ("master", "main", "primary")
DEFAULT_BRANCH_KEY = "init.defaultBranch"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ToolConfig:
    """How the git executable is invoked.

    Attributes:
        executable: git binary name or path
        timeout: seconds per invocation, None for no limit
    """

    executable: str = "git"
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class BranchesConfig:
    """Main branch heuristic settings.

    Attributes:
        main_fallbacks: names tried, in order, after the configured default
        default_branch_key: git config key holding the default branch name
    """

    main_fallbacks: tuple[str, ...] = DEFAULT_MAIN_FALLBACKS
    default_branch_key: str = DEFAULT_BRANCH_KEY


@dataclass(frozen=True, slots=True)
class GitConfig:
    """Main configuration container."""

    tool: ToolConfig = field(default_factory=ToolConfig)
    branches: BranchesConfig = field(default_factory=BranchesConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> GitConfig:
        """Create GitConfig from a mapping (parsed TOML).

        Raises:
            ValueError: timeout is not a positive number
        """
        git: StrDict = get_table(data, "git") or {}
        branches: StrDict = get_table(data, "branches") or {}

        timeout = get_float(git, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"git.timeout must be positive, got {timeout}")

        return cls(
            tool=ToolConfig(
                executable=get_str(git, "executable") or "git",
                timeout=timeout,
            ),
            branches=BranchesConfig(
                main_fallbacks=get_str_list(branches, "main_fallbacks") or DEFAULT_MAIN_FALLBACKS,
                default_branch_key=get_str(branches, "default_branch_key") or DEFAULT_BRANCH_KEY,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[GitConfig, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(GitConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(GitConfig.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> GitConfig:
    """Load config from file, or return the default config on any failure."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return GitConfig()
