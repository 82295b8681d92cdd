"""git tool version detection.

Some queries have a preferred form that only exists in newer git releases
(`git branch --show-current` appeared in 2.22). The version is read once per
executable and cached for the life of the process.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from gitkit.core.result import Err, Ok, Result
from gitkit.git.errors import CommandFailed, GitError, ParseFailed
from gitkit.platform.process import run as run_process

__all__ = [
    "GitVersion",
    "SHOW_CURRENT_MIN_VERSION",
    "clear_version_cache",
    "parse_git_version",
    "query_git_version",
]

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")


@dataclass(frozen=True, slots=True, order=True)
class GitVersion:
    major: int
    minor: int
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


SHOW_CURRENT_MIN_VERSION = GitVersion(2, 22, 0)

_cache: dict[str, GitVersion] = {}


def parse_git_version(output: str) -> Result[GitVersion, ParseFailed]:
    """Parse `git version` output.

    Accepts vendor suffixes such as `git version 2.39.3 (Apple Git-146)` or
    `git version 2.43.0.windows.1`.
    """
    text = output.strip()
    if text.startswith("git version"):
        text = text[len("git version") :].strip()
    m = _VERSION_RE.match(text)
    if m is None:
        return Err(ParseFailed("determine git version", f"unexpected output: {output.strip()!r}"))
    return Ok(GitVersion(int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)))


def query_git_version(
    executable: str,
    cwd: Path,
    *,
    timeout: float | None = None,
) -> Result[GitVersion, GitError]:
    """Run `<executable> version`, caching the first successful answer."""
    cached = _cache.get(executable)
    if cached is not None:
        return Ok(cached)

    result = run_process([executable, "version"], cwd=cwd, timeout=timeout)
    if isinstance(result, Err):
        e = result.error
        return Err(
            CommandFailed(
                operation="determine git version",
                command=e.command,
                returncode=e.returncode,
                stderr=e.stderr,
            )
        )

    parsed = parse_git_version(result.value)
    if isinstance(parsed, Ok):
        logger.debug("%s is version %s", executable, parsed.value)
        _cache[executable] = parsed.value
    return parsed


def clear_version_cache() -> None:
    _cache.clear()
