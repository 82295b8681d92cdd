"""Running external commands.

Every process gitkit starts goes through `run`. The working directory is an
argument of each call; nothing about a child's environment is remembered
between calls.

Usage:
    match run(["git", "show-ref", "--heads"], cwd=repo_path):
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(error.stderr)
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitkit.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that exited non-zero or never ran.

    Attributes:
        command: argv as passed to `run`
        returncode: exit status, -1 when the process could not start or timed out
        stdout: whatever was printed before the failure
        stderr: error output, or the reason the process did not run
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def started(self) -> bool:
        return self.returncode != -1

    def __str__(self) -> str:
        shown = " ".join(self.command[:3])
        if len(self.command) > 3:
            shown += " ..."
        return f"{shown} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
    *,
    input: str | None = None,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Run `cmd` in `cwd` and return its stdout.

    Args:
        cmd: argv
        cwd: working directory of the child
        env: variables set on top of the current environment
        input: text written to stdin; undecodable bytes read from a child come
            back as surrogate escapes and are written out unchanged
        timeout: seconds before the child is killed, None to wait forever
    """
    command = tuple(cmd)
    try:
        proc = subprocess.run(
            list(command),
            cwd=cwd,
            env=_child_env(env),
            input=input,
            capture_output=True,
            encoding="utf-8",
            errors="surrogateescape",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        partial = e.stdout if isinstance(e.stdout, str) else ""
        return Err(ProcessError(command, -1, partial, f"timed out after {timeout}s"))
    except OSError as e:
        return Err(ProcessError(command, -1, "", str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command, proc.returncode, proc.stdout, proc.stderr))
    return Ok(proc.stdout)


def _child_env(extra: Mapping[str, str] | None) -> dict[str, str] | None:
    if not extra:
        return None
    return {**os.environ, **extra}
