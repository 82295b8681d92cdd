"""Error values returned by git operations.

Each variant carries enough context to describe the failed operation; the
`message` property renders it for humans.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CommandFailed",
    "GitError",
    "InvalidCommitHash",
    "MissingWorkingDirectory",
    "NotFound",
    "ParseFailed",
]


@dataclass(frozen=True, slots=True)
class CommandFailed:
    """git exited with a non-zero status or could not be started.

    Attributes:
        operation: What was attempted, e.g. "list local branches"
        command: The full command line
        returncode: Process exit code (-1 if git could not run)
        stderr: Error output of the process
    """

    operation: str
    command: tuple[str, ...] = ()
    returncode: int = 1
    stderr: str = ""

    @property
    def message(self) -> str:
        detail = self.stderr.strip().splitlines()
        if detail:
            return f"could not {self.operation}: {detail[-1]}"
        return f"could not {self.operation} (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class ParseFailed:
    """git output did not have the expected shape."""

    operation: str
    detail: str

    @property
    def message(self) -> str:
        return f"could not {self.operation}: {self.detail}"


@dataclass(frozen=True, slots=True)
class InvalidCommitHash:
    hash: str

    @property
    def message(self) -> str:
        return f"invalid hash upon commit creation: {self.hash!r}"


@dataclass(frozen=True, slots=True)
class NotFound:
    """A requested branch or remote does not exist.

    Attributes:
        kind: What was looked up, e.g. "local branch", "remote"
        name: The name that was looked up
    """

    kind: str
    name: str

    @property
    def message(self) -> str:
        return f"could not find {self.kind} {self.name}"


@dataclass(frozen=True, slots=True)
class MissingWorkingDirectory:
    @property
    def message(self) -> str:
        return "repository path not set"


GitError = CommandFailed | ParseFailed | InvalidCommitHash | NotFound | MissingWorkingDirectory
