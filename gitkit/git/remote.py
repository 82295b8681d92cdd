"""Remotes and their branches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitkit.core.result import Err, Ok, Result
from gitkit.git.branch import find_main_branch
from gitkit.git.errors import GitError, NotFound
from gitkit.git.parsing import parse_branch_list
from gitkit.git.remote_branch import RemoteBranch

if TYPE_CHECKING:
    from gitkit.git.repository import Repository

__all__ = ["Remote"]


class Remote:
    """A named remote of a repository.

    The main branch is resolved once and remembered for the lifetime of this
    object; it is never re-checked.
    """

    def __init__(self, name: str, repository: Repository) -> None:
        self._name = name
        self.repository = repository
        self._main_branch_name: str | None = None

    @property
    def name(self) -> str:
        return self._name

    def has_branch(self, name: str) -> Result[bool, GitError]:
        """Check for a remote-tracking ref refs/remotes/<remote>/<name>."""
        return self.repository.probe(
            f"check remote branch {name} on {self.name}",
            ["show-ref", "--verify", "--quiet", f"refs/remotes/{self.name}/{name}"],
        )

    def branch(self, name: str) -> Result[RemoteBranch, GitError]:
        existing = self.has_branch(name)
        if isinstance(existing, Err):
            return existing
        if not existing.value:
            return Err(NotFound("remote branch", f"{self.name}/{name}"))
        return Ok(RemoteBranch(name, self))

    def branches(self) -> Result[list[RemoteBranch], GitError]:
        """Branches as advertised by the remote itself (`git ls-remote --heads`).

        This contacts the remote.
        """
        result = self.repository.execute(
            f"list remote branches on {self.name}", ["ls-remote", "--heads", self.name]
        )
        if isinstance(result, Err):
            return result

        names = parse_branch_list(result.value)
        if isinstance(names, Err):
            return names
        return Ok([RemoteBranch(name, self) for name in names.value])

    def main_branch(self) -> Result[RemoteBranch, GitError]:
        if self._main_branch_name is None:
            found = find_main_branch(self.repository, self.has_branch)
            if isinstance(found, Err):
                return found
            self._main_branch_name = found.value
        return Ok(RemoteBranch(self._main_branch_name, self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Remote):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"Remote {self.name}"

    def __repr__(self) -> str:
        return f"Remote({self.name!r})"
