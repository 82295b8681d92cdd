"""Branches on a remote (refs/remotes/<remote>/...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitkit.core.result import Err, Ok, Result
from gitkit.git.branch import Branch, is_merged
from gitkit.git.commit import Commit, new_commit
from gitkit.git.errors import GitError

if TYPE_CHECKING:
    from gitkit.git.remote import Remote
    from gitkit.git.repository import Repository

__all__ = ["RemoteBranch"]


class RemoteBranch:
    """A branch on a remote, e.g. `feature` on `origin`.

    Head and merge queries read the local remote-tracking refs; only
    `delete` contacts the remote. Equality is by full name.
    """

    def __init__(self, name: str, remote: Remote) -> None:
        self._name = name
        self.remote = remote

    @property
    def repository(self) -> Repository:
        return self.remote.repository

    @property
    def name(self) -> str:
        return self._name

    @property
    def full_name(self) -> str:
        return f"{self.remote.name}/{self._name}"

    def head_commit(self) -> Result[Commit, GitError]:
        result = self.repository.execute(
            f"get head commit of remote branch {self.full_name}", ["rev-parse", self.full_name]
        )
        if isinstance(result, Err):
            return result
        return new_commit(self.repository, result.value.strip())

    def is_main_branch(self) -> Result[bool, GitError]:
        main = self.remote.main_branch()
        if isinstance(main, Err):
            return main
        return Ok(main.value == self)

    def is_merged_to(self, target: Branch) -> Result[bool, GitError]:
        return is_merged(self.repository, self, target)

    def delete(self) -> Result[None, GitError]:
        """Delete the branch on the remote (`git push <remote> --delete <name>`).

        Warning: this pushes to the remote over the network and changes it for
        everybody. It is not idempotent: deleting a branch that is already gone
        fails.
        """
        result = self.repository.execute(
            f"delete remote branch {self.name} on {self.remote.name}",
            ["push", self.remote.name, "--delete", self.name],
        )
        if isinstance(result, Err):
            return result
        return Ok(None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteBranch):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self) -> int:
        return hash(self.full_name)

    def __str__(self) -> str:
        return f"Remote branch {self.name} @ {self.remote.name}"

    def __repr__(self) -> str:
        return f"RemoteBranch({self.full_name!r})"
