"""Local branches (refs/heads)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitkit.core.result import Err, Ok, Result
from gitkit.git.branch import Branch, is_merged
from gitkit.git.commit import Commit, new_commit
from gitkit.git.errors import GitError, NotFound
from gitkit.git.remote_branch import RemoteBranch

if TYPE_CHECKING:
    from gitkit.git.remote import Remote
    from gitkit.git.repository import Repository

__all__ = ["LocalBranch"]

_REMOTES_PREFIX = "refs/remotes/"


class LocalBranch:
    """A local branch of a repository.

    Equality is by name. The upstream (tracking) branch is looked up once and
    then remembered for the lifetime of this object.
    """

    def __init__(self, name: str, repository: Repository) -> None:
        self._name = name
        self.repository = repository
        self._tracking_name: str | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def full_name(self) -> str:
        return self._name

    def head_commit(self) -> Result[Commit, GitError]:
        result = self.repository.execute(
            f"get head commit of local branch {self.name}", ["rev-parse", self.name]
        )
        if isinstance(result, Err):
            return result
        return new_commit(self.repository, result.value.strip())

    def is_main_branch(self) -> Result[bool, GitError]:
        main = self.repository.main_branch()
        if isinstance(main, Err):
            return main
        return Ok(main.value == self)

    def is_merged_to(self, target: Branch) -> Result[bool, GitError]:
        return is_merged(self.repository, self, target)

    def tracking_branch(self, remote: Remote) -> Result[RemoteBranch, GitError]:
        """The upstream branch of this branch on `remote`.

        Fails with NotFound if the upstream lives on another remote.
        """
        tracking = self._tracking_name
        if tracking is None:
            result = self.repository.execute(
                f"find tracking branch for {self.name}",
                ["rev-parse", "--symbolic-full-name", f"{self.name}@{{u}}"],
            )
            if isinstance(result, Err):
                return result
            tracking = result.value.strip().replace(_REMOTES_PREFIX, "", 1)
            if tracking:
                self._tracking_name = tracking

        prefix = f"{remote.name}/"
        if not tracking.startswith(prefix):
            return Err(NotFound(f"tracking branch of {self.name} on remote", remote.name))
        return Ok(RemoteBranch(tracking[len(prefix) :], remote))

    def commits_by_message(self, message: str) -> Result[list[Commit], GitError]:
        """Non-merge commits on this branch whose message contains `message`.

        The message is matched literally, not as a pattern.
        """
        result = self.repository.execute(
            f'search for commit message "{message}" on branch {self.full_name}',
            [
                "log",
                "--pretty=%h",
                "--no-merges",
                self.full_name,
                "--fixed-strings",
                "--grep",
                message,
            ],
        )
        if isinstance(result, Err):
            return result

        commits: list[Commit] = []
        for line in result.value.split():
            commit = new_commit(self.repository, line)
            if isinstance(commit, Err):
                return commit
            commits.append(commit.value)
        return Ok(commits)

    def delete(self) -> Result[None, GitError]:
        """Delete the branch; git refuses if it is not fully merged."""
        return self._delete(force=False)

    def force_delete(self) -> Result[None, GitError]:
        """Delete the branch even if it is not merged."""
        return self._delete(force=True)

    def _delete(self, *, force: bool) -> Result[None, GitError]:
        args = ["branch", "--delete"]
        if force:
            args.append("--force")
        args.append(self.name)

        result = self.repository.execute(f"delete local branch {self.name}", args)
        if isinstance(result, Err):
            return result
        return Ok(None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalBranch):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"Local branch {self.name}"

    def __repr__(self) -> str:
        return f"LocalBranch({self.name!r})"
