"""Commit objects.

A Commit is a hash bound to a repository. It holds no commit data itself:
every accessor runs `git show` and reads a single formatted field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from gitkit.core.result import Err, Ok, Result
from gitkit.git.errors import GitError, InvalidCommitHash, ParseFailed
from gitkit.git.parsing import parse_starred_branch_list

if TYPE_CHECKING:
    from gitkit.git.local_branch import LocalBranch
    from gitkit.git.remote import Remote
    from gitkit.git.remote_branch import RemoteBranch
    from gitkit.git.repository import Repository

__all__ = ["Commit", "is_valid_commit_hash", "new_commit"]

_HASH_RE = re.compile(r"^[0-9a-f]{5,40}$")
_PATCH_ID_RE = re.compile(r"^\S+")
# git log %aD, e.g. "Mon, 7 Oct 2024 14:03:05 +0200"
_AUTHOR_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"


def is_valid_commit_hash(hash: str) -> bool:
    """True for 5 to 40 lowercase hex characters."""
    return _HASH_RE.match(hash) is not None


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit of a repository, identified by its hash.

    Two commits are equal when their hashes are identical strings; an
    abbreviated and a full hash of the same commit are not equal. Use
    `equals_by_patch_id` to compare changes across rebases.

    Raises:
        ValueError: hash is not 5 to 40 lowercase hex characters
    """

    hash: str
    repository: Repository = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not is_valid_commit_hash(self.hash):
            raise ValueError(InvalidCommitHash(self.hash).message)

    def __str__(self) -> str:
        return f"Commit {self.hash}"

    def full_hash(self) -> Result[str, GitError]:
        return self._value("%H")

    def short_hash(self) -> Result[str, GitError]:
        return self._value("%h")

    def message(self) -> Result[str, GitError]:
        """Subject line."""
        return self._value("%s")

    def body(self) -> Result[str, GitError]:
        return self._value("%b")

    def author_name(self) -> Result[str, GitError]:
        return self._value("%aN")

    def author_email(self) -> Result[str, GitError]:
        return self._value("%aE")

    def author_date(self) -> Result[datetime, GitError]:
        """Author date as a timezone-aware datetime (from RFC 2822 `%aD`)."""
        result = self._value("%aD")
        if isinstance(result, Err):
            return result
        try:
            return Ok(datetime.strptime(result.value, _AUTHOR_DATE_FORMAT))
        except ValueError:
            return Err(
                ParseFailed(
                    f"read author date of commit {self.hash}",
                    f"unexpected date: {result.value!r}",
                )
            )

    def author_date_relative(self) -> Result[str, GitError]:
        """Author date relative to now, e.g. "3 days ago"."""
        return self._value("%ar")

    def patch_id(self) -> Result[str, GitError]:
        """Content identity of this commit's diff (`git show | git patch-id`)."""
        operation = f"get patch-id for commit {self.hash}"
        diff = self.repository.execute(operation, ["show", self.hash])
        if isinstance(diff, Err):
            return diff

        result = self.repository.execute(operation, ["patch-id"], input=diff.value)
        if isinstance(result, Err):
            return result

        m = _PATCH_ID_RE.match(result.value)
        if m is None:
            return Err(ParseFailed(operation, "git patch-id printed no id"))
        return Ok(m.group(0))

    def local_branches_containing(self) -> Result[list[LocalBranch], GitError]:
        """All local branches whose history contains this commit."""
        from gitkit.git.local_branch import LocalBranch

        result = self.repository.execute(
            f"list local branches containing commit {self.hash}",
            ["branch", "--contains", self.hash],
        )
        if isinstance(result, Err):
            return result

        names = parse_starred_branch_list(result.value)
        if isinstance(names, Err):
            return names

        # "(HEAD detached at ...)" is not a branch
        return Ok([LocalBranch(n, self.repository) for n in names.value if not n.startswith("(")])

    def remote_branches_containing(self, remote: Remote) -> Result[list[RemoteBranch], GitError]:
        """All branches of `remote` whose history contains this commit."""
        from gitkit.git.remote_branch import RemoteBranch

        result = self.repository.execute(
            f"list remote branches containing commit {self.hash}",
            ["branch", "--all", "--contains", self.hash],
        )
        if isinstance(result, Err):
            return result

        names = parse_starred_branch_list(result.value)
        if isinstance(names, Err):
            return names

        marker = f"remotes/{remote.name}/"
        branches: list[RemoteBranch] = []
        for name in names.value:
            if not name.startswith(marker):
                continue
            branch = name[len(marker) :]
            if branch == "HEAD":
                continue
            branches.append(RemoteBranch(branch, remote))
        return Ok(branches)

    def equals_by_patch_id(self, other: Commit) -> bool:
        """True if both commits introduce the same change.

        False when either patch-id cannot be computed.
        """
        mine = self.patch_id()
        if isinstance(mine, Err):
            return False
        theirs = other.patch_id()
        if isinstance(theirs, Err):
            return False
        return mine.value == theirs.value

    def _value(self, placeholder: str) -> Result[str, GitError]:
        result = self.repository.execute(
            f"get log data for commit {self.hash}",
            ["show", self.hash, f"--pretty=format:{placeholder}", "--no-patch"],
        )
        return result.map(str.strip)


def new_commit(repository: Repository, hash: str) -> Result[Commit, GitError]:
    """Create a Commit, returning an error instead of raising on a bad hash."""
    if not is_valid_commit_hash(hash):
        return Err(InvalidCommitHash(hash))
    return Ok(Commit(hash, repository))
